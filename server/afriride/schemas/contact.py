"""Contact inquiry Pydantic schemas."""

from pydantic import BaseModel, Field

from ..models import ContactInquiry


class SubmitInquiryRequest(BaseModel):
    """Request schema for the contact form."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field("", max_length=50)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1, max_length=5000)


class InquiryConfirmation(BaseModel):
    """Response after an inquiry was stored."""

    inquiry: ContactInquiry
    message: str = "Message Sent! Thank you for reaching out. We'll get back to you within 24 hours."
    confirmation_seconds: float
