"""Contact service for storing contact form inquiries."""

import logging

from ..core.config import settings
from ..core.data_service import DataService
from ..models import ContactInquiry
from ..schemas.contact import SubmitInquiryRequest
from .forms import ContactFields, ContactForm

logger = logging.getLogger(__name__)


class ContactService:
    """Service for contact inquiries."""

    def __init__(self, data_service: DataService):
        self.data_service = data_service

    async def submit_inquiry(self, request: SubmitInquiryRequest) -> ContactInquiry:
        """
        Insert one contact inquiry.

        Raises:
            ValidationError: If a required field is blank
            DataServiceError: If the insert fails
        """
        form = ContactForm(self.data_service, auto_dismiss=False)
        form.fields = ContactFields(
            name=request.name,
            email=request.email,
            phone=request.phone,
            subject=request.subject,
            message=request.message,
        )

        inquiry = await form.submit()

        logger.info(
            "Contact inquiry submitted",
            extra={"subject": inquiry.subject}
        )
        return inquiry

    @staticmethod
    def confirmation_seconds() -> float:
        return settings.contact_confirmation_seconds
