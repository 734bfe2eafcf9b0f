"""Booking-related Pydantic schemas."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..models import Booking, BookingType


class QuoteRequest(BaseModel):
    """Request schema for pricing a prospective booking."""

    booking_type: BookingType = Field(..., description="Variant of the offering")
    service_id: str = Field(..., min_length=1, max_length=64, description="Offering to book")
    booking_date: Optional[date] = Field(None, description="Service date; check-in for hotels")
    check_out_date: Optional[date] = Field(None, description="Check-out date, hotels only")
    number_of_people: int = Field(1, ge=1, le=100, description="Party size")


class CreateBookingRequest(BaseModel):
    """Request schema for submitting a booking."""

    booking_type: BookingType = Field(..., description="Variant of the offering")
    service_id: str = Field(..., min_length=1, max_length=64, description="Offering to book")
    customer_name: str = Field(..., min_length=1, max_length=255, description="Full name")
    customer_email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="Email used later to look the booking up",
    )
    customer_phone: str = Field(..., min_length=1, max_length=50, description="Phone number")
    booking_date: date = Field(..., description="Service date; check-in for hotels")
    check_out_date: Optional[date] = Field(None, description="Check-out date, required for hotels")
    number_of_people: int = Field(1, ge=1, le=100, description="Party size")
    special_requests: str = Field("", max_length=2000, description="Free-form notes")


class Quote(BaseModel):
    """Derived totals for a prospective booking."""

    booking_type: BookingType
    service_id: str
    unit_price: float = Field(..., description="Price per night or per person")
    price_unit: str = Field(..., description="Caption for the unit price")
    quantity: int = Field(..., description="Nights for hotels, people otherwise")
    nights: Optional[int] = Field(None, description="Stay length, hotels only")
    total_price: float
    formatted_total: str = Field(..., description="Total as displayed, e.g. '€300.00'")
    show_summary: bool = Field(..., description="False while there is nothing to price yet")


class BookingConfirmation(BaseModel):
    """Response after a booking was stored."""

    booking: Booking
    formatted_total: str
    message: str = "Booking Confirmed! We'll send you a confirmation email shortly with all the details."
    confirmation_seconds: float = Field(..., description="How long clients should show the confirmation")
