"""Reservation lookup Pydantic schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models import BookingType

NO_RESERVATIONS_MESSAGE = "We couldn't find any reservations for this email address."


class LookupReservationsRequest(BaseModel):
    """Request schema for looking up bookings by email."""

    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        pattern=r"^\s*[^@\s]+@[^@\s]+\s*$",
        description="Email address the bookings were made with",
    )


class Reservation(BaseModel):
    """A booking decorated for display."""

    id: Optional[str] = None
    short_id: str = Field(..., description="First eight characters of the booking ID")
    booking_type: BookingType
    label: str = Field(..., description="Display name of the booking type")
    icon: str = Field(..., description="Icon name of the booking type")
    status: str
    status_color: str
    customer_name: str
    customer_email: str
    customer_phone: str
    booking_date: date
    display_date: str = Field(..., description="Booking date, e.g. 'June 1, 2024'")
    number_of_people: int
    special_requests: Optional[str] = None
    total_price: float
    formatted_total: str
    created_at: Optional[datetime] = None


class ReservationList(BaseModel):
    """Bookings for one email, newest first."""

    email: str
    found: int
    items: list[Reservation] = Field(default_factory=list)
    message: Optional[str] = Field(None, description="Shown when nothing was found")
