"""Booking record definition."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingType(str, Enum):
    """Kind of offering a booking references."""
    TRANSFER = "transfer"
    HOTEL = "hotel"
    TOUR = "tour"


class BookingStatus(str, Enum):
    """Booking status enumeration; the backend sets PENDING on insert."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Booking(BaseModel):
    """Reservation against one offering, stored in the ``bookings`` collection."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    booking_type: BookingType
    customer_name: str
    customer_email: str
    customer_phone: str
    booking_date: date
    service_id: str
    number_of_people: int = Field(..., ge=1)
    special_requests: Optional[str] = None
    total_price: float = Field(..., ge=0)
    # Free-form on read so statuses added by staff tooling still load
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_record(self) -> dict[str, Any]:
        """Fields to send on insert; id, status and created_at are backend defaults."""
        return self.model_dump(
            mode="json",
            exclude={"id", "status", "created_at"},
            exclude_none=True,
        )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, type='{self.booking_type.value}', "
            f"service_id={self.service_id}, total_price={self.total_price})>"
        )
