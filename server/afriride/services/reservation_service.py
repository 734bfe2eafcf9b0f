"""Reservation service for finding bookings by customer email."""

import logging

from ..core.data_service import DataService
from ..core.exceptions import LOOKUP_FAILED_MESSAGE, DataServiceError
from ..core.observability import metrics_collector
from ..models import Booking, BookingStatus, BookingType
from ..schemas.reservation import NO_RESERVATIONS_MESSAGE, Reservation, ReservationList
from .forms import normalize_email
from .pricing import format_price
from .variants import VARIANTS

logger = logging.getLogger(__name__)

# Label and icon per booking type
BOOKING_TYPE_DISPLAY: dict[BookingType, tuple[str, str]] = {
    booking_type: (variant.label, variant.icon)
    for booking_type, variant in VARIANTS.items()
}

# Badge color per status
STATUS_COLORS: dict[str, str] = {
    BookingStatus.CONFIRMED.value: "green",
    BookingStatus.PENDING.value: "yellow",
    BookingStatus.CANCELLED.value: "red",
}
DEFAULT_STATUS_COLOR = "gray"


def display_date(booking: Booking) -> str:
    """Booking date in long form, e.g. 'June 1, 2024'."""
    d = booking.booking_date
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def describe_booking(booking: Booking) -> Reservation:
    """Decorate a booking with its display label, icon and status badge."""
    label, icon = BOOKING_TYPE_DISPLAY[booking.booking_type]
    status = booking.status or BookingStatus.PENDING.value

    return Reservation(
        id=booking.id,
        short_id=(booking.id or "")[:8],
        booking_type=booking.booking_type,
        label=label,
        icon=icon,
        status=status,
        status_color=STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR),
        customer_name=booking.customer_name,
        customer_email=booking.customer_email,
        customer_phone=booking.customer_phone,
        booking_date=booking.booking_date,
        display_date=display_date(booking),
        number_of_people=booking.number_of_people,
        special_requests=booking.special_requests,
        total_price=booking.total_price,
        formatted_total=format_price(booking.total_price),
        created_at=booking.created_at,
    )


class ReservationService:
    """
    Service for reservation lookups.

    Anyone who knows an email address can list its bookings; there is no
    proof of ownership. This matches the public site and is a known gap.
    """

    def __init__(self, data_service: DataService):
        self.data_service = data_service

    async def find_bookings(self, email: str) -> list[Booking]:
        """
        Get every booking made with an email, newest first.

        Args:
            email: Customer email in any case

        Returns:
            Matching bookings; empty if there are none

        Raises:
            DataServiceError: If the data service fails
        """
        normalized = normalize_email(email)
        try:
            records = await self.data_service.select(
                "bookings",
                order_by="created_at",
                descending=True,
                filters={"customer_email": normalized},
            )
        except DataServiceError as e:
            logger.error(
                "Reservation lookup failed",
                extra={"error": str(e.cause or e)}
            )
            raise DataServiceError(
                detail=LOOKUP_FAILED_MESSAGE,
                operation="select",
                collection="bookings",
                cause=e.cause,
            ) from e

        bookings = [Booking.model_validate(record) for record in records]
        metrics_collector.record_reservation_lookup(len(bookings))
        logger.info(
            "Reservation lookup by unverified email",
            extra={"found": len(bookings)}
        )
        return bookings

    async def lookup(self, email: str) -> ReservationList:
        """Find bookings for an email and decorate them for display."""
        bookings = await self.find_bookings(email)
        return ReservationList(
            email=normalize_email(email),
            found=len(bookings),
            items=[describe_booking(booking) for booking in bookings],
            message=None if bookings else NO_RESERVATIONS_MESSAGE,
        )
