"""Booking service for pricing and submitting bookings."""

import logging

from ..core.config import settings
from ..core.data_service import DataService
from ..models import Booking
from ..schemas.booking import CreateBookingRequest, Quote, QuoteRequest
from .catalog_service import CatalogService
from .forms import BookingFields, BookingForm
from .pricing import format_price
from .variants import get_variant

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking-related operations."""

    def __init__(self, data_service: DataService):
        self.data_service = data_service
        self.catalog_service = CatalogService(data_service)

    async def _open_form(self, request: QuoteRequest | CreateBookingRequest) -> BookingForm:
        """Load the requested offering into a fresh booking form."""
        variant = get_variant(request.booking_type)
        offering = await self.catalog_service.get_offering(variant, request.service_id)

        # Confirmation display is the client's job over HTTP
        form = BookingForm(variant, self.data_service, auto_dismiss=False)
        form.open(offering)
        return form

    async def quote(self, request: QuoteRequest) -> Quote:
        """
        Price a prospective booking without storing anything.

        Args:
            request: Offering plus the fields that drive the price

        Returns:
            Derived totals

        Raises:
            NotFoundError: If the offering does not exist
            DataServiceError: If the offering cannot be loaded
        """
        form = await self._open_form(request)
        form.update(
            booking_date=request.booking_date or "",
            check_out_date=request.check_out_date or "",
            number_of_people=request.number_of_people,
        )
        quote = form.quote()
        variant = form.variant

        return Quote(
            booking_type=variant.booking_type,
            service_id=request.service_id,
            unit_price=quote.unit_price,
            price_unit=variant.price_unit,
            quantity=quote.quantity,
            nights=form.nights if variant.priced_by_nights else None,
            total_price=quote.total,
            formatted_total=quote.formatted_total,
            show_summary=quote.show_summary,
        )

    async def create_booking(self, request: CreateBookingRequest) -> Booking:
        """
        Validate, price and insert one booking.

        The total is always computed here from the stored unit price; no
        client-supplied price is accepted.

        Args:
            request: Booking form contents

        Returns:
            The booking as inserted

        Raises:
            NotFoundError: If the offering does not exist
            ValidationError: If the fields are incomplete or inconsistent
            CapacityExceededError: If the party is larger than the offering allows
            DataServiceError: If the insert fails
        """
        form = await self._open_form(request)
        form.fields = BookingFields(
            customer_name=request.customer_name,
            customer_email=request.customer_email,
            customer_phone=request.customer_phone,
            booking_date=request.booking_date,
            check_out_date=request.check_out_date or "",
            number_of_people=request.number_of_people,
            special_requests=request.special_requests,
        )

        booking = await form.submit()

        logger.info(
            "Booking created successfully",
            extra={
                "booking_type": booking.booking_type.value,
                "service_id": booking.service_id,
                "number_of_people": booking.number_of_people,
                "total_price": format_price(booking.total_price),
            }
        )
        return booking

    @staticmethod
    def confirmation_seconds() -> float:
        return settings.booking_confirmation_seconds
