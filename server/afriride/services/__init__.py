"""Service layer package."""

from .booking_service import BookingService
from .catalog_service import CatalogService
from .contact_service import ContactService
from .forms import BookingForm, ContactForm, FormState
from .reservation_service import ReservationService

__all__ = [
    "BookingForm",
    "BookingService",
    "CatalogService",
    "ContactForm",
    "ContactService",
    "FormState",
    "ReservationService",
]
