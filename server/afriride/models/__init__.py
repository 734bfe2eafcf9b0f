"""Models module exporting the record shapes of every collection."""

from .booking import Booking, BookingStatus, BookingType
from .contact_inquiry import ContactInquiry
from .hotel import Hotel
from .tour import Tour
from .transfer_route import TransferRoute

__all__ = [
    # Offerings (read-only here)
    "Hotel",
    "Tour",
    "TransferRoute",

    # Records created by this service
    "Booking",
    "BookingStatus",
    "BookingType",
    "ContactInquiry",
]
