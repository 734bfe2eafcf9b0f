"""Offering variants: what differs between hotel, tour and transfer bookings."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from ..models import BookingType, Hotel, Tour, TransferRoute

Offering = Union[Hotel, Tour, TransferRoute]
OfferingT = TypeVar("OfferingT", Hotel, Tour, TransferRoute)


@dataclass(frozen=True)
class OfferingVariant(Generic[OfferingT]):
    """
    Everything a booking flow needs to know about one kind of offering.

    Attributes:
        booking_type: Tag written on bookings of this variant
        model: Record class of the offering
        collection: Collection the offerings are read from
        order_by: Field the catalog is ordered by
        descending: Catalog order direction
        unit_price_field: Offering field holding the unit price
        capacity_field: Offering field bounding ``number_of_people``
        priced_by_nights: Quantity is nights (True) or people (False)
        price_unit: Caption shown next to the unit price
        label: Display name in reservation listings
        icon: Icon name in reservation listings
        max_people: Form limit on party size, if any
    """

    booking_type: BookingType
    model: type[OfferingT]
    collection: str
    order_by: str
    descending: bool
    unit_price_field: str
    capacity_field: str
    priced_by_nights: bool
    price_unit: str
    label: str
    icon: str
    max_people: Optional[int] = None

    def unit_price(self, offering: OfferingT) -> float:
        return getattr(offering, self.unit_price_field)

    def capacity(self, offering: OfferingT) -> int:
        return getattr(offering, self.capacity_field)

    def parse(self, record: dict) -> OfferingT:
        return self.model.model_validate(record)


HOTEL = OfferingVariant(
    booking_type=BookingType.HOTEL,
    model=Hotel,
    collection="hotels",
    order_by="rating",
    descending=True,
    unit_price_field="price_per_night",
    capacity_field="available_rooms",
    priced_by_nights=True,
    price_unit="per night",
    label="Hotel",
    icon="hotel",
    max_people=10,
)

TOUR = OfferingVariant(
    booking_type=BookingType.TOUR,
    model=Tour,
    collection="tours",
    order_by="category",
    descending=False,
    unit_price_field="price",
    capacity_field="max_participants",
    priced_by_nights=False,
    price_unit="per person",
    label="Tour",
    icon="map-pin",
)

TRANSFER = OfferingVariant(
    booking_type=BookingType.TRANSFER,
    model=TransferRoute,
    collection="transfer_routes",
    order_by="from_location",
    descending=False,
    unit_price_field="price",
    capacity_field="capacity",
    priced_by_nights=False,
    price_unit="per person",
    label="Transfer",
    icon="plane",
)

VARIANTS: dict[BookingType, OfferingVariant] = {
    variant.booking_type: variant for variant in (TRANSFER, HOTEL, TOUR)
}


def get_variant(booking_type: Union[BookingType, str]) -> OfferingVariant:
    """
    Look up the variant for a booking type tag.

    Raises:
        ValueError: If the tag is not a known booking type
    """
    return VARIANTS[BookingType(booking_type)]
