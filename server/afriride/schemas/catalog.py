"""Catalog-related Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from ..models import BookingType, Hotel, Tour, TransferRoute

ALL_CATEGORIES = "All"


class ListToursRequest(BaseModel):
    """Request schema for listing tours."""

    category: Optional[str] = Field(
        None,
        max_length=100,
        description=f"Only tours of this category; '{ALL_CATEGORIES}' or empty for every tour",
    )


class GetOfferingRequest(BaseModel):
    """Request schema for fetching one offering."""

    booking_type: BookingType = Field(..., description="Variant of the offering")
    service_id: str = Field(..., min_length=1, max_length=64, description="Offering ID")


class HotelCatalog(BaseModel):
    """Hotels, best rated first."""

    items: list[Hotel] = Field(default_factory=list)


class TourCatalog(BaseModel):
    """Tours ordered by category, with the category filter options."""

    items: list[Tour] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=lambda: [ALL_CATEGORIES])
    selected_category: str = ALL_CATEGORIES


class TransferGroup(BaseModel):
    """Transfer routes sharing a departure point."""

    from_location: str
    routes: list[TransferRoute] = Field(default_factory=list)


class TransferCatalog(BaseModel):
    """Transfer routes ordered and grouped by departure point."""

    items: list[TransferRoute] = Field(default_factory=list)
    groups: list[TransferGroup] = Field(default_factory=list)


class OfferingResponse(BaseModel):
    """A single offering of any variant."""

    booking_type: BookingType
    price_unit: str = Field(..., description="Caption for the unit price, e.g. 'per night'")
    offering: Hotel | Tour | TransferRoute
