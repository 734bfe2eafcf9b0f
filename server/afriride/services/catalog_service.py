"""Catalog service for loading offerings from the data service."""

import logging
from typing import Optional

from ..core.data_service import DataService
from ..core.exceptions import CATALOG_FAILED_MESSAGE, DataServiceError, NotFoundError
from ..core.observability import metrics_collector
from ..models import Hotel, Tour, TransferRoute
from ..schemas.catalog import ALL_CATEGORIES, TransferGroup
from .variants import HOTEL, TOUR, TRANSFER, OfferingT, OfferingVariant

logger = logging.getLogger(__name__)


def tour_categories(tours: list[Tour]) -> list[str]:
    """Filter options for the tour list: 'All' then each category once, in list order."""
    categories = [ALL_CATEGORIES]
    for tour in tours:
        if tour.category not in categories:
            categories.append(tour.category)
    return categories


def filter_tours(tours: list[Tour], category: Optional[str]) -> list[Tour]:
    if not category or category == ALL_CATEGORIES:
        return tours
    return [tour for tour in tours if tour.category == category]


def group_routes(routes: list[TransferRoute]) -> list[TransferGroup]:
    """Group routes by departure point, keeping the order they arrived in."""
    groups: dict[str, TransferGroup] = {}
    for route in routes:
        group = groups.setdefault(route.from_location, TransferGroup(from_location=route.from_location))
        group.routes.append(route)
    return list(groups.values())


class CatalogService:
    """Service for reading hotels, tours and transfer routes."""

    def __init__(self, data_service: DataService):
        self.data_service = data_service

    async def list_offerings(
        self,
        variant: OfferingVariant[OfferingT],
        filters: Optional[dict] = None,
    ) -> list[OfferingT]:
        """
        Load every offering of a variant in its catalog order.

        Args:
            variant: Offering variant to load
            filters: Optional equality filters

        Returns:
            Parsed offerings

        Raises:
            DataServiceError: If the data service fails
        """
        try:
            records = await self.data_service.select(
                variant.collection,
                order_by=variant.order_by,
                descending=variant.descending,
                filters=filters,
            )
        except DataServiceError as e:
            logger.error(
                "Catalog load failed",
                extra={
                    "collection": variant.collection,
                    "error": str(e.cause or e),
                }
            )
            raise DataServiceError(
                detail=CATALOG_FAILED_MESSAGE,
                operation="select",
                collection=variant.collection,
                cause=e.cause,
            ) from e

        metrics_collector.record_catalog_load(variant.collection)
        logger.debug(
            "Catalog loaded",
            extra={"collection": variant.collection, "count": len(records)}
        )
        return [variant.parse(record) for record in records]

    async def list_hotels(self) -> list[Hotel]:
        """Hotels, best rated first."""
        return await self.list_offerings(HOTEL)

    async def list_tours(self) -> list[Tour]:
        """Tours ordered by category."""
        return await self.list_offerings(TOUR)

    async def list_transfer_routes(self) -> list[TransferRoute]:
        """Transfer routes ordered by departure point."""
        return await self.list_offerings(TRANSFER)

    async def get_offering(self, variant: OfferingVariant[OfferingT], service_id: str) -> OfferingT:
        """
        Get one offering by ID or raise NotFoundError.

        Args:
            variant: Variant the offering must belong to
            service_id: Offering ID

        Returns:
            The offering

        Raises:
            NotFoundError: If no offering of this variant has the ID
            DataServiceError: If the data service fails
        """
        offerings = await self.list_offerings(variant, filters={"id": service_id})
        if not offerings:
            logger.warning(
                "Offering not found",
                extra={"collection": variant.collection, "service_id": service_id}
            )
            raise NotFoundError(
                resource_type=variant.booking_type.value,
                resource_id=service_id,
            )
        return offerings[0]
