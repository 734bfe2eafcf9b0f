"""Gateway to the hosted Supabase project that stores every record."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError
from postgrest.types import ReturnMethod
from supabase import AsyncClient, acreate_client

from .config import settings
from .exceptions import DataServiceError, InternalServerError

logger = logging.getLogger(__name__)

# Collections this service may read
COLLECTIONS = frozenset({
    "hotels",
    "tours",
    "transfer_routes",
    "bookings",
    "contact_inquiries",
})

# Collections this service may insert into; nothing is ever updated or deleted
WRITABLE_COLLECTIONS = frozenset({"bookings", "contact_inquiries"})


def _check_collection(collection: str, *, write: bool = False) -> None:
    allowed = WRITABLE_COLLECTIONS if write else COLLECTIONS
    if collection not in allowed:
        verb = "written" if write else "read"
        raise ValueError(f"Collection '{collection}' cannot be {verb} by this service")


class DataService(ABC):
    """
    Select/insert access to named record collections.

    Implementations raise ``DataServiceError`` for every failure of the
    underlying service so callers have a single thing to catch.
    """

    @abstractmethod
    async def select(
        self,
        collection: str,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        filters: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch all records of a collection.

        Args:
            collection: Collection (table) name
            order_by: Field to order by
            descending: Order direction
            filters: Equality filters, field name to value

        Returns:
            List of records as plain dicts
        """

    @abstractmethod
    async def insert(self, collection: str, record: dict[str, Any]) -> None:
        """
        Create one record.

        Args:
            collection: Collection (table) name
            record: JSON-ready record fields
        """

    async def close(self) -> None:
        """Release any held connections."""


class SupabaseDataService(DataService):
    """DataService backed by the ``supabase`` async client."""

    def __init__(self, client: AsyncClient):
        self.client = client

    @classmethod
    async def connect(cls, url: str, key: str) -> "SupabaseDataService":
        """Create a client for the given project URL and public API key."""
        client = await acreate_client(url, key)
        return cls(client)

    async def select(
        self,
        collection: str,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        filters: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        _check_collection(collection)

        query = self.client.table(collection).select("*")
        for field, value in (filters or {}).items():
            query = query.eq(field, value)
        if order_by:
            query = query.order(order_by, desc=descending)

        try:
            response = await query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(
                "Data service select failed",
                extra={
                    "collection": collection,
                    "order_by": order_by,
                    "filters": sorted((filters or {}).keys()),
                    "error": str(e),
                },
            )
            raise DataServiceError(operation="select", collection=collection, cause=e) from e

        return response.data or []

    async def insert(self, collection: str, record: dict[str, Any]) -> None:
        _check_collection(collection, write=True)

        try:
            # Anonymous callers may insert but not read back, so ask for no representation
            await self.client.table(collection).insert(
                record, returning=ReturnMethod.minimal
            ).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(
                "Data service insert failed",
                extra={
                    "collection": collection,
                    "error": str(e),
                },
            )
            raise DataServiceError(operation="insert", collection=collection, cause=e) from e

        logger.debug("Record inserted", extra={"collection": collection})

    async def close(self) -> None:
        await self.client.postgrest.aclose()


_data_service: Optional[DataService] = None


async def init_data_service() -> DataService:
    """Connect the global data service from settings."""
    global _data_service
    if not settings.data_service_configured:
        logger.warning("Supabase URL or anon key is missing")
    _data_service = await SupabaseDataService.connect(
        settings.supabase_url, settings.supabase_anon_key
    )
    return _data_service


async def close_data_service() -> None:
    """Close the global data service."""
    global _data_service
    if _data_service is not None:
        await _data_service.close()
        _data_service = None


def data_service_ready() -> bool:
    """Return True once the global data service is connected."""
    return _data_service is not None


async def get_data_service() -> DataService:
    """
    Dependency function that provides the connected data service.

    Returns:
        DataService: The application's data service

    Raises:
        InternalServerError: If the service was never initialized
    """
    if _data_service is None:
        raise InternalServerError(detail="Data service is not initialized")
    return _data_service
