"""FastAPI dependencies wiring services to the data service."""

from fastapi import Depends

from .data_service import DataService, get_data_service
from ..services import BookingService, CatalogService, ContactService, ReservationService


DATA_SERVICE_DEPENDENCY = Depends(get_data_service)


async def get_catalog_service(data_service: DataService = DATA_SERVICE_DEPENDENCY) -> CatalogService:
    return CatalogService(data_service)


async def get_booking_service(data_service: DataService = DATA_SERVICE_DEPENDENCY) -> BookingService:
    return BookingService(data_service)


async def get_reservation_service(data_service: DataService = DATA_SERVICE_DEPENDENCY) -> ReservationService:
    return ReservationService(data_service)


async def get_contact_service(data_service: DataService = DATA_SERVICE_DEPENDENCY) -> ContactService:
    return ContactService(data_service)


CatalogServiceDependency = Depends(get_catalog_service)
BookingServiceDependency = Depends(get_booking_service)
ReservationServiceDependency = Depends(get_reservation_service)
ContactServiceDependency = Depends(get_contact_service)
