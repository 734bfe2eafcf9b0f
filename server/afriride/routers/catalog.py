"""Catalog router for listing hotels, tours and transfer routes."""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..core.dependencies import CatalogServiceDependency
from ..core.exceptions import ProblemDetailsException
from ..schemas.catalog import (
    ALL_CATEGORIES,
    GetOfferingRequest,
    HotelCatalog,
    ListToursRequest,
    OfferingResponse,
    TourCatalog,
    TransferCatalog,
)
from ..schemas.common import PROBLEM_RESPONSES
from ..services.catalog_service import CatalogService, filter_tours, group_routes, tour_categories
from ..services.variants import get_variant

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/catalog", tags=["catalog"], responses=PROBLEM_RESPONSES)


def _unexpected(operation: str, e: Exception) -> HTTPException:
    logger.error(
        f"Unexpected error in {operation}",
        extra={"error": str(e)},
        exc_info=True
    )
    return HTTPException(status_code=500, detail="Internal server error")


@router.post("/hotels", response_model=HotelCatalog)
async def list_hotels(catalog_service: CatalogService = CatalogServiceDependency) -> JSONResponse:
    """List hotels, best rated first."""
    try:
        hotels = await catalog_service.list_hotels()
    except ProblemDetailsException:
        raise
    except Exception as e:
        raise _unexpected("hotel listing", e)

    response_data = HotelCatalog(items=hotels)
    return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))


@router.post("/tours", response_model=TourCatalog)
async def list_tours(
    request: ListToursRequest,
    catalog_service: CatalogService = CatalogServiceDependency
) -> JSONResponse:
    """
    List tours ordered by category.

    The category filter narrows ``items`` only; ``categories`` always lists
    every category so the filter options stay stable.
    """
    try:
        tours = await catalog_service.list_tours()
    except ProblemDetailsException:
        raise
    except Exception as e:
        raise _unexpected("tour listing", e)

    response_data = TourCatalog(
        items=filter_tours(tours, request.category),
        categories=tour_categories(tours),
        selected_category=request.category or ALL_CATEGORIES,
    )
    return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))


@router.post("/transfers", response_model=TransferCatalog)
async def list_transfers(catalog_service: CatalogService = CatalogServiceDependency) -> JSONResponse:
    """List transfer routes ordered and grouped by departure point."""
    try:
        routes = await catalog_service.list_transfer_routes()
    except ProblemDetailsException:
        raise
    except Exception as e:
        raise _unexpected("transfer listing", e)

    response_data = TransferCatalog(items=routes, groups=group_routes(routes))
    return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))


@router.post("/get", response_model=OfferingResponse)
async def get_offering(
    request: GetOfferingRequest,
    catalog_service: CatalogService = CatalogServiceDependency
) -> JSONResponse:
    """Get one offering by booking type and ID."""
    variant = get_variant(request.booking_type)
    try:
        offering = await catalog_service.get_offering(variant, request.service_id)
    except ProblemDetailsException:
        raise
    except Exception as e:
        raise _unexpected("offering lookup", e)

    response_data = OfferingResponse(
        booking_type=variant.booking_type,
        price_unit=variant.price_unit,
        offering=offering,
    )
    return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))
