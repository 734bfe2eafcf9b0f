"""Booking router for pricing and submitting bookings."""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..core.dependencies import BookingServiceDependency
from ..core.exceptions import ProblemDetailsException
from ..schemas.booking import BookingConfirmation, CreateBookingRequest, Quote, QuoteRequest
from ..schemas.common import PROBLEM_RESPONSES
from ..services.booking_service import BookingService
from ..services.pricing import format_price

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/booking", tags=["booking"], responses=PROBLEM_RESPONSES)


@router.post("/quote", response_model=Quote)
async def quote_booking(
    request: QuoteRequest,
    booking_service: BookingService = BookingServiceDependency
) -> JSONResponse:
    """
    Price a prospective booking.

    Nothing is stored. Hotels are priced by nights between the two dates,
    tours and transfers by party size.
    """
    try:
        quote = await booking_service.quote(request)
    except ProblemDetailsException:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error in booking quote",
            extra={
                "booking_type": request.booking_type.value,
                "service_id": request.service_id,
                "error": str(e)
            },
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    return JSONResponse(status_code=200, content=quote.model_dump(mode="json"))


@router.post("/create", response_model=BookingConfirmation)
async def create_booking(
    request: CreateBookingRequest,
    booking_service: BookingService = BookingServiceDependency
) -> JSONResponse:
    """
    Submit a booking.

    Exactly one insert is attempted. On failure the client receives a 502
    problem document with a generic message and should keep the form as
    entered.
    """
    try:
        booking = await booking_service.create_booking(request)
    except ProblemDetailsException:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error in booking creation",
            extra={
                "booking_type": request.booking_type.value,
                "service_id": request.service_id,
                "error": str(e)
            },
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    response_data = BookingConfirmation(
        booking=booking,
        formatted_total=format_price(booking.total_price),
        confirmation_seconds=booking_service.confirmation_seconds(),
    )
    return JSONResponse(status_code=201, content=response_data.model_dump(mode="json"))
