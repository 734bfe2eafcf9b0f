"""Reservation router for looking up bookings by email."""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..core.dependencies import ReservationServiceDependency
from ..core.exceptions import ProblemDetailsException
from ..schemas.common import PROBLEM_RESPONSES
from ..schemas.reservation import LookupReservationsRequest, ReservationList
from ..services.reservation_service import ReservationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/reservation", tags=["reservation"], responses=PROBLEM_RESPONSES)


@router.post("/lookup", response_model=ReservationList)
async def lookup_reservations(
    request: LookupReservationsRequest,
    reservation_service: ReservationService = ReservationServiceDependency
) -> JSONResponse:
    """
    List bookings made with an email address, newest first.

    The email is not verified; knowing it is enough to see its bookings.
    No matches is a 200 with ``found`` 0 and a message.
    """
    try:
        reservations = await reservation_service.lookup(request.email)
    except ProblemDetailsException:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error in reservation lookup",
            extra={"error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    return JSONResponse(status_code=200, content=reservations.model_dump(mode="json"))
