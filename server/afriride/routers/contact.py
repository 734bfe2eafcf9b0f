"""Contact router for the contact form."""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..core.dependencies import ContactServiceDependency
from ..core.exceptions import ProblemDetailsException
from ..schemas.common import PROBLEM_RESPONSES
from ..schemas.contact import InquiryConfirmation, SubmitInquiryRequest
from ..services.contact_service import ContactService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/contact", tags=["contact"], responses=PROBLEM_RESPONSES)


@router.post("/submit", response_model=InquiryConfirmation)
async def submit_inquiry(
    request: SubmitInquiryRequest,
    contact_service: ContactService = ContactServiceDependency
) -> JSONResponse:
    """Store a contact inquiry."""
    try:
        inquiry = await contact_service.submit_inquiry(request)
    except ProblemDetailsException:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error in contact submission",
            extra={"error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    response_data = InquiryConfirmation(
        inquiry=inquiry,
        confirmation_seconds=contact_service.confirmation_seconds(),
    )
    return JSONResponse(status_code=201, content=response_data.model_dump(mode="json"))
