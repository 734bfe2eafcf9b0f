"""Custom exceptions following RFC 9457 Problem Details for HTTP APIs."""

from typing import Any, Dict, Optional
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uuid
from datetime import datetime, timezone


BOOKING_FAILED_MESSAGE = "Failed to create booking. Please try again."
INQUIRY_FAILED_MESSAGE = "Failed to submit inquiry. Please try again."
LOOKUP_FAILED_MESSAGE = "Failed to fetch bookings. Please try again."
CATALOG_FAILED_MESSAGE = "Failed to load offerings. Please try again."


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class ProblemDetailsException(HTTPException):
    """
    Base exception class following RFC 9457 Problem Details for HTTP APIs.

    https://tools.ietf.org/rfc/rfc9457.txt
    """

    def __init__(
        self,
        status_code: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: Optional[str] = None,
        instance: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize Problem Details exception.

        Args:
            status_code: HTTP status code
            title: Short, human-readable summary of the problem type
            detail: Human-readable explanation specific to this occurrence
            type_uri: URI reference that identifies the problem type
            instance: URI reference that identifies the specific occurrence
            extensions: Additional problem-specific information
            headers: HTTP headers to include in response
        """
        self.status_code = status_code
        self.title = title
        self.type_uri = type_uri or f"about:blank#{status_code}"
        self.instance = instance
        self.extensions = extensions or {}

        self.problem_details = {
            "type": self.type_uri,
            "title": self.title,
            "status": self.status_code,
        }

        if detail:
            self.problem_details["detail"] = detail

        if self.instance:
            self.problem_details["instance"] = self.instance

        self.problem_details.update(self.extensions)

        super().__init__(
            status_code=status_code,
            detail=self.problem_details,
            headers=headers
        )

    @property
    def message(self) -> Optional[str]:
        """Human-readable detail of this occurrence."""
        return self.problem_details.get("detail")


class ValidationError(ProblemDetailsException):
    """Exception for business validation errors."""

    def __init__(
        self,
        detail: str = "The request data failed validation",
        errors: Optional[Dict[str, Any]] = None,
        instance: Optional[str] = None,
    ):
        extensions = {}
        if errors:
            extensions["errors"] = errors

        super().__init__(
            status_code=400,
            title="Validation Error",
            detail=detail,
            type_uri="https://afriride.al/problems/validation-error",
            instance=instance,
            extensions=extensions,
        )


class NotFoundError(ProblemDetailsException):
    """Exception for resource not found errors."""

    def __init__(
        self,
        resource_type: str = "resource",
        resource_id: Optional[str] = None,
        detail: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        if not detail:
            detail = f"The requested {resource_type}"
            if resource_id:
                detail += f" with ID '{resource_id}'"
            detail += " could not be found"

        extensions = {
            "resource_type": resource_type,
        }
        if resource_id:
            extensions["resource_id"] = resource_id

        super().__init__(
            status_code=404,
            title="Resource Not Found",
            detail=detail,
            type_uri="https://afriride.al/problems/resource-not-found",
            instance=instance,
            extensions=extensions,
        )


class ConflictError(ProblemDetailsException):
    """Exception for resource conflict errors."""

    def __init__(
        self,
        detail: str = "The request conflicts with the current state of the resource",
        conflicting_resource: Optional[Dict[str, Any]] = None,
        instance: Optional[str] = None,
    ):
        extensions = {}
        if conflicting_resource:
            extensions["conflicting_resource"] = conflicting_resource

        super().__init__(
            status_code=409,
            title="Resource Conflict",
            detail=detail,
            type_uri="https://afriride.al/problems/resource-conflict",
            instance=instance,
            extensions=extensions,
        )


class InternalServerError(ProblemDetailsException):
    """Exception for internal server errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred while processing the request",
        error_id: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        if not error_id:
            error_id = str(uuid.uuid4())

        extensions = {
            "error_id": error_id,
            "timestamp": _utc_timestamp(),
        }

        super().__init__(
            status_code=500,
            title="Internal Server Error",
            detail=detail,
            type_uri="https://afriride.al/problems/internal-server-error",
            instance=instance,
            extensions=extensions,
        )


class DataServiceError(ProblemDetailsException):
    """
    Exception for any failure reported by the external data service.

    The detail is always a generic, user-facing message; the underlying
    cause is kept on ``cause`` for logging and never sent to the client.
    """

    def __init__(
        self,
        detail: str = "The data service could not complete the request",
        operation: Optional[str] = None,
        collection: Optional[str] = None,
        cause: Optional[BaseException] = None,
        instance: Optional[str] = None,
    ):
        self.operation = operation
        self.collection = collection
        self.cause = cause

        extensions = {"retryable": False}
        if collection:
            extensions["collection"] = collection

        super().__init__(
            status_code=502,
            title="Data Service Failure",
            detail=detail,
            type_uri="https://afriride.al/problems/data-service-failure",
            instance=instance,
            extensions=extensions,
        )


# Business logic exceptions

class CapacityExceededError(ProblemDetailsException):
    """Exception when the party is larger than the offering can take."""

    def __init__(
        self,
        requested: int,
        capacity: int,
        service_id: Optional[str] = None,
        detail: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        if not detail:
            detail = f"Number of people ({requested}) exceeds capacity ({capacity})"
            if service_id:
                detail += f" for offering {service_id}"

        extensions = {
            "requested": requested,
            "capacity": capacity,
        }
        if service_id:
            extensions["service_id"] = service_id

        super().__init__(
            status_code=400,
            title="Capacity Exceeded",
            detail=detail,
            type_uri="https://afriride.al/problems/capacity-exceeded",
            instance=instance,
            extensions=extensions,
        )


class SubmissionInProgressError(ConflictError):
    """Exception when a form is submitted again while its first submit is outstanding."""

    def __init__(self, form: str):
        super().__init__(
            detail=f"A {form} submission is already in progress"
        )
        self.problem_details.update({
            "code": "SUBMITTING",
            "retryable": True,
        })


async def problem_details_handler(request: Request, exc: ProblemDetailsException) -> JSONResponse:
    """
    Exception handler for Problem Details exceptions.

    Args:
        request: FastAPI request object
        exc: Problem Details exception

    Returns:
        JSONResponse: Problem Details formatted response
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.problem_details,
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request validation failures as Problem Details with violations.

    Args:
        request: FastAPI request object
        exc: Request validation error raised by FastAPI

    Returns:
        JSONResponse: Problem Details formatted response
    """
    violations = [
        {
            "path": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=422,
        content={
            "type": "https://afriride.al/problems/request-validation",
            "title": "Request Validation Failed",
            "status": 422,
            "detail": "The request body failed validation",
            "instance": str(request.url),
            "violations": violations,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Generic exception handler that converts unhandled exceptions to Problem Details format.

    Args:
        request: FastAPI request object
        exc: Unhandled exception

    Returns:
        JSONResponse: Problem Details formatted response
    """
    error_id = str(uuid.uuid4())

    problem_details = {
        "type": "https://afriride.al/problems/internal-server-error",
        "title": "Internal Server Error",
        "status": 500,
        "detail": "An unexpected error occurred while processing the request",
        "instance": str(request.url),
        "error_id": error_id,
        "timestamp": _utc_timestamp(),
    }

    return JSONResponse(
        status_code=500,
        content=problem_details,
    )
