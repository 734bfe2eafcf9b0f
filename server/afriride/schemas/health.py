"""Health ping Pydantic schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from ..core.observability import SERVICE_NAME, SERVICE_VERSION


class HealthStatus(str, Enum):
    """Health status enumeration."""
    HEALTHY = "healthy"


class HealthResponse(BaseModel):
    """Response of the booking API's RPC health ping."""

    status: HealthStatus = Field(..., description="Service status")
    service: str = Field(SERVICE_NAME, description="Service name")
    timestamp: datetime = Field(..., description="Current server time (ISO 8601)")
    version: str = Field(SERVICE_VERSION, description="API version")
