"""FastAPI routers package."""

from .booking import router as booking_router
from .catalog import router as catalog_router
from .contact import router as contact_router
from .health import router as health_router
from .metrics import router as metrics_router
from .reservation import router as reservation_router

__all__ = [
    "booking_router",
    "catalog_router",
    "contact_router",
    "health_router",
    "metrics_router",
    "reservation_router",
]
