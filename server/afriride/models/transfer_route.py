"""Transfer route record definition."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TransferRoute(BaseModel):
    """Airport transfer offering as stored in the ``transfer_routes`` collection."""

    model_config = ConfigDict(extra="ignore")

    id: str
    from_location: str
    to_location: str
    distance_km: float = 0
    price: float = Field(..., ge=0)
    vehicle_type: str = ""
    capacity: int = Field(0, ge=0)
    duration_minutes: int = 0
    created_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return f"{self.from_location} → {self.to_location}"

    def __repr__(self) -> str:
        return f"<TransferRoute(id={self.id}, route='{self.label}', vehicle='{self.vehicle_type}')>"
