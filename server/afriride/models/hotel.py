"""Hotel record definition."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Hotel(BaseModel):
    """Hotel offering as stored in the ``hotels`` collection."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: str = ""
    location: str = ""
    address: str = ""
    price_per_night: float = Field(..., ge=0)
    rating: float = 0
    amenities: list[str] = Field(default_factory=list)
    image_url: str = ""
    available_rooms: int = Field(0, ge=0)
    created_at: Optional[datetime] = None

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, name='{self.name}', price_per_night={self.price_per_night})>"
