"""Tour record definition."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Tour(BaseModel):
    """Guided tour offering as stored in the ``tours`` collection."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    description: str = ""
    duration: str = ""
    price: float = Field(..., ge=0, description="Price per person")
    category: str = ""
    location: str = ""
    includes: list[str] = Field(default_factory=list)
    image_url: str = ""
    max_participants: int = Field(0, ge=0)
    created_at: Optional[datetime] = None

    def __repr__(self) -> str:
        return f"<Tour(id={self.id}, title='{self.title}', category='{self.category}')>"
