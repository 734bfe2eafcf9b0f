"""Contact inquiry record definition."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ContactInquiry(BaseModel):
    """Message sent through the contact form, stored in ``contact_inquiries``."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(
            mode="json",
            exclude={"id", "status", "created_at"},
            exclude_none=True,
        )
