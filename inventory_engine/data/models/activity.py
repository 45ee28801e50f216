from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class ActivityEntry(BaseModel):
    """Audit record of a mutating inventory operation."""
    type: Literal["product", "transfer", "order", "shipment", "warehouse"] = Field(description="Activity category")
    message: str = Field(description="Short summary")
    details: Optional[str] = Field(default=None, description="Human readable details")
    actor_id: Optional[str] = Field(default=None, description="Who performed the action")
    timestamp: datetime = Field(description="When the action was recorded")
