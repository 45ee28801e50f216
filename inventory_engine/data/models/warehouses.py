from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


class WarehouseStatus(str, Enum):
    ACTIVE = "ACTIVE"
    MAINTENANCE = "MAINTENANCE"
    FULL = "FULL"


class Warehouse(BaseModel):
    """Warehouse reference data. Stock is derived from products, never stored here."""
    id: str = Field(description="Warehouse identifier")
    name: str = Field(description="Warehouse name")
    region: Literal["Kenya", "Nigeria"] = Field(description="Market region, used for cross-region advisories")
    location: Optional[str] = Field(default=None, description="City or site description")
    status: WarehouseStatus = Field(default=WarehouseStatus.ACTIVE, description="Operational status")
