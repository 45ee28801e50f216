from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ShipmentStatus(str, Enum):
    CREATED = "CREATED"
    IN_TRANSIT = "IN TRANSIT"
    AT_PORT = "AT PORT"
    CUSTOMS_CLEARANCE = "CUSTOMS CLEARANCE"
    OUT_FOR_DELIVERY = "OUT FOR DELIVERY"
    RECEIVED = "RECEIVED"


class ShipmentItem(BaseModel):
    """One inbound shipment line."""
    product_id: str = Field(description="Product identifier")
    quantity: int = Field(gt=0, description="Units shipped")


class Shipment(BaseModel):
    """Inbound supplier shipment."""
    id: str = Field(description="Shipment identifier")
    items: List[ShipmentItem] = Field(default_factory=list, description="Shipment lines, in order")
    destination_warehouse_id: Optional[str] = Field(default=None, description="Receiving warehouse")
    status: ShipmentStatus = Field(default=ShipmentStatus.CREATED, description="Lifecycle status")
    received_at: Optional[datetime] = Field(default=None, description="Set once stock has been credited")
    received_by: Optional[str] = Field(default=None, description="Actor who received the shipment")
