from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    IN_TRANSIT = "IN TRANSIT"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


class DeliveryPlatform(str, Enum):
    RENDA_WMS = "Renda WMS"
    LETA_AI = "Leta AI"
    NONE = "None"


class OrderItem(BaseModel):
    """One order line."""
    product_id: str = Field(description="Product identifier")
    quantity: int = Field(gt=0, description="Units ordered")


class Order(BaseModel):
    """Customer order as seen by the fulfillment debitor."""
    id: str = Field(description="Order identifier")
    items: List[OrderItem] = Field(default_factory=list, description="Order lines, in order")
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Lifecycle status")
    delivery_platform: DeliveryPlatform = Field(default=DeliveryPlatform.RENDA_WMS, description="Last-mile provider")
    tracking_number: Optional[str] = Field(default=None, description="Assigned when dispatched")
    fulfilled_at: Optional[datetime] = Field(default=None, description="Set once stock has been debited")
    delivered_at: Optional[datetime] = Field(default=None, description="Delivery timestamp")
