from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StockStatus(str, Enum):
    IN_STOCK = "IN STOCK"
    LOW_STOCK = "LOW STOCK"
    OUT_OF_STOCK = "OUT OF STOCK"


class Product(BaseModel):
    """Inventory unit as held by the ledger.

    ``available_stock`` and ``status`` are derived from the stock counts and are
    only ever written by the ledger's recompute step.
    """
    id: str = Field(description="Opaque stable product identifier")
    sku: str = Field(description="Stock keeping unit code")
    name: Optional[str] = Field(default=None, description="Display name")
    stock: int = Field(ge=0, description="Total units physically present")
    reserved_stock: int = Field(ge=0, description="Units committed but not yet shipped")
    available_stock: int = Field(ge=0, description="Derived: stock - reserved_stock")
    reorder_level: int = Field(ge=0, description="Threshold at or below which stock is low")
    status: StockStatus = Field(description="Derived stock status")
    warehouse_id: Optional[str] = Field(default=None, description="Warehouse currently holding the product")


class ProductUpdate(BaseModel):
    """Fields a caller may edit directly. Derived fields are not accepted."""
    model_config = ConfigDict(extra="forbid")

    sku: Optional[str] = Field(default=None, description="Stock keeping unit code")
    name: Optional[str] = Field(default=None, description="Display name")
    stock: Optional[int] = Field(default=None, ge=0, description="Total units physically present")
    reserved_stock: Optional[int] = Field(default=None, ge=0, description="Units committed but not yet shipped")
    reorder_level: Optional[int] = Field(default=None, ge=0, description="Low stock threshold")
    warehouse_id: Optional[str] = Field(default=None, description="Warehouse currently holding the product")
