from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .products import Product


class TransferItem(BaseModel):
    """A (product, quantity) pair requested for transfer."""
    product_id: str = Field(description="Product identifier")
    quantity: int = Field(description="Units requested; gates eligibility only")


class TransferResult(BaseModel):
    """Outcome of a single-product transfer."""
    product: Product = Field(description="Product after relocation")
    from_warehouse_id: str = Field(description="Source warehouse")
    to_warehouse_id: str = Field(description="Destination warehouse")
    quantity: int = Field(description="Units requested")
    cross_region: bool = Field(default=False, description="Source and destination are in different regions")


class SkippedTransfer(BaseModel):
    """A bulk transfer item that failed validation."""
    product_id: Optional[str] = Field(default=None, description="Product identifier, if the item carried one")
    quantity: Optional[int] = Field(default=None, description="Units requested, if the item carried a usable value")
    reason: str = Field(description="Why the item was excluded")


class BulkTransferResult(BaseModel):
    """Outcome of a bulk transfer. Partial success is reported, never hidden."""
    from_warehouse_id: str = Field(description="Source warehouse")
    to_warehouse_id: str = Field(description="Destination warehouse")
    moved_count: int = Field(description="Number of products relocated")
    total_units: int = Field(description="Sum of quantities of relocated items")
    moved_product_ids: List[str] = Field(default_factory=list, description="Relocated products, in request order")
    skipped: List[SkippedTransfer] = Field(default_factory=list, description="Items excluded from the transfer")
    cross_region: bool = Field(default=False, description="Source and destination are in different regions")


class StockMovementLine(BaseModel):
    """A stock adjustment applied for one order or shipment line."""
    product_id: str = Field(description="Product identifier")
    delta: int = Field(description="Requested change in stock")
    stock_before: int = Field(description="Stock before the adjustment")
    stock_after: int = Field(description="Stock after the adjustment")


class StockMovementResult(BaseModel):
    """Outcome of applying an order or shipment against the ledger."""
    source_id: str = Field(description="Order or shipment identifier")
    applied: List[StockMovementLine] = Field(default_factory=list, description="Lines applied")
    missing_product_ids: List[str] = Field(default_factory=list, description="Lines skipped: product unknown")

    @property
    def units(self) -> int:
        return sum(abs(line.delta) for line in self.applied)
