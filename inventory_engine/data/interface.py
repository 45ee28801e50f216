from __future__ import annotations

from typing import List, Optional, Protocol

from .models import Product, Warehouse


# ---- Storage protocols ----

class ProductRepository(Protocol):
    """
    Storage contract the inventory ledger depends on.

    IMPORTANT for ledger consistency:
    - ``get`` and ``list`` MUST return copies. Callers mutate what they get back
      and only ``save`` makes a change visible to other readers.
    - ``save`` replaces the whole product in one step.
    """

    def get(self, product_id: str) -> Optional[Product]:
        """Return the product or None if it does not exist."""
        ...

    def list(self, warehouse_id: Optional[str] = None) -> List[Product]:
        """List products in insertion order, optionally filtered by warehouse."""
        ...

    def find_by_sku(self, sku: str) -> Optional[Product]:
        """Return the product carrying this SKU, if any."""
        ...

    def save(self, product: Product) -> Product:
        """Insert or replace a product."""
        ...

    def delete(self, product_id: str) -> bool:
        """Remove a product. Returns False if it did not exist."""
        ...

    def next_id(self) -> str:
        """Allocate a new product identifier."""
        ...


class WarehouseDirectory(Protocol):
    """Warehouse lookup consumed by the transfer engine (region advisories only)."""

    def get(self, warehouse_id: str) -> Optional[Warehouse]:
        """Return the warehouse or None if it does not exist."""
        ...

    def list(self) -> List[Warehouse]:
        """List all warehouses."""
        ...

    def add(self, warehouse: Warehouse) -> Warehouse:
        """Register a warehouse."""
        ...
