from __future__ import annotations

from itertools import count
from typing import Dict, Iterable, List, Optional

from ..interface import ProductRepository, WarehouseDirectory
from ..models import Product, Warehouse


class InMemoryProductRepository(ProductRepository):
    """
    Dict-backed product store.
    - Products are kept in insertion order.
    - Every read hands out a deep copy, so a half-edited product is never
      visible to another reader until it is saved.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None, id_prefix: str = "PRD") -> None:
        self._products: Dict[str, Product] = {}
        self._id_prefix = id_prefix
        self._ids = count(1)
        for product in products or []:
            self.save(product)

    def get(self, product_id: str) -> Optional[Product]:
        product = self._products.get(product_id)
        return product.model_copy(deep=True) if product is not None else None

    def list(self, warehouse_id: Optional[str] = None) -> List[Product]:
        return [
            p.model_copy(deep=True)
            for p in self._products.values()
            if warehouse_id is None or p.warehouse_id == warehouse_id
        ]

    def find_by_sku(self, sku: str) -> Optional[Product]:
        for product in self._products.values():
            if product.sku == sku:
                return product.model_copy(deep=True)
        return None

    def save(self, product: Product) -> Product:
        self._products[product.id] = product.model_copy(deep=True)
        return product

    def delete(self, product_id: str) -> bool:
        return self._products.pop(product_id, None) is not None

    def next_id(self) -> str:
        while True:
            candidate = f"{self._id_prefix}-{next(self._ids):03d}"
            if candidate not in self._products:
                return candidate

    def __len__(self) -> int:
        return len(self._products)


class InMemoryWarehouseDirectory(WarehouseDirectory):
    """Dict-backed warehouse lookup."""

    def __init__(self, warehouses: Optional[Iterable[Warehouse]] = None) -> None:
        self._warehouses: Dict[str, Warehouse] = {}
        for warehouse in warehouses or []:
            self.add(warehouse)

    def get(self, warehouse_id: str) -> Optional[Warehouse]:
        warehouse = self._warehouses.get(warehouse_id)
        return warehouse.model_copy() if warehouse is not None else None

    def list(self) -> List[Warehouse]:
        return [w.model_copy() for w in self._warehouses.values()]

    def add(self, warehouse: Warehouse) -> Warehouse:
        self._warehouses[warehouse.id] = warehouse.model_copy()
        return warehouse
