"""
Operation surface consumed by the dashboard layer.

Wires the ledger, transfer engine, fulfillment debitor and workflows over a
product repository and warehouse directory, and records an activity entry
for every mutating call. ``actor_id`` is passed explicitly; there is no
ambient current user.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

import pandas as pd

from .core.activity import ActivityLog
from .core.fulfillment import FulfillmentDebitor
from .core.ledger import InventoryLedger
from .core import reports
from .core.transfers import TransferEngine, TransferRequest
from .core.workflows import Clock, OrderWorkflow, ShipmentWorkflow, utc_now
from .data import ProductRepository, WarehouseDirectory, get_repository, get_warehouse_directory
from .data.models import (
    BulkTransferResult,
    Order,
    OrderStatus,
    Product,
    ProductUpdate,
    Shipment,
    ShipmentStatus,
    StockMovementResult,
    TransferResult,
    Warehouse,
)
from .errors import NotFoundError, ValidationError
from .logging import get_logger


class InventoryService:
    def __init__(
        self,
        repository: Optional[ProductRepository] = None,
        warehouses: Optional[WarehouseDirectory] = None,
        activity_log: Optional[ActivityLog] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.repository = repository if repository is not None else get_repository()
        self.warehouses = warehouses if warehouses is not None else get_warehouse_directory()
        self.activity = activity_log if activity_log is not None else ActivityLog(clock=clock)
        self.ledger = InventoryLedger(self.repository)
        self.transfers = TransferEngine(self.ledger, self.warehouses)
        self.debitor = FulfillmentDebitor(self.ledger)
        self.orders = OrderWorkflow(self.debitor, clock=clock)
        self.shipments = ShipmentWorkflow(self.debitor, clock=clock)
        self.logger = get_logger(__name__)

    # ---------- warehouses ----------

    def add_warehouse(self, warehouse: Warehouse, actor_id: Optional[str] = None) -> Warehouse:
        if self.warehouses.get(warehouse.id) is not None:
            raise ValidationError(f"Warehouse already exists: {warehouse.id}", field="id")
        self.warehouses.add(warehouse)
        self.activity.record("warehouse", "Warehouse added", f"{warehouse.name} ({warehouse.region})", actor_id)
        return warehouse

    def get_warehouse(self, warehouse_id: str) -> Warehouse:
        warehouse = self.warehouses.get(warehouse_id)
        if warehouse is None:
            raise NotFoundError("Warehouse", warehouse_id)
        return warehouse

    def warehouse_products(self, warehouse_id: str) -> List[Product]:
        """Products currently held by a warehouse."""
        self.get_warehouse(warehouse_id)
        return self.ledger.list(warehouse_id)

    # ---------- products ----------

    def get_product(self, product_id: str) -> Product:
        return self.ledger.get(product_id)

    def list_products(self, warehouse_id: Optional[str] = None) -> List[Product]:
        return self.ledger.list(warehouse_id)

    def create_product(
        self,
        sku: str,
        stock: int,
        reserved_stock: int = 0,
        reorder_level: int = 0,
        warehouse_id: Optional[str] = None,
        name: Optional[str] = None,
        actor_id: Optional[str] = None,
    ) -> Product:
        if warehouse_id is not None and self.warehouses.get(warehouse_id) is None:
            raise ValidationError(f"Unknown warehouse: {warehouse_id}", field="warehouse_id")
        product = self.ledger.create(sku, stock, reserved_stock, reorder_level, warehouse_id=warehouse_id, name=name)
        self.activity.record(
            "product", "New product added to inventory", f"{product.name or product.sku} ({product.sku}) - {product.stock} units", actor_id
        )
        return product

    def update_product(
        self,
        product_id: str,
        fields: Union[ProductUpdate, Mapping[str, Any]],
        actor_id: Optional[str] = None,
    ) -> Product:
        changes = fields.model_dump(exclude_unset=True) if isinstance(fields, ProductUpdate) else dict(fields)
        warehouse_id = changes.get("warehouse_id")
        if warehouse_id is not None and self.warehouses.get(warehouse_id) is None:
            raise ValidationError(f"Unknown warehouse: {warehouse_id}", field="warehouse_id")
        product = self.ledger.update(product_id, fields)
        self.activity.record("product", "Product updated", f"{product.name or product.id} - Details modified", actor_id)
        return product

    def delete_product(self, product_id: str, actor_id: Optional[str] = None) -> None:
        product = self.ledger.get(product_id)
        self.ledger.delete(product_id)
        self.activity.record("product", "Product removed from inventory", f"{product.name or product.id} ({product.sku})", actor_id)

    # ---------- transfers ----------

    def transfer_product(
        self,
        product_id: str,
        from_warehouse_id: str,
        to_warehouse_id: str,
        quantity: int,
        actor_id: Optional[str] = None,
    ) -> TransferResult:
        result = self.transfers.transfer(product_id, from_warehouse_id, to_warehouse_id, quantity)
        self.activity.record(
            "transfer",
            "Inventory transferred between warehouses",
            f"{quantity} units of {result.product.name or product_id} moved from {from_warehouse_id} to {to_warehouse_id}",
            actor_id,
        )
        return result

    def bulk_transfer_products(
        self,
        items: Iterable[TransferRequest],
        from_warehouse_id: str,
        to_warehouse_id: str,
        actor_id: Optional[str] = None,
    ) -> BulkTransferResult:
        result = self.transfers.bulk_transfer(items, from_warehouse_id, to_warehouse_id)
        details = (
            f"{result.moved_count} products ({result.total_units} total units) moved "
            f"from {from_warehouse_id} to {to_warehouse_id}"
        )
        if result.skipped:
            details += f"; {len(result.skipped)} skipped"
        self.activity.record("transfer", "Bulk inventory transfer completed", details, actor_id)
        return result

    # ---------- orders and shipments ----------

    def fulfill_order(self, order: Order, actor_id: Optional[str] = None) -> StockMovementResult:
        """Debit stock for ``order``. Callers must not invoke this twice per order;
        ``advance_order`` enforces that."""
        result = self.debitor.fulfill_order(order)
        self.activity.record("order", "Order fulfilled and dispatched", f"{order.id} - {result.units} units debited", actor_id)
        return result

    def receive_shipment(self, shipment: Shipment, actor_id: Optional[str] = None) -> StockMovementResult:
        """Credit stock for ``shipment``. ``advance_shipment`` guards against double receipt."""
        result = self.debitor.receive_shipment(shipment)
        self.activity.record(
            "shipment", "Shipment received into warehouse", f"{shipment.id} - {result.units} units received", actor_id
        )
        return result

    def advance_order(
        self, order: Order, status: OrderStatus, actor_id: Optional[str] = None
    ) -> Tuple[Order, Optional[StockMovementResult]]:
        updated, movement = self.orders.advance(order, status)
        self.activity.record("order", "Order status updated", f"{order.id} - Now: {status.value}", actor_id)
        return updated, movement

    def advance_shipment(
        self, shipment: Shipment, status: ShipmentStatus, actor_id: Optional[str] = None
    ) -> Tuple[Shipment, Optional[StockMovementResult]]:
        updated, movement = self.shipments.advance(shipment, status, received_by=actor_id)
        self.activity.record("shipment", "Shipment status updated", f"{shipment.id} - Now: {status.value}", actor_id)
        return updated, movement

    # ---------- reports ----------

    def stock_report(self) -> pd.DataFrame:
        return reports.stock_by_warehouse(self.ledger.list(), self.warehouses.list())

    def low_stock_report(self, warehouse_id: Optional[str] = None) -> pd.DataFrame:
        return reports.low_stock(self.ledger.list(warehouse_id))
