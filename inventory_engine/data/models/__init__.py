from .products import Product, ProductUpdate, StockStatus
from .warehouses import Warehouse, WarehouseStatus
from .orders import DeliveryPlatform, Order, OrderItem, OrderStatus
from .shipments import Shipment, ShipmentItem, ShipmentStatus
from .transfers import (
    BulkTransferResult,
    SkippedTransfer,
    StockMovementLine,
    StockMovementResult,
    TransferItem,
    TransferResult,
)
from .activity import ActivityEntry

__all__ = [
    # Inventory
    "Product",
    "ProductUpdate",
    "StockStatus",
    "Warehouse",
    "WarehouseStatus",
    # Orders and shipments
    "DeliveryPlatform",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Shipment",
    "ShipmentItem",
    "ShipmentStatus",
    # Operation results
    "BulkTransferResult",
    "SkippedTransfer",
    "StockMovementLine",
    "StockMovementResult",
    "TransferItem",
    "TransferResult",
    # Audit
    "ActivityEntry",
]
