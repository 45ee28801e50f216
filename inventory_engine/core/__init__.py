from .classifier import classify
from .ledger import InventoryLedger
from .transfers import TransferEngine
from .fulfillment import FulfillmentDebitor
from .workflows import OrderWorkflow, ShipmentWorkflow
from .activity import ActivityLog

__all__ = [
    "classify",
    "InventoryLedger",
    "TransferEngine",
    "FulfillmentDebitor",
    "OrderWorkflow",
    "ShipmentWorkflow",
    "ActivityLog",
]
