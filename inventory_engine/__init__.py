"""Inventory reservation, transfer and fulfillment engine."""

from .errors import (
    InsufficientStockError,
    InvalidTransitionError,
    InventoryError,
    NoValidItemsError,
    NotFoundError,
    ValidationError,
)
from .service import InventoryService

__all__ = [
    "InventoryService",
    # Errors
    "InventoryError",
    "ValidationError",
    "NotFoundError",
    "NoValidItemsError",
    "InsufficientStockError",
    "InvalidTransitionError",
]
