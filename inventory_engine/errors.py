"""Error taxonomy for inventory operations.

Every failure raised by the core carries a human readable ``message``, a
stable ``code`` and a ``details`` dict the caller can surface as-is.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class InventoryError(Exception):
    def __init__(self, message: str, code: str = "ERROR", details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ValidationError(InventoryError):
    """Caller-supplied values violate a precondition."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class NotFoundError(InventoryError):
    """A referenced product or warehouse does not exist."""

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            f"{resource} not found: {identifier}",
            "NOT_FOUND",
            {"resource": resource, "identifier": str(identifier)},
        )
        self.resource = resource
        self.identifier = identifier


class InsufficientStockError(ValidationError):
    def __init__(self, product_id: str, required: int, available: int):
        super().__init__(
            f"Insufficient stock for {product_id}: required {required}, available {available}",
            field="quantity",
            details={"product_id": product_id, "required": required, "available": available},
        )
        self.code = "INSUFFICIENT_STOCK"


class InvalidTransitionError(ValidationError):
    def __init__(self, resource: str, current: str, target: str):
        super().__init__(
            f"{resource} cannot move from {current} to {target}",
            field="status",
            details={"resource": resource, "current": current, "target": target},
        )
        self.code = "INVALID_TRANSITION"


class NoValidItemsError(InventoryError):
    """Every item of a bulk operation failed validation."""

    def __init__(self, skipped: List[Any]):
        super().__init__(
            "No valid items to process",
            "NO_VALID_ITEMS",
            {"skipped": [s.model_dump() for s in skipped]},
        )
        self.skipped = skipped
