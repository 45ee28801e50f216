"""
Inventory ledger: the single writer of per-product stock fields.

All mutation paths funnel through ``_recompute`` so ``available_stock`` and
``status`` can never drift from ``stock``, ``reserved_stock`` and
``reorder_level``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

import pydantic

from ..config import get_config
from ..data.interface import ProductRepository
from ..data.models import Product, ProductUpdate
from ..errors import InsufficientStockError, NotFoundError, ValidationError
from ..logging import get_logger
from .classifier import classify


def _recompute(product: Product) -> Product:
    """Return ``product`` with its derived fields brought up to date."""
    product.available_stock = product.stock - product.reserved_stock
    product.status = classify(product.stock, product.reorder_level)
    return product


def _validate_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Run editable fields through ProductUpdate, raising the package ValidationError."""
    try:
        return ProductUpdate.model_validate(dict(fields)).model_dump(exclude_unset=True)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        raise ValidationError(
            f"Invalid product fields: {error['msg']}",
            field=".".join(str(part) for part in error["loc"]) or None,
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def _check_counts(stock: int, reserved_stock: int, reorder_level: int) -> None:
    if stock < 0:
        raise ValidationError("Stock cannot be negative", field="stock", details={"stock": stock})
    if reserved_stock < 0:
        raise ValidationError(
            "Reserved stock cannot be negative", field="reserved_stock", details={"reserved_stock": reserved_stock}
        )
    if reorder_level < 0:
        raise ValidationError(
            "Reorder level cannot be negative", field="reorder_level", details={"reorder_level": reorder_level}
        )
    if reserved_stock > stock:
        raise ValidationError(
            f"Reserved stock ({reserved_stock}) exceeds stock ({stock})",
            field="reserved_stock",
            details={"stock": stock, "reserved_stock": reserved_stock},
        )


class InventoryLedger:
    """Authoritative store of product stock counts."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository
        self.logger = get_logger(__name__)

    # ---------- reads ----------

    def get(self, product_id: str) -> Product:
        product = self.repository.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def list(self, warehouse_id: Optional[str] = None) -> List[Product]:
        return self.repository.list(warehouse_id)

    # ---------- writes ----------

    def create(
        self,
        sku: str,
        stock: int,
        reserved_stock: int = 0,
        reorder_level: int = 0,
        warehouse_id: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Product:
        """Register a new product with its derived fields computed.

        Raises:
            ValidationError: non-integer or negative counts, reserved above stock,
                blank or duplicate SKU.
        """
        counts = _validate_fields(
            {"sku": sku, "stock": stock, "reserved_stock": reserved_stock, "reorder_level": reorder_level}
        )
        sku, stock = counts["sku"], counts["stock"]
        reserved_stock, reorder_level = counts["reserved_stock"], counts["reorder_level"]
        if sku is None or not sku.strip():
            raise ValidationError("SKU is required", field="sku")
        if stock is None or reserved_stock is None or reorder_level is None:
            raise ValidationError("Stock counts are required", field="stock")
        _check_counts(stock, reserved_stock, reorder_level)
        if self.repository.find_by_sku(sku) is not None:
            raise ValidationError(f"SKU already in use: {sku}", field="sku", details={"sku": sku})

        product = Product(
            id=self.repository.next_id(),
            sku=sku,
            name=name,
            stock=stock,
            reserved_stock=reserved_stock,
            available_stock=stock - reserved_stock,
            reorder_level=reorder_level,
            status=classify(stock, reorder_level),
            warehouse_id=warehouse_id,
        )
        self.repository.save(product)
        self.logger.debug(f"Created {product.id} ({sku}) stock={stock} reserved={reserved_stock}")
        return product

    def update(self, product_id: str, fields: Union[ProductUpdate, Mapping[str, Any]]) -> Product:
        """Apply a partial edit and recompute derived fields.

        Raises:
            NotFoundError: unknown product.
            ValidationError: derived or unknown fields supplied, or the result
                would break ``0 <= reserved_stock <= stock``.
        """
        if isinstance(fields, ProductUpdate):
            changes = fields.model_dump(exclude_unset=True)
        else:
            changes = _validate_fields(fields)

        for key in ("sku", "stock", "reserved_stock", "reorder_level"):
            if key in changes and changes[key] is None:
                raise ValidationError(f"{key} cannot be cleared", field=key)

        product = self.get(product_id)
        if "sku" in changes and changes["sku"] != product.sku:
            other = self.repository.find_by_sku(changes["sku"])
            if other is not None and other.id != product_id:
                raise ValidationError(f"SKU already in use: {changes['sku']}", field="sku")

        updated = product.model_copy(update=changes)
        _check_counts(updated.stock, updated.reserved_stock, updated.reorder_level)
        self.repository.save(_recompute(updated))
        self.logger.debug(f"Updated {product_id}: {sorted(changes)}")
        return updated

    def adjust_stock(self, product_id: str, delta: int) -> Product:
        """Add ``delta`` units to the product's stock.

        Debits clamp at zero unless over-debit is disabled in config, in which
        case InsufficientStockError is raised. Reserved stock is capped at the
        new stock so it never exceeds what is physically present.
        """
        product = self.get(product_id)
        new_stock = product.stock + delta
        if new_stock < 0:
            if not get_config().allow_over_debit:
                raise InsufficientStockError(product_id, required=-delta, available=product.stock)
            self.logger.warning(f"Debit of {-delta} on {product_id} exceeds stock {product.stock}; clamping at 0")
            new_stock = 0

        product.stock = new_stock
        product.reserved_stock = min(product.reserved_stock, new_stock)
        self.repository.save(_recompute(product))
        self.logger.debug(f"Adjusted {product_id} by {delta}: stock={product.stock}")
        return product

    def set_warehouse(self, product_id: str, warehouse_id: Optional[str]) -> Product:
        """Relocate a product. Stock fields are untouched."""
        product = self.get(product_id)
        product.warehouse_id = warehouse_id
        self.repository.save(product)
        self.logger.debug(f"Moved {product_id} to {warehouse_id}")
        return product

    def delete(self, product_id: str) -> None:
        if not self.repository.delete(product_id):
            raise NotFoundError("Product", product_id)
        self.logger.debug(f"Deleted {product_id}")
