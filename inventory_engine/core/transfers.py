"""
Cross-warehouse transfer engine.

A product is one undivided lot held by a single warehouse, so a transfer
relocates the whole product. The requested quantity only gates eligibility:
it must be positive and covered by the product's available stock.
"""
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Set, Tuple, Union

import pydantic

from ..data.interface import WarehouseDirectory
from ..data.models import BulkTransferResult, SkippedTransfer, TransferItem, TransferResult, Warehouse
from ..errors import NoValidItemsError, NotFoundError, ValidationError
from ..logging import get_logger
from .ledger import InventoryLedger

TransferRequest = Union[TransferItem, Tuple[str, int], Mapping[str, object]]


def _as_item(raw: TransferRequest) -> TransferItem:
    """Normalise a request into a TransferItem, raising the package ValidationError."""
    if isinstance(raw, TransferItem):
        return raw
    try:
        if isinstance(raw, tuple):
            if len(raw) != 2:
                raise ValidationError(f"Expected (product_id, quantity), got {len(raw)} values")
            product_id, quantity = raw
            return TransferItem(product_id=product_id, quantity=quantity)
        return TransferItem.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(
            f"Malformed transfer item: {e.errors()[0]['msg']}",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def _describe(raw: object) -> Tuple[Optional[str], Optional[int]]:
    """Best-effort product id and quantity of a malformed request, for reporting."""
    if isinstance(raw, tuple):
        values = list(raw) + [None, None]
        product_id, quantity = values[0], values[1]
    elif isinstance(raw, Mapping):
        product_id, quantity = raw.get("product_id"), raw.get("quantity")
    else:
        return None, None
    return (
        product_id if isinstance(product_id, str) else None,
        quantity if isinstance(quantity, int) and not isinstance(quantity, bool) else None,
    )


class TransferEngine:
    """Moves products between warehouses through the ledger."""

    def __init__(self, ledger: InventoryLedger, warehouses: WarehouseDirectory) -> None:
        self.ledger = ledger
        self.warehouses = warehouses
        self.logger = get_logger(__name__)

    def _resolve_warehouses(self, from_warehouse_id: str, to_warehouse_id: str) -> Tuple[Warehouse, Warehouse]:
        if from_warehouse_id == to_warehouse_id:
            raise ValidationError(
                "Source and destination warehouses must differ",
                field="to_warehouse_id",
                details={"warehouse_id": from_warehouse_id},
            )
        source = self.warehouses.get(from_warehouse_id)
        if source is None:
            raise NotFoundError("Warehouse", from_warehouse_id)
        destination = self.warehouses.get(to_warehouse_id)
        if destination is None:
            raise NotFoundError("Warehouse", to_warehouse_id)
        return source, destination

    def _check_item(self, product_id: str, from_warehouse_id: str, quantity: int) -> None:
        """Raise if the product cannot leave ``from_warehouse_id`` with this quantity."""
        if quantity <= 0:
            raise ValidationError("Transfer quantity must be positive", field="quantity", details={"quantity": quantity})
        product = self.ledger.get(product_id)
        if product.warehouse_id != from_warehouse_id:
            raise ValidationError(
                f"Product {product_id} is not held in warehouse {from_warehouse_id}",
                field="from_warehouse_id",
                details={"product_id": product_id, "warehouse_id": product.warehouse_id},
            )
        if quantity > product.available_stock:
            raise ValidationError(
                f"Insufficient available stock: requested {quantity}, available {product.available_stock}",
                field="quantity",
                details={"product_id": product_id, "requested": quantity, "available": product.available_stock},
            )

    def transfer(self, product_id: str, from_warehouse_id: str, to_warehouse_id: str, quantity: int) -> TransferResult:
        """Relocate a single product.

        Raises:
            ValidationError: same warehouse, non-positive quantity, product not in
                the source warehouse, or quantity above available stock.
            NotFoundError: unknown product or warehouse.
        """
        source, destination = self._resolve_warehouses(from_warehouse_id, to_warehouse_id)
        self._check_item(product_id, from_warehouse_id, quantity)

        product = self.ledger.set_warehouse(product_id, to_warehouse_id)
        cross_region = source.region != destination.region
        if cross_region:
            self.logger.warning(f"Cross-region transfer of {product_id}: {source.region} -> {destination.region}")
        self.logger.info(f"Transferred {product_id} ({quantity} units) from {source.id} to {destination.id}")
        return TransferResult(
            product=product,
            from_warehouse_id=from_warehouse_id,
            to_warehouse_id=to_warehouse_id,
            quantity=quantity,
            cross_region=cross_region,
        )

    def bulk_transfer(
        self,
        items: Iterable[TransferRequest],
        from_warehouse_id: str,
        to_warehouse_id: str,
    ) -> BulkTransferResult:
        """Relocate every eligible item; ineligible items are skipped and reported.

        Raises:
            ValidationError / NotFoundError: the warehouse pair itself is invalid.
            NoValidItemsError: no item passed validation.
        """
        source, destination = self._resolve_warehouses(from_warehouse_id, to_warehouse_id)

        valid: List[TransferItem] = []
        skipped: List[SkippedTransfer] = []
        seen: Set[str] = set()
        for raw in items:
            try:
                item = _as_item(raw)
            except ValidationError as e:
                product_id, quantity = _describe(raw)
                skipped.append(SkippedTransfer(product_id=product_id, quantity=quantity, reason=e.message))
                continue
            if item.product_id in seen:
                skipped.append(SkippedTransfer(product_id=item.product_id, quantity=item.quantity, reason="Duplicate item"))
                continue
            try:
                self._check_item(item.product_id, from_warehouse_id, item.quantity)
            except (ValidationError, NotFoundError) as e:
                skipped.append(SkippedTransfer(product_id=item.product_id, quantity=item.quantity, reason=e.message))
                continue
            seen.add(item.product_id)
            valid.append(item)

        for entry in skipped:
            self.logger.warning(f"Skipping transfer of {entry.product_id}: {entry.reason}")
        if not valid:
            raise NoValidItemsError(skipped)

        for item in valid:
            self.ledger.set_warehouse(item.product_id, to_warehouse_id)

        result = BulkTransferResult(
            from_warehouse_id=from_warehouse_id,
            to_warehouse_id=to_warehouse_id,
            moved_count=len(valid),
            total_units=sum(item.quantity for item in valid),
            moved_product_ids=[item.product_id for item in valid],
            skipped=skipped,
            cross_region=source.region != destination.region,
        )
        self.logger.info(
            f"Bulk transfer {source.id} -> {destination.id}: moved {result.moved_count} products "
            f"({result.total_units} units), skipped {len(skipped)}"
        )
        return result
