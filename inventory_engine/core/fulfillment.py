from __future__ import annotations

from typing import Dict, Iterable, Tuple

from ..config import get_config
from ..data.models import Order, Shipment, StockMovementLine, StockMovementResult
from ..errors import InsufficientStockError, NotFoundError
from ..logging import get_logger
from .ledger import InventoryLedger


class FulfillmentDebitor:
    """Applies order and shipment lines to the ledger.

    Lines are applied independently: an unknown product is reported and the
    remaining lines still go through. With over-debit disabled an order is
    checked in full first, so a short line rejects the whole order and no
    stock moves. Callers are responsible for invoking each operation once
    per order/shipment (see ``workflows``).
    """

    def __init__(self, ledger: InventoryLedger) -> None:
        self.ledger = ledger
        self.logger = get_logger(__name__)

    def _apply(self, source_id: str, lines: Iterable[Tuple[str, int]]) -> StockMovementResult:
        result = StockMovementResult(source_id=source_id)
        for product_id, delta in lines:
            try:
                before = self.ledger.get(product_id).stock
                after = self.ledger.adjust_stock(product_id, delta).stock
            except NotFoundError:
                self.logger.warning(f"{source_id}: product {product_id} not found, line skipped")
                result.missing_product_ids.append(product_id)
                continue
            result.applied.append(
                StockMovementLine(product_id=product_id, delta=delta, stock_before=before, stock_after=after)
            )
        return result

    def _check_debits(self, order: Order) -> None:
        required: Dict[str, int] = {}
        for item in order.items:
            required[item.product_id] = required.get(item.product_id, 0) + item.quantity
        for product_id, quantity in required.items():
            try:
                stock = self.ledger.get(product_id).stock
            except NotFoundError:
                continue
            if quantity > stock:
                raise InsufficientStockError(product_id, required=quantity, available=stock)

    def fulfill_order(self, order: Order) -> StockMovementResult:
        """Debit stock for every order line."""
        if not get_config().allow_over_debit:
            self._check_debits(order)
        result = self._apply(order.id, ((item.product_id, -item.quantity) for item in order.items))
        self.logger.info(f"Fulfilled {order.id}: {len(result.applied)} lines debited, {result.units} units")
        return result

    def receive_shipment(self, shipment: Shipment) -> StockMovementResult:
        """Credit stock for every shipment line."""
        result = self._apply(shipment.id, ((item.product_id, item.quantity) for item in shipment.items))
        self.logger.info(f"Received {shipment.id}: {len(result.applied)} lines credited, {result.units} units")
        return result
