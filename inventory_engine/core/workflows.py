"""
Order and shipment lifecycles.

The stock debit for an order fires on PROCESSING -> IN_TRANSIT and the credit
for a shipment fires on entry to RECEIVED. Both are guarded by the timestamp
they stamp, so replaying a transition never touches stock twice.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from ..data.models import (
    DeliveryPlatform,
    Order,
    OrderStatus,
    Shipment,
    ShipmentStatus,
    StockMovementResult,
)
from ..errors import InvalidTransitionError
from ..logging import get_logger
from .fulfillment import FulfillmentDebitor

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


ORDER_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED, OrderStatus.FAILED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.IN_TRANSIT, OrderStatus.CANCELLED, OrderStatus.FAILED}),
    OrderStatus.IN_TRANSIT: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED, OrderStatus.FAILED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.FAILED: frozenset(),
}

SHIPMENT_SEQUENCE: Tuple[ShipmentStatus, ...] = (
    ShipmentStatus.CREATED,
    ShipmentStatus.IN_TRANSIT,
    ShipmentStatus.AT_PORT,
    ShipmentStatus.CUSTOMS_CLEARANCE,
    ShipmentStatus.OUT_FOR_DELIVERY,
    ShipmentStatus.RECEIVED,
)


class OrderWorkflow:
    def __init__(self, debitor: FulfillmentDebitor, clock: Clock = utc_now) -> None:
        self.debitor = debitor
        self.clock = clock
        self.logger = get_logger(__name__)

    def can_advance(self, order: Order, status: OrderStatus) -> bool:
        return status in ORDER_TRANSITIONS[order.status]

    def advance(self, order: Order, status: OrderStatus) -> Tuple[Order, Optional[StockMovementResult]]:
        """Move ``order`` to ``status``.

        Returns the updated order and, when this transition dispatched it, the
        stock movement applied.
        """
        if not self.can_advance(order, status):
            raise InvalidTransitionError("Order", order.status.value, status.value)

        now = self.clock()
        changes = {"status": status}
        movement = None
        if status is OrderStatus.IN_TRANSIT and order.fulfilled_at is None:
            movement = self.debitor.fulfill_order(order)
            prefix = "LA" if order.delivery_platform is DeliveryPlatform.LETA_AI else "RW"
            changes["fulfilled_at"] = now
            changes["tracking_number"] = order.tracking_number or f"{prefix}-{int(now.timestamp() * 1000)}"
        elif status is OrderStatus.DELIVERED:
            changes["delivered_at"] = now

        self.logger.info(f"Order {order.id}: {order.status.value} -> {status.value}")
        return order.model_copy(update=changes), movement


class ShipmentWorkflow:
    def __init__(self, debitor: FulfillmentDebitor, clock: Clock = utc_now) -> None:
        self.debitor = debitor
        self.clock = clock
        self.logger = get_logger(__name__)

    def can_advance(self, shipment: Shipment, status: ShipmentStatus) -> bool:
        # Forward only; stages may be skipped.
        return SHIPMENT_SEQUENCE.index(status) > SHIPMENT_SEQUENCE.index(shipment.status)

    def advance(
        self,
        shipment: Shipment,
        status: ShipmentStatus,
        received_by: Optional[str] = None,
    ) -> Tuple[Shipment, Optional[StockMovementResult]]:
        """Move ``shipment`` to ``status``; entering RECEIVED credits stock once."""
        if not self.can_advance(shipment, status):
            raise InvalidTransitionError("Shipment", shipment.status.value, status.value)

        changes = {"status": status}
        movement = None
        if status is ShipmentStatus.RECEIVED and shipment.received_at is None:
            movement = self.debitor.receive_shipment(shipment)
            changes["received_at"] = self.clock()
            changes["received_by"] = received_by

        self.logger.info(f"Shipment {shipment.id}: {shipment.status.value} -> {status.value}")
        return shipment.model_copy(update=changes), movement
