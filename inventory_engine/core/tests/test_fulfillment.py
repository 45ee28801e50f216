import pytest

from inventory_engine.config import set_config_for_test
from inventory_engine.core.fulfillment import FulfillmentDebitor
from inventory_engine.data.models import Order, OrderItem, Shipment, ShipmentItem, StockStatus
from inventory_engine.errors import InsufficientStockError


def test_fulfill_clamps_at_zero(ledger):
    product = ledger.create("SKN-001", stock=2, reorder_level=1)
    FulfillmentDebitor(ledger).fulfill_order(Order(id="ORD-1", items=[OrderItem(product_id=product.id, quantity=5)]))
    product = ledger.get(product.id)
    assert product.stock == 0
    assert product.status is StockStatus.OUT_OF_STOCK


def test_receive_increments(ledger):
    product = ledger.create("SKN-001", stock=10, reserved_stock=4)
    result = FulfillmentDebitor(ledger).receive_shipment(
        Shipment(id="SHP-1", items=[ShipmentItem(product_id=product.id, quantity=40)])
    )
    product = ledger.get(product.id)
    assert product.stock == 50
    assert product.available_stock == 46
    assert result.applied[0].stock_before == 10
    assert result.applied[0].stock_after == 50


def test_missing_product_does_not_block_other_lines(ledger):
    a = ledger.create("SKN-A", stock=10)
    b = ledger.create("SKN-B", stock=10)
    order = Order(
        id="ORD-2",
        items=[
            OrderItem(product_id=a.id, quantity=1),
            OrderItem(product_id="missing", quantity=1),
            OrderItem(product_id=b.id, quantity=2),
        ],
    )
    result = FulfillmentDebitor(ledger).fulfill_order(order)
    assert result.missing_product_ids == ["missing"]
    assert [line.product_id for line in result.applied] == [a.id, b.id]
    assert result.units == 3
    assert ledger.get(a.id).stock == 9
    assert ledger.get(b.id).stock == 8


def test_fulfillment_does_not_touch_reserved(ledger):
    product = ledger.create("SKN-001", stock=100, reserved_stock=10)
    FulfillmentDebitor(ledger).fulfill_order(Order(id="ORD-3", items=[OrderItem(product_id=product.id, quantity=50)]))
    assert ledger.get(product.id).reserved_stock == 10


def test_strict_mode_rejects_whole_order_before_debiting(ledger):
    """A short line leaves every line of the order untouched."""
    set_config_for_test(log_level="WARNING", allow_over_debit=False)
    a = ledger.create("SKN-A", stock=10)
    b = ledger.create("SKN-B", stock=1)
    order = Order(id="ORD-4", items=[OrderItem(product_id=a.id, quantity=4), OrderItem(product_id=b.id, quantity=5)])

    with pytest.raises(InsufficientStockError) as exc:
        FulfillmentDebitor(ledger).fulfill_order(order)
    assert exc.value.details["product_id"] == b.id
    assert ledger.get(a.id).stock == 10
    assert ledger.get(b.id).stock == 1


def test_strict_mode_sums_repeated_lines(ledger):
    set_config_for_test(log_level="WARNING", allow_over_debit=False)
    product = ledger.create("SKN-A", stock=5)
    order = Order(id="ORD-5", items=[OrderItem(product_id=product.id, quantity=3)] * 2)
    with pytest.raises(InsufficientStockError):
        FulfillmentDebitor(ledger).fulfill_order(order)
    assert ledger.get(product.id).stock == 5
