import pytest

from inventory_engine.config import set_config_for_test
from inventory_engine.core.classifier import classify
from inventory_engine.core.ledger import InventoryLedger
from inventory_engine.data.backends import InMemoryProductRepository
from inventory_engine.data.models import ProductUpdate, StockStatus
from inventory_engine.errors import InsufficientStockError, NotFoundError, ValidationError


def assert_consistent(product):
    assert 0 <= product.reserved_stock <= product.stock
    assert product.available_stock == product.stock - product.reserved_stock
    assert product.status is classify(product.stock, product.reorder_level)


def test_create_computes_derived_fields(ledger):
    product = ledger.create("SKN-001", stock=100, reserved_stock=10, reorder_level=20, warehouse_id="W1")
    assert product.available_stock == 90
    assert product.status is StockStatus.IN_STOCK
    assert ledger.get(product.id) == product


@pytest.mark.parametrize(
    "stock, reserved, reorder",
    [(-1, 0, 0), (5, -1, 0), (5, 6, 0), (5, 0, -1)],
)
def test_create_rejects_invalid_counts(ledger, stock, reserved, reorder):
    with pytest.raises(ValidationError):
        ledger.create("SKN-001", stock=stock, reserved_stock=reserved, reorder_level=reorder)
    assert ledger.list() == []


@pytest.mark.parametrize("stock", ["abc", 2.5, None, [5]])
def test_create_rejects_non_integer_counts(ledger, stock):
    with pytest.raises(ValidationError) as exc:
        ledger.create("SKN-001", stock=stock)
    assert exc.value.field == "stock"
    assert ledger.list() == []


def test_create_coerces_numeric_strings(ledger):
    product = ledger.create("SKN-001", stock="5", reorder_level="2")
    assert (product.stock, product.reorder_level) == (5, 2)
    assert product.status is StockStatus.IN_STOCK


def test_create_rejects_duplicate_sku(ledger):
    ledger.create("SKN-001", stock=1)
    with pytest.raises(ValidationError):
        ledger.create("SKN-001", stock=2)


def test_update_recomputes(ledger):
    product = ledger.create("SKN-001", stock=100, reserved_stock=10, reorder_level=20)
    updated = ledger.update(product.id, {"stock": 15})
    assert updated.available_stock == 5
    assert updated.status is StockStatus.LOW_STOCK
    updated = ledger.update(product.id, ProductUpdate(reorder_level=5))
    assert updated.status is StockStatus.IN_STOCK
    assert_consistent(ledger.get(product.id))


def test_update_rejects_reserved_above_stock(ledger):
    product = ledger.create("SKN-001", stock=10, reserved_stock=2)
    with pytest.raises(ValidationError):
        ledger.update(product.id, {"reserved_stock": 11})
    # Nothing was written
    assert ledger.get(product.id).reserved_stock == 2


@pytest.mark.parametrize("fields", [{"available_stock": 3}, {"status": "IN STOCK"}, {"stock": -4}, {"stock": None}])
def test_update_rejects_derived_or_invalid_fields(ledger, fields):
    product = ledger.create("SKN-001", stock=10)
    with pytest.raises(ValidationError):
        ledger.update(product.id, fields)


def test_update_unknown_product(ledger):
    with pytest.raises(NotFoundError):
        ledger.update("missing", {"stock": 1})


def test_adjust_stock_clamps_at_zero(ledger):
    product = ledger.create("SKN-001", stock=2, reorder_level=5)
    product = ledger.adjust_stock(product.id, -5)
    assert product.stock == 0
    assert product.status is StockStatus.OUT_OF_STOCK
    assert_consistent(product)


def test_adjust_stock_caps_reserved_at_new_stock(ledger):
    product = ledger.create("SKN-001", stock=10, reserved_stock=8)
    product = ledger.adjust_stock(product.id, -6)
    assert product.stock == 4
    assert product.reserved_stock == 4
    assert product.available_stock == 0


def test_adjust_stock_strict_mode_raises():
    """With over-debit disabled, a debit beyond stock fails and writes nothing."""
    set_config_for_test(log_level="WARNING", allow_over_debit=False)
    ledger = InventoryLedger(InMemoryProductRepository())
    product = ledger.create("SKN-001", stock=2)
    with pytest.raises(InsufficientStockError):
        ledger.adjust_stock(product.id, -5)
    assert ledger.get(product.id).stock == 2


def test_set_warehouse_leaves_stock_untouched(ledger):
    product = ledger.create("SKN-001", stock=10, reserved_stock=3, warehouse_id="W1")
    moved = ledger.set_warehouse(product.id, "W2")
    assert moved.warehouse_id == "W2"
    assert (moved.stock, moved.reserved_stock, moved.available_stock) == (10, 3, 7)


def test_delete(ledger):
    product = ledger.create("SKN-001", stock=1)
    ledger.delete(product.id)
    with pytest.raises(NotFoundError):
        ledger.get(product.id)
    with pytest.raises(NotFoundError):
        ledger.delete(product.id)


def test_returned_products_are_detached(ledger):
    """Mutating a returned product does not leak into the ledger."""
    product = ledger.create("SKN-001", stock=10)
    product.stock = 999
    assert ledger.get(product.id).stock == 10
