import pytest

from inventory_engine.core.classifier import classify
from inventory_engine.data.models import StockStatus


@pytest.mark.parametrize(
    "stock, reorder_level, expected",
    [
        (0, 0, StockStatus.OUT_OF_STOCK),
        (0, 20, StockStatus.OUT_OF_STOCK),
        (1, 20, StockStatus.LOW_STOCK),
        (20, 20, StockStatus.LOW_STOCK),
        (21, 20, StockStatus.IN_STOCK),
        (1, 0, StockStatus.IN_STOCK),
    ],
)
def test_classify(stock, reorder_level, expected):
    assert classify(stock, reorder_level) is expected


def test_classify_is_pure():
    """Identical inputs always give identical output."""
    assert classify(15, 20) == classify(15, 20) == StockStatus.LOW_STOCK
