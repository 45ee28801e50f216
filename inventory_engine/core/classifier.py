from __future__ import annotations

from ..data.models import StockStatus


def classify(stock: int, reorder_level: int) -> StockStatus:
    """Map a stock count and reorder level to a stock status.

    Zero stock is out of stock regardless of the reorder level; anything at or
    below the reorder level is low.
    """
    if stock == 0:
        return StockStatus.OUT_OF_STOCK
    if stock <= reorder_level:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK
