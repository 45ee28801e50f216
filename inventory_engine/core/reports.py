"""pandas views over the ledger for warehouse and dashboard screens."""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..data.models import Product, StockStatus, Warehouse

PRODUCT_COLUMNS = [
    "product_id", "sku", "name", "warehouse_id", "stock", "reserved_stock",
    "available_stock", "reorder_level", "status",
]


def products_frame(products: Iterable[Product]) -> pd.DataFrame:
    rows = [
        {
            "product_id": p.id,
            "sku": p.sku,
            "name": p.name,
            "warehouse_id": p.warehouse_id,
            "stock": p.stock,
            "reserved_stock": p.reserved_stock,
            "available_stock": p.available_stock,
            "reorder_level": p.reorder_level,
            "status": p.status.value,
        }
        for p in products
    ]
    df = pd.DataFrame(rows, columns=PRODUCT_COLUMNS)
    # Keep integer dtypes even when there are no rows
    return df.astype({c: "int64" for c in ["stock", "reserved_stock", "available_stock", "reorder_level"]})


def stock_by_warehouse(products: Iterable[Product], warehouses: Iterable[Warehouse]) -> pd.DataFrame:
    """One row per warehouse, including empty ones, with stock aggregates.

    Unassigned products are not counted.
    """
    wh = pd.DataFrame(
        [{"warehouse_id": w.id, "warehouse_name": w.name, "region": w.region} for w in warehouses],
        columns=["warehouse_id", "warehouse_name", "region"],
    )
    df = products_frame(products)
    df = df[df["warehouse_id"].notna()]

    agg = (
        df.assign(
            low_stock=(df["status"] == StockStatus.LOW_STOCK.value).astype(int),
            out_of_stock=(df["status"] == StockStatus.OUT_OF_STOCK.value).astype(int),
        )
        .groupby("warehouse_id", as_index=False)
        .agg(
            product_count=("product_id", "count"),
            total_stock=("stock", "sum"),
            reserved_stock=("reserved_stock", "sum"),
            available_stock=("available_stock", "sum"),
            low_stock_count=("low_stock", "sum"),
            out_of_stock_count=("out_of_stock", "sum"),
        )
    )

    out = wh.merge(agg, on="warehouse_id", how="left")
    count_cols = [
        "product_count", "total_stock", "reserved_stock",
        "available_stock", "low_stock_count", "out_of_stock_count",
    ]
    out[count_cols] = out[count_cols].fillna(0).astype(int)
    return out.sort_values("warehouse_id").reset_index(drop=True)


def low_stock(products: Iterable[Product]) -> pd.DataFrame:
    """Low and out-of-stock products, largest shortfall below reorder level first."""
    df = products_frame(products)
    df = df[df["status"] != StockStatus.IN_STOCK.value].copy()
    df["shortfall"] = (df["reorder_level"] - df["stock"]).clip(lower=0).astype(int)
    return df.sort_values(["shortfall", "sku"], ascending=[False, True]).reset_index(drop=True)
