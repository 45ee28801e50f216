#!/usr/bin/env python3
"""
seed_data.py

Populates an InventoryService with deterministic demo data for the Kenya and
Nigeria markets: a handful of warehouses and products spread across them with
a mix of healthy, low and empty stock.

Run:
  python -m inventory_engine.data.seed_data --scale small --seed 42
"""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from ..config import get_config
from .models import Warehouse

if TYPE_CHECKING:
    from ..service import InventoryService

# -----------------------------
# Config & helper structures
# -----------------------------

WAREHOUSES = [
    Warehouse(id="WH-NBO-01", name="Nairobi Central", region="Kenya", location="Nairobi"),
    Warehouse(id="WH-MBA-01", name="Mombasa Port", region="Kenya", location="Mombasa"),
    Warehouse(id="WH-LOS-01", name="Lagos Mainland", region="Nigeria", location="Lagos"),
    Warehouse(id="WH-ABV-01", name="Abuja Hub", region="Nigeria", location="Abuja"),
]

CATEGORIES = {
    "Skincare": ["Cleanser", "Toner", "Serum", "Moisturiser", "Sunscreen"],
    "Haircare": ["Shampoo", "Conditioner", "Hair Oil", "Leave-in Cream"],
    "Body": ["Body Lotion", "Body Wash", "Shea Butter"],
}

@dataclass
class Scale:
    warehouses: int
    products: int

SCALES: Dict[str, Scale] = {
    "small":  Scale(2, 12),
    "medium": Scale(4, 60),
    "large":  Scale(4, 400),
}


# -----------------------------
# Generators
# -----------------------------

def gen_product_specs(rng: random.Random, n: int, warehouse_ids: List[str]) -> List[dict]:
    specs = []
    for i in range(1, n + 1):
        category = rng.choice(list(CATEGORIES))
        kind = rng.choice(CATEGORIES[category])
        reorder_level = rng.choice([10, 20, 25, 50])
        # Roughly 1 in 6 products empty, 1 in 6 low, the rest healthy.
        roll = rng.random()
        if roll < 1 / 6:
            stock = 0
        elif roll < 2 / 6:
            stock = rng.randint(1, reorder_level)
        else:
            stock = rng.randint(reorder_level + 1, reorder_level * 10)
        reserved = rng.randint(0, stock // 4) if stock else 0
        specs.append({
            "sku": f"{category[:3].upper()}-{i:04d}",
            "name": f"{kind} {i}",
            "stock": stock,
            "reserved_stock": reserved,
            "reorder_level": reorder_level,
            "warehouse_id": warehouse_ids[(i - 1) % len(warehouse_ids)],
        })
    return specs


def seed_demo_data(service: "InventoryService", scale: Optional[str] = None, seed: Optional[int] = None) -> "InventoryService":
    """Add demo warehouses and products to ``service`` and return it."""
    config = get_config()
    scale = scale or config.default_seed_scale
    seed = config.default_seed_value if seed is None else seed
    if scale not in SCALES:
        raise ValueError(f"Unknown scale: {scale}. Expected one of {sorted(SCALES)}")

    rng = random.Random(seed)
    sc = SCALES[scale]
    warehouses = WAREHOUSES[: sc.warehouses]
    for warehouse in warehouses:
        service.add_warehouse(warehouse, actor_id="seed")
    for spec in gen_product_specs(rng, sc.products, [w.id for w in warehouses]):
        service.create_product(**spec, actor_id="seed")
    return service


def main(argv: Optional[List[str]] = None) -> None:
    from ..service import InventoryService

    parser = argparse.ArgumentParser(description="Seed an in-memory inventory and print its stock report.")
    parser.add_argument("--scale", choices=sorted(SCALES), default=None)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    service = seed_demo_data(InventoryService(), scale=args.scale, seed=args.seed)
    print(service.stock_report().to_string(index=False))


if __name__ == "__main__":
    main()
