import pytest

from inventory_engine.core.classifier import classify
from inventory_engine.data.seed_data import SCALES, main, seed_demo_data
from inventory_engine.service import InventoryService


def test_seed_is_deterministic():
    first = seed_demo_data(InventoryService(), scale="small", seed=7)
    second = seed_demo_data(InventoryService(), scale="small", seed=7)
    assert [p.model_dump() for p in first.list_products()] == [p.model_dump() for p in second.list_products()]


def test_seed_respects_scale_and_invariants():
    service = seed_demo_data(InventoryService(), scale="small", seed=1)
    products = service.list_products()
    assert len(products) == SCALES["small"].products
    assert len(service.warehouses.list()) == SCALES["small"].warehouses
    for p in products:
        assert 0 <= p.reserved_stock <= p.stock
        assert p.available_stock == p.stock - p.reserved_stock
        assert p.status is classify(p.stock, p.reorder_level)
        assert p.warehouse_id is not None


def test_unknown_scale():
    with pytest.raises(ValueError):
        seed_demo_data(InventoryService(), scale="huge")


def test_main_prints_report(capsys):
    main(["--scale", "small", "--seed", "3"])
    out = capsys.readouterr().out
    assert "WH-NBO-01" in out
    assert "product_count" in out
