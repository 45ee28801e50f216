from datetime import datetime, timezone

import pytest

from inventory_engine.config import set_config_for_test
from inventory_engine.core.ledger import InventoryLedger
from inventory_engine.data.backends import InMemoryProductRepository, InMemoryWarehouseDirectory
from inventory_engine.data.models import Warehouse
from inventory_engine.service import InventoryService

FIXED_NOW = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for var in [
        "INVENTORY_LOG_LEVEL", "INVENTORY_ALLOW_OVER_DEBIT", "INVENTORY_MAX_ACTIVITY_LOG_ITEMS",
        "INVENTORY_REPOSITORY_KIND", "INVENTORY_DEFAULT_SEED_SCALE", "INVENTORY_DEFAULT_SEED_VALUE",
    ]:
        monkeypatch.delenv(var, raising=False)
    set_config_for_test(log_level="WARNING")


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def warehouses():
    return InMemoryWarehouseDirectory([
        Warehouse(id="W1", name="Nairobi Central", region="Kenya"),
        Warehouse(id="W2", name="Mombasa Port", region="Kenya"),
        Warehouse(id="W3", name="Lagos Mainland", region="Nigeria"),
    ])


@pytest.fixture
def ledger():
    return InventoryLedger(InMemoryProductRepository())


@pytest.fixture
def service(warehouses, clock):
    return InventoryService(repository=InMemoryProductRepository(), warehouses=warehouses, clock=clock)
