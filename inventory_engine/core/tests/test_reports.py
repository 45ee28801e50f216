from inventory_engine.core import reports


def test_stock_by_warehouse(ledger, warehouses):
    ledger.create("SKN-A", stock=100, reserved_stock=10, reorder_level=20, warehouse_id="W1")
    ledger.create("SKN-B", stock=5, reserved_stock=0, reorder_level=20, warehouse_id="W1")
    ledger.create("SKN-C", stock=0, reorder_level=20, warehouse_id="W3")
    ledger.create("SKN-D", stock=7)  # unassigned

    df = reports.stock_by_warehouse(ledger.list(), warehouses.list())
    assert df["warehouse_id"].tolist() == ["W1", "W2", "W3"]

    w1 = df.set_index("warehouse_id").loc["W1"]
    assert w1["product_count"] == 2
    assert w1["total_stock"] == 105
    assert w1["reserved_stock"] == 10
    assert w1["available_stock"] == 95
    assert w1["low_stock_count"] == 1
    assert w1["out_of_stock_count"] == 0

    w2 = df.set_index("warehouse_id").loc["W2"]
    assert w2["product_count"] == 0
    assert w2["total_stock"] == 0

    w3 = df.set_index("warehouse_id").loc["W3"]
    assert w3["out_of_stock_count"] == 1


def test_stock_by_warehouse_with_no_products(warehouses):
    df = reports.stock_by_warehouse([], warehouses.list())
    assert len(df) == 3
    assert df["product_count"].sum() == 0


def test_low_stock_ordering(ledger):
    ledger.create("SKN-A", stock=100, reorder_level=20)
    ledger.create("SKN-B", stock=15, reorder_level=20)
    ledger.create("SKN-C", stock=0, reorder_level=10)
    df = reports.low_stock(ledger.list())
    assert df["sku"].tolist() == ["SKN-C", "SKN-B"]
    assert df["shortfall"].tolist() == [10, 5]
