"""End-to-end walkthrough of a warehouse and one product."""
from inventory_ledger.errors import InvalidPayload, Ok, Unauthorized
from inventory_ledger.schemas.warehouse import WarehouseResponse


def test_stock_walkthrough(ledger):
    warehouse = ledger.add_warehouse("W1", "Addr1", "CityA", "secret1")
    assert warehouse == Ok(WarehouseResponse(id=0, name="W1", address="Addr1"))

    product = ledger.add_product("Widget", 10, "tools", 0).value
    assert product.id == 0
    assert product.quantity == 10
    assert product.warehouse == WarehouseResponse(id=0, name="W1", address="Addr1")
    t0 = product.re_stocked_at
    assert product.added_at == t0

    restocked = ledger.add_product_to_warehouse(0, 5).value
    assert restocked.quantity == 15
    assert restocked.re_stocked_at > t0

    assert isinstance(ledger.remove_product_from_warehouse(0, 100), InvalidPayload)
    assert ledger.get_product_by_id(0).value.quantity == 15

    assert isinstance(ledger.edit_warehouse(0, "W1-new", "wrong"), Unauthorized)
    assert ledger.get_warehouse_by_id(0).value.name == "W1"

    edited = ledger.edit_warehouse(0, "W1-new", "secret1")
    assert edited == Ok(WarehouseResponse(id=0, name="W1-new", address="Addr1"))

    # Products keep the warehouse as it was when they were added
    assert ledger.get_product_by_id(0).value.warehouse.name == "W1"
    later = ledger.add_product("Gizmo", 1, "tools", 0).value
    assert later.warehouse.name == "W1-new"
