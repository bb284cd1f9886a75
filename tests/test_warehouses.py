"""Warehouse operation tests."""
import logging

import pytest

from inventory_ledger.errors import InvalidPayload, NotFound, Ok, Unauthorized
from inventory_ledger.schemas.warehouse import WarehouseResponse


def test_add_warehouse_returns_record(ledger):
    result = ledger.add_warehouse("W1", "Addr1", "CityA", "secret1")
    assert result == Ok(WarehouseResponse(id=0, name="W1", address="Addr1"))


@pytest.mark.parametrize("name, address", [("", "Addr1"), ("W1", "")])
def test_add_warehouse_rejects_empty_fields(ledger, name, address):
    result = ledger.add_warehouse(name, address, "CityA", "secret1")
    assert isinstance(result, InvalidPayload)
    assert ledger.get_all_warehouses().value == []


def test_get_warehouse_by_id(ledger, warehouse):
    assert ledger.get_warehouse_by_id(warehouse.id).value == warehouse


def test_get_missing_warehouse_is_not_found(ledger):
    result = ledger.get_warehouse_by_id(3)
    assert isinstance(result, NotFound)
    assert "3" in result.msg


def test_get_warehouse_by_name_is_exact_and_ordered(ledger):
    ledger.add_warehouse("Depot", "A", "X", "s")
    ledger.add_warehouse("Depot North", "B", "X", "s")
    ledger.add_warehouse("depot", "C", "X", "s")
    ledger.add_warehouse("Depot", "D", "X", "s")

    found = ledger.get_warehouse_by_name("Depot").value
    assert [w.address for w in found] == ["A", "D"]
    assert ledger.get_warehouse_by_name("Nowhere") == Ok([])


def test_get_all_warehouses_in_creation_order(ledger):
    assert ledger.get_all_warehouses() == Ok([])
    for name in ("C", "A", "B"):
        ledger.add_warehouse(name, "Addr", "City", "s")
    assert [w.name for w in ledger.get_all_warehouses().value] == ["C", "A", "B"]


def test_edit_warehouse_with_secret(ledger, warehouse):
    result = ledger.edit_warehouse(warehouse.id, "W1-new", "secret1")
    assert result == Ok(WarehouseResponse(id=0, name="W1-new", address="Addr1"))
    assert ledger.get_warehouse_by_id(warehouse.id).value.name == "W1-new"


def test_edit_warehouse_address(ledger, warehouse):
    result = ledger.edit_warehouse(warehouse.id, "W1", "secret1", address="Addr2")
    assert result.value.address == "Addr2"


def test_edit_warehouse_wrong_secret_changes_nothing(ledger, warehouse):
    result = ledger.edit_warehouse(warehouse.id, "W1-new", "wrong", address="Elsewhere")
    assert isinstance(result, Unauthorized)
    assert ledger.get_warehouse_by_id(warehouse.id).value == warehouse


def test_edit_missing_warehouse_is_not_found(ledger):
    assert isinstance(ledger.edit_warehouse(5, "Name", "secret1"), NotFound)


def test_edit_warehouse_rejects_empty_name(ledger, warehouse):
    assert isinstance(ledger.edit_warehouse(warehouse.id, "", "secret1"), InvalidPayload)
    assert ledger.get_warehouse_by_id(warehouse.id).value.name == "W1"


def test_secret_of_one_warehouse_does_not_open_another(ledger, warehouse):
    other = ledger.add_warehouse("W2", "Addr2", "CityB", "secret2").value
    assert isinstance(ledger.edit_warehouse(other.id, "W2-new", "secret1"), Unauthorized)
    assert ledger.edit_warehouse(other.id, "W2-new", "secret2").ok


@pytest.mark.parametrize("warehouse_id", [2**63, 2**64 - 1, -1])
def test_ids_beyond_storage_range_are_not_found(ledger, warehouse, warehouse_id):
    assert isinstance(ledger.get_warehouse_by_id(warehouse_id), NotFound)
    assert isinstance(ledger.edit_warehouse(warehouse_id, "W1-new", "secret1"), NotFound)


def test_long_names_and_addresses_are_accepted(ledger):
    created = ledger.add_warehouse("W" * 1000, "A" * 1000, "CityA", "secret1").value
    assert ledger.get_warehouse_by_id(created.id).value.name == "W" * 1000

    edited = ledger.edit_warehouse(created.id, "N" * 300, "secret1", address="B" * 300).value
    assert (edited.name, edited.address) == ("N" * 300, "B" * 300)


def test_denied_edit_is_logged_once(ledger, warehouse, caplog):
    with caplog.at_level(logging.WARNING):
        ledger.edit_warehouse(warehouse.id, "W1-new", "wrong")
    denials = [r for r in caplog.records if "Unauthorized" in r.getMessage()]
    assert len(denials) == 1
