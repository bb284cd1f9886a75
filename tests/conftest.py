"""Shared fixtures: an in-memory ledger per test and an HTTP client around it."""
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from inventory_ledger.ledger import InventoryLedger
from inventory_ledger.main import create_app


class TickingClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self, start=datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self):
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def ledger(clock):
    ledger = InventoryLedger.from_url("sqlite://", clock=clock)
    ledger.create_all()
    yield ledger
    ledger.dispose()


@pytest.fixture
def warehouse(ledger):
    """A registered warehouse whose secret is 'secret1'."""
    return ledger.add_warehouse("W1", "Addr1", "CityA", "secret1").value


@pytest.fixture
def product(ledger, warehouse):
    """Ten widgets stocked in the warehouse fixture."""
    return ledger.add_product("Widget", 10, "tools", warehouse.id).value


@pytest.fixture
def client(ledger):
    app = create_app(ledger)
    with TestClient(app) as test_client:
        yield test_client
