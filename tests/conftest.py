"""
Shared test fixtures.

Every test gets a fresh in-memory ledger store and a fixed
clock, so balances and debt periods do not depend on the
day the suite runs.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from bank_ledger.api.dependencies import get_account_service
from bank_ledger.config import get_settings
from bank_ledger.main import app
from bank_ledger.models.operation import Operation
from bank_ledger.services.account_service import AccountService
from bank_ledger.store.memory import InMemoryLedgerStore
from bank_ledger.store.registry import StoreRegistry


NUMBER = "123"

# 2017-08-10 12:00 UTC, after every fixture operation
FIXED_NOW = datetime(2017, 8, 10, 12, 0, 0)


@pytest.fixture
def make_op():
    """Factory for operations on the default test account."""
    def _make(op_type, amount, date, number=NUMBER, description="some operation"):
        return Operation(
            account_number=number,
            amount=amount,
            type=op_type,
            description=description,
            date=date,
        )
    return _make


@pytest.fixture
def operations(make_op):
    """The six reference operations. Balance as of FIXED_NOW is 705."""
    return [
        make_op("deposit", 500, datetime(2017, 8, 1)),
        make_op("deposit", 1000, datetime(2017, 8, 2)),
        make_op("purchase", 150, datetime(2017, 8, 1)),
        make_op("purchase", 35, datetime(2017, 8, 2)),
        make_op("withdrawal", 220, datetime(2017, 8, 5)),
        make_op("withdrawal", 390, datetime(2017, 8, 8)),
    ]


@pytest.fixture
def store():
    return InMemoryLedgerStore()


@pytest.fixture
def service(store):
    """AccountService over the test store with the clock pinned to FIXED_NOW."""
    return AccountService(store, clock=lambda: FIXED_NOW)


@pytest.fixture
def registry(store):
    registry = StoreRegistry()
    registry.register(get_settings().STORE_NAME, store)
    return registry


@pytest.fixture
def client(registry):
    """
    Provide a test client wired to the test store.

    The real clock is kept for the HTTP layer, since request
    validation rejects future dates against the real now.
    """
    previous = getattr(app.state, "registry", None)
    app.state.registry = registry
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.registry = previous


@pytest.fixture
def fixed_clock_client(client, store):
    """Test client whose account service uses FIXED_NOW."""
    app.dependency_overrides[get_account_service] = (
        lambda: AccountService(store, clock=lambda: FIXED_NOW)
    )
    return client
