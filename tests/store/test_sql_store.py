"""
Tests for the SQLAlchemy-backed ledger store.

Every test gets its own in-memory SQLite database, so no
test data persists and nothing touches the disk.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest

from bank_ledger.services.account_service import AccountService
from bank_ledger.store.sql import SqlLedgerStore


DAY = datetime(2017, 8, 1)


@pytest.fixture
def sql_store():
    store = SqlLedgerStore("sqlite://")
    yield store
    store.close()


class TestSqlLedgerStore:

    def test_unknown_account_is_empty(self, sql_store):
        assert sql_store.get("123") == ()

    def test_round_trips_operation(self, sql_store, make_op):
        op = make_op("withdrawal", 220, datetime(2017, 8, 5, 13, 45))

        stored = sql_store.put("123", op)

        assert stored == op
        assert sql_store.get("123") == (op,)

    def test_keeps_append_order(self, sql_store, make_op):
        later = make_op("deposit", 1, datetime(2017, 8, 9))
        earlier = make_op("deposit", 2, datetime(2017, 8, 1))
        sql_store.put("123", later)
        sql_store.put("123", earlier)

        assert [op.amount for op in sql_store.get("123")] == [1, 2]

    def test_unknown_type_survives(self, sql_store, make_op):
        sql_store.put("123", make_op("chargeback", 9, DAY))
        assert sql_store.get("123")[0].type == "chargeback"

    def test_accounts(self, sql_store, make_op):
        sql_store.put("B", make_op("deposit", 1, DAY, number="B"))
        sql_store.put("A", make_op("deposit", 1, DAY, number="A"))
        sql_store.put("A", make_op("deposit", 1, DAY, number="A"))

        assert sql_store.accounts() == ["A", "B"]

    def test_ping(self, sql_store):
        assert sql_store.ping() is True
        assert sql_store.backend == "sql"

    def test_concurrent_puts_lose_nothing(self, sql_store, make_op):
        def writer(n):
            for i in range(25):
                sql_store.put("123", make_op("deposit", n * 25 + i, DAY))

        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(writer, range(4)))

        assert len(sql_store.get("123")) == 100

    def test_account_service_on_sql_store(self, sql_store, operations):
        service = AccountService(sql_store, clock=lambda: datetime(2017, 8, 10))
        for op in operations:
            service.record_operation("123", op.to_dict())

        assert service.get_balance("123") == 705
