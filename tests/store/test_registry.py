"""
Tests for the store registry and the store factory.
"""

import pytest

from bank_ledger.config import Settings
from bank_ledger.exceptions import LedgerError, StoreNotFoundError
from bank_ledger.store.memory import InMemoryLedgerStore
from bank_ledger.store.registry import (
    StoreRegistry,
    build_store,
    store_from_settings,
)
from bank_ledger.store.sql import SqlLedgerStore


class TestBuildStore:

    def test_memory_backend(self):
        assert isinstance(build_store("memory"), InMemoryLedgerStore)

    def test_sql_backend(self):
        store = build_store("sql", "sqlite://")
        try:
            assert isinstance(store, SqlLedgerStore)
        finally:
            store.close()

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValueError, match="Unknown ledger backend"):
            build_store("redis")

    def test_from_settings(self):
        settings = Settings()
        settings.LEDGER_BACKEND = "memory"
        assert isinstance(store_from_settings(settings), InMemoryLedgerStore)


class TestStoreRegistry:

    def test_lookup_unregistered_raises(self):
        registry = StoreRegistry()
        with pytest.raises(StoreNotFoundError, match="operations"):
            registry.lookup("operations")

    def test_not_found_error_hierarchy(self):
        err = StoreNotFoundError("x")
        assert isinstance(err, LedgerError)
        assert isinstance(err, LookupError)

    def test_register_then_lookup(self, store):
        registry = StoreRegistry()
        registry.register("operations", store)
        assert registry.lookup("operations") is store

    def test_create_is_idempotent(self):
        registry = StoreRegistry()
        first = registry.create("operations")
        second = registry.create("operations", backend="sql")
        assert first is second
        assert registry.names() == ["operations"]

    def test_close_empties_registry(self, store):
        registry = StoreRegistry()
        registry.register("operations", store)
        registry.close()
        with pytest.raises(StoreNotFoundError):
            registry.lookup("operations")
