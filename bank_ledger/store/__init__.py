"""Ledger stores and the registry that names them."""

from bank_ledger.store.base import LedgerStore
from bank_ledger.store.memory import InMemoryLedgerStore
from bank_ledger.store.sql import SqlLedgerStore
from bank_ledger.store.registry import StoreRegistry, build_store, store_from_settings

__all__ = [
    "LedgerStore",
    "InMemoryLedgerStore",
    "SqlLedgerStore",
    "StoreRegistry",
    "build_store",
    "store_from_settings",
]
