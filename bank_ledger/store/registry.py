"""
Named ledger stores.

The registry maps a store name to a store handle. Callers
look a store up once and pass the handle to the services
that need it; no service reaches into the registry itself.
"""

import logging
import threading

from bank_ledger.config import Settings
from bank_ledger.exceptions import StoreNotFoundError
from bank_ledger.store.base import LedgerStore
from bank_ledger.store.memory import InMemoryLedgerStore
from bank_ledger.store.sql import SqlLedgerStore

logger = logging.getLogger(__name__)

BACKENDS = ("memory", "sql")


def build_store(backend: str = "memory", database_url: str = "sqlite://") -> LedgerStore:
    """
    Create a store for the given backend name.

    Raises ValueError for an unknown backend.
    """
    if backend == "memory":
        return InMemoryLedgerStore()
    if backend == "sql":
        return SqlLedgerStore(database_url)
    raise ValueError(
        f"Unknown ledger backend '{backend}', expected one of {BACKENDS}"
    )


def store_from_settings(settings: Settings) -> LedgerStore:
    return build_store(settings.LEDGER_BACKEND, settings.DATABASE_URL)


class StoreRegistry:

    def __init__(self):
        self._stores: dict[str, LedgerStore] = {}
        self._lock = threading.Lock()

    def register(self, name: str, store: LedgerStore) -> LedgerStore:
        """Register `store` under `name`, replacing any previous store."""
        with self._lock:
            self._stores[name] = store
        logger.info("Registered %s ledger store '%s'", store.backend, name)
        return store

    def create(self, name: str, backend: str = "memory", database_url: str = "sqlite://") -> LedgerStore:
        """
        Return the store registered as `name`, creating it if needed.

        An existing store is returned unchanged, whatever backend
        is requested.
        """
        with self._lock:
            existing = self._stores.get(name)
            if existing is not None:
                return existing
            store = build_store(backend, database_url)
            self._stores[name] = store
        logger.info("Created %s ledger store '%s'", backend, name)
        return store

    def lookup(self, name: str) -> LedgerStore:
        """
        Return the store registered as `name`.

        Raises StoreNotFoundError if nothing is registered
        under that name.
        """
        with self._lock:
            store = self._stores.get(name)
        if store is None:
            logger.warning("Ledger store '%s' is not registered", name)
            raise StoreNotFoundError(f"Ledger store '{name}' not found")
        return store

    def names(self) -> list[str]:
        with self._lock:
            return list(self._stores)

    def close(self) -> None:
        with self._lock:
            stores = list(self._stores.values())
            self._stores.clear()
        for store in stores:
            store.close()
