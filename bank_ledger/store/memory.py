"""
In-memory ledger store.

Each account has its own lock. Appends to the same account
are serialized; different accounts never wait on each other.
Reads copy the account's list under its lock and return a
tuple, so callers always see whole operations.

Locks are created on the first append only. Reading an
account that was never written leaves the store untouched.
"""

import logging
import threading
from dataclasses import replace

from bank_ledger.models.operation import Operation
from bank_ledger.store.base import LedgerStore

logger = logging.getLogger(__name__)


class InMemoryLedgerStore(LedgerStore):

    backend = "memory"

    def __init__(self):
        self._operations: dict[str, list[Operation]] = {}
        self._locks: dict[str, threading.Lock] = {}
        # Guards creation of per-account locks only
        self._guard = threading.Lock()

    def _lock_for(self, account_number: str) -> threading.Lock:
        lock = self._locks.get(account_number)
        if lock is None:
            with self._guard:
                lock = self._locks.setdefault(account_number, threading.Lock())
        return lock

    def get(self, account_number: str) -> tuple[Operation, ...]:
        lock = self._locks.get(account_number)
        if lock is None:
            return ()
        with lock:
            return tuple(self._operations.get(account_number, ()))

    def put(self, account_number: str, operation: Operation) -> Operation:
        if operation.account_number != account_number:
            operation = replace(operation, account_number=account_number)
        with self._lock_for(account_number):
            self._operations.setdefault(account_number, []).append(operation)
        logger.debug("Appended %r to account %s", operation, account_number)
        return operation

    def accounts(self) -> list[str]:
        with self._guard:
            numbers = list(self._locks)
        return [n for n in numbers if self.get(n)]
