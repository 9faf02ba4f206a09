"""
Ledger store interface.

A ledger store is an append-only, account-keyed collection of
operations. Implementations must make concurrent appends to
one account lossless and must hand out consistent snapshots.
"""

from abc import ABC, abstractmethod

from bank_ledger.models.operation import Operation


class LedgerStore(ABC):
    """Account-number-keyed, append-only operation store."""

    backend: str = "abstract"

    @abstractmethod
    def get(self, account_number: str) -> tuple[Operation, ...]:
        """Return a snapshot of the account's operations in append order."""

    @abstractmethod
    def put(self, account_number: str, operation: Operation) -> Operation:
        """Append an operation to the account. Returns the stored operation."""

    @abstractmethod
    def accounts(self) -> list[str]:
        """Account numbers that have at least one operation."""

    def ping(self) -> bool:
        """Return True when the store can serve reads."""
        return True

    def close(self) -> None:
        """Release any resources held by the store."""
