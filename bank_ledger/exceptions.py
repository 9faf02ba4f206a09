"""Exceptions raised at the boundary of the ledger core."""


class LedgerError(Exception):
    """Base exception for all ledger errors."""


class StoreNotFoundError(LedgerError, LookupError):
    """Raised when a named ledger store has not been registered."""


class InvalidPeriodError(LedgerError, ValueError):
    """Raised when a statement period starts after it ends."""
