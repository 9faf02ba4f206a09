"""
Derived ledger views.

Nothing here is stored. Daily buckets and debt periods are
rebuilt from an account's operations on every request.
"""

from dataclasses import dataclass
from datetime import date

from bank_ledger.models.operation import Operation


@dataclass(frozen=True)
class DailyBucket:
    """Operations of one calendar day and the balance at its close."""

    date: date
    operations: tuple[Operation, ...]
    cumulative_balance: int


@dataclass(frozen=True)
class DebtPeriod:
    """
    A contiguous run of days with a negative balance.

    `principal_balance` is the most recent negative daily balance seen
    while the period was open. `end_date` is None while the
    account is still in debt.
    """

    start_date: date
    principal_balance: int
    end_date: date | None = None

    @property
    def is_open(self) -> bool:
        return self.end_date is None
