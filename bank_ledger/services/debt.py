"""
Debt period detection.

A debt period is a run of consecutive statement days on which
the account's running balance is negative. Detection is a
single forward scan over the full daily-balance history with
at most one period open at a time.

    day balance < 0   open period   -> principal_balance := balance
                      none open     -> open {start: day, principal_balance: balance}
    day balance >= 0  open period   -> close with end := day - 1
                                       (unless day is after today)
                      none open     -> nothing

A period left open at the end of the scan is ongoing and has
no end date.
"""

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Iterable

from bank_ledger.models.operation import Operation
from bank_ledger.models.views import DailyBucket, DebtPeriod
from bank_ledger.services.filters import group_by_day, sort_by_date
from bank_ledger.services.statement import accumulate_daily_balances


@dataclass
class DebtScan:
    """Scan state: closed periods so far and the open one, if any."""

    today: date
    closed_periods: list[DebtPeriod] = field(default_factory=list)
    current_open: DebtPeriod | None = None

    def step(self, day: date, balance: int) -> None:
        if balance < 0:
            if self.current_open is not None:
                self.current_open = replace(self.current_open, principal_balance=balance)
            else:
                self.current_open = DebtPeriod(start_date=day, principal_balance=balance)
            return

        # A future day cannot end a period that is still running today
        if self.current_open is not None and day <= self.today:
            self.closed_periods.append(
                replace(self.current_open, end_date=day - timedelta(days=1))
            )
            self.current_open = None

    def periods(self) -> list[DebtPeriod]:
        if self.current_open is None:
            return list(self.closed_periods)
        return [*self.closed_periods, self.current_open]


def daily_balances(operations: Iterable[Operation]) -> list[DailyBucket]:
    """Running balance per day over the account's whole history."""
    return accumulate_daily_balances(group_by_day(sort_by_date(operations)))


def scan_debt_periods(buckets: Iterable[DailyBucket], today: date) -> list[DebtPeriod]:
    """
    Scan date-ordered daily buckets for debt periods.

    The buckets are not re-sorted. Pass them in date order.
    """
    scan = DebtScan(today=today)
    for bucket in buckets:
        scan.step(bucket.date, bucket.cumulative_balance)
    return scan.periods()


def detect_debt_periods(operations: Iterable[Operation], today: date) -> list[DebtPeriod]:
    return scan_debt_periods(daily_balances(operations), today)
