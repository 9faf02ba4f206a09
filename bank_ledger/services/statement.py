"""
Statement building.

A statement is the list of days that have operations in a
period, each with the running balance at the end of the day.
"""

from datetime import date, datetime
from typing import Iterable, Mapping, Sequence

from bank_ledger.models.operation import Operation
from bank_ledger.models.views import DailyBucket
from bank_ledger.services.balance import calculate_balance
from bank_ledger.services.filters import (
    filter_by_period,
    group_by_day,
    sort_by_date,
)


def accumulate_daily_balances(
    operations_by_day: Mapping[date, Sequence[Operation]],
    opening_balance: int = 0,
) -> list[DailyBucket]:
    """
    Turn grouped operations into daily buckets with a running balance.

    Days are taken in mapping order. Each bucket's balance is
    the previous bucket's balance plus the day's own delta.
    """
    buckets = []
    running = opening_balance
    for day, day_operations in operations_by_day.items():
        running += calculate_balance(day_operations)
        buckets.append(DailyBucket(
            date=day,
            operations=tuple(day_operations),
            cumulative_balance=running,
        ))
    return buckets


def build_statement(
    operations: Iterable[Operation],
    start_date: datetime,
    end_date: datetime,
) -> list[DailyBucket]:
    """
    Daily statement for [start_date, end_date], both ends inclusive.

    The running balance starts at 0 on the first day of the
    period, so it shows the movement over the period rather
    than the account's absolute balance.
    Days without operations are not included.
    """
    in_period = filter_by_period(sort_by_date(operations), start_date, end_date)
    return accumulate_daily_balances(group_by_day(in_period))
