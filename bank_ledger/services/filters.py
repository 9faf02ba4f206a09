"""
Temporal filters over operation sequences.

All timestamps are naive and interpreted as UTC. The
calendar day of an operation is `operation.date.date()`.
"""

from datetime import date, datetime
from typing import Iterable

from bank_ledger.models.operation import Operation


def sort_by_date(operations: Iterable[Operation]) -> list[Operation]:
    """
    Return operations in ascending date order.

    sorted() is stable, so operations sharing a timestamp keep
    their input order.
    """
    return sorted(operations, key=lambda op: op.date)


def filter_until(operations: Iterable[Operation], now: datetime) -> list[Operation]:
    """Keep operations dated strictly before `now`."""
    return [op for op in operations if op.date < now]


def filter_by_period(
    operations: Iterable[Operation],
    start_date: datetime,
    end_date: datetime,
) -> list[Operation]:
    """Keep operations with start_date <= date <= end_date."""
    return [op for op in operations if start_date <= op.date <= end_date]


def group_by_day(operations: Iterable[Operation]) -> dict[date, list[Operation]]:
    """
    Group operations by calendar day.

    Days appear in the order they are first seen, not in date
    order. Sort the input first to get date-ordered days.
    """
    grouped: dict[date, list[Operation]] = {}
    for op in operations:
        grouped.setdefault(op.date.date(), []).append(op)
    return grouped
