"""
Account service: the read and write paths for one account.

The service is built around a store handle passed in by the
caller. It never looks a store up by name. Every read takes
one snapshot from the store and derives the requested view
from it without holding any store lock.

Validation of incoming payloads (positive amounts, dates not
in the future) belongs to the HTTP layer, not here.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from bank_ledger.models.operation import Operation
from bank_ledger.models.views import DailyBucket, DebtPeriod
from bank_ledger.services.balance import calculate_balance
from bank_ledger.services.debt import detect_debt_periods
from bank_ledger.services.filters import filter_until, sort_by_date
from bank_ledger.services.statement import build_statement
from bank_ledger.store.base import LedgerStore

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AccountService:
    """
    All account queries pass through this service.

    `clock` returns the evaluation instant as a naive UTC
    datetime. Tests pass a fixed clock.
    """

    def __init__(self, store: LedgerStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def list_accounts(self) -> list[str]:
        """Account numbers with at least one recorded operation, sorted."""
        return sorted(self.store.accounts())

    def list_operations(self, account_number: str) -> list[Operation]:
        """
        Return every operation of the account in append order.

        Future-dated operations are included here even though
        they do not count towards the balance yet.
        """
        return list(self.store.get(account_number))

    def record_operation(self, account_number: str, attrs) -> Operation:
        """Append a new operation built from `attrs` to the account."""
        operation = Operation.from_attrs(account_number, attrs)
        stored = self.store.put(account_number, operation)
        logger.info(
            "Recorded %s of %s on account %s",
            stored.type, stored.amount, account_number,
        )
        return stored

    def get_balance(self, account_number: str) -> int:
        """
        Balance of the account as of now.

        Only operations dated strictly before now count.
        """
        operations = sort_by_date(self.store.get(account_number))
        return calculate_balance(filter_until(operations, self.clock()))

    def get_statement(
        self,
        account_number: str,
        start_date: datetime,
        end_date: datetime | None = None,
    ) -> list[DailyBucket]:
        """
        Daily statement of the account between two instants.

        `end_date` defaults to now. An inverted period yields
        an empty statement.
        """
        if end_date is None:
            end_date = self.clock()
        return build_statement(self.store.get(account_number), start_date, end_date)

    def get_debt_periods(self, account_number: str) -> list[DebtPeriod]:
        """Periods in which the account had a negative balance."""
        return detect_debt_periods(
            self.store.get(account_number),
            today=self.clock().date(),
        )
