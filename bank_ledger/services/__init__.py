"""Ledger computations and the account service built on them."""

from bank_ledger.services.account_service import AccountService
from bank_ledger.services.balance import calculate_balance
from bank_ledger.services.debt import detect_debt_periods
from bank_ledger.services.statement import build_statement

__all__ = [
    "AccountService",
    "calculate_balance",
    "detect_debt_periods",
    "build_statement",
]
