"""
Ledger models package.

OperationRecord is imported here so that Base.metadata
knows about the operations table before create_all runs.
"""

from bank_ledger.models.base import Base
from bank_ledger.models.enums import OperationType, OperationClass, classify
from bank_ledger.models.operation import Operation
from bank_ledger.models.operation_record import OperationRecord
from bank_ledger.models.views import DailyBucket, DebtPeriod

__all__ = [
    "Base",
    "OperationType",
    "OperationClass",
    "classify",
    "Operation",
    "OperationRecord",
    "DailyBucket",
    "DebtPeriod",
]
