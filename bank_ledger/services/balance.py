"""
Balance calculation.

Balance is never stored. It is always derived from the
operations, so it is correct as long as the operations are.
"""

from typing import Iterable

from bank_ledger.models.enums import OperationClass, classify
from bank_ledger.models.operation import Operation

__all__ = ["classify", "signed_amount", "calculate_balance"]


def signed_amount(operation: Operation) -> int:
    """Credit types add, debit types subtract, anything else counts as zero."""
    op_class = classify(operation.type)
    if op_class is OperationClass.CREDIT:
        return operation.amount
    if op_class is OperationClass.DEBIT:
        return -operation.amount
    return 0


def calculate_balance(operations: Iterable[Operation]) -> int:
    """
    Sum the signed amounts of `operations`.

    This is a plain sum, so input order does not matter.
    Callers that want the balance as of now must drop
    future-dated operations first.
    """
    return sum((signed_amount(op) for op in operations), 0)
