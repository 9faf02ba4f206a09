"""
Shared enumerations for ledger operations.

The six operation literals are a closed set. Anything else
that reaches the calculator is classified as IGNORED and
contributes nothing to a balance.
"""

import enum


class OperationType(str, enum.Enum):
    """Operation literals accepted from clients."""
    DEPOSIT = "deposit"
    SALARY = "salary"
    CREDITS = "credits"
    PURCHASE = "purchase"
    WITHDRAWAL = "withdrawal"
    DEBITS = "debits"


class OperationClass(str, enum.Enum):
    """Effect of an operation on the account balance."""
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    IGNORED = "IGNORED"


CREDIT_TYPES = frozenset({
    OperationType.DEPOSIT,
    OperationType.SALARY,
    OperationType.CREDITS,
})

DEBIT_TYPES = frozenset({
    OperationType.PURCHASE,
    OperationType.WITHDRAWAL,
    OperationType.DEBITS,
})


def classify(op_type) -> OperationClass:
    """Return the balance class of a raw operation type."""
    try:
        member = OperationType(op_type)
    except ValueError:
        return OperationClass.IGNORED

    if member in CREDIT_TYPES:
        return OperationClass.CREDIT
    return OperationClass.DEBIT
