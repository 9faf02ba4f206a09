"""
Operation model.

An operation is one credit or debit on a checking account.
Operations are immutable. Once appended to an account's
ledger they are never modified or deleted.
"""

from dataclasses import dataclass, asdict
from datetime import datetime


@dataclass(frozen=True)
class Operation:
    """
    A single dated credit or debit.

    `amount` is a non-negative magnitude in the currency's
    smallest unit. The sign comes from `type`. `date` is a
    naive datetime interpreted as UTC.
    """

    account_number: str
    amount: int
    type: str
    description: str
    date: datetime

    @classmethod
    def from_attrs(cls, account_number: str, attrs) -> "Operation":
        """
        Build an operation from a mapping or a pydantic model.

        The account number argument always wins over any
        number carried by the attributes themselves.
        """
        if hasattr(attrs, "model_dump"):
            attrs = attrs.model_dump()
        op_type = attrs["type"]
        return cls(
            account_number=account_number,
            amount=attrs["amount"],
            type=getattr(op_type, "value", op_type),
            description=attrs.get("description", ""),
            date=attrs["date"],
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def __repr__(self) -> str:
        return (
            f"<Operation {self.account_number} {self.type} "
            f"{self.amount} @ {self.date.isoformat()}>"
        )
