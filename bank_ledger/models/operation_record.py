"""
Operation table for the SQL-backed ledger store.

Rows are append-only. The store never issues UPDATE or
DELETE against this table.
"""

from datetime import datetime

from sqlalchemy import String, DateTime, BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from bank_ledger.models.base import Base
from bank_ledger.models.operation import Operation


class OperationRecord(Base):
    """
    Storage row for one Operation.

    `type` is a plain string column rather than an enum so that
    unrecognized literals survive a round trip and are ignored
    by the calculator instead of rejected by the database.
    The autoincrement id keeps append order within an account.
    """

    __tablename__ = "operations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_number: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str] = mapped_column(
        String(255), nullable=False, default=""
    )
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    @classmethod
    def from_operation(cls, operation: Operation) -> "OperationRecord":
        return cls(
            account_number=operation.account_number,
            amount=operation.amount,
            type=operation.type,
            description=operation.description,
            date=operation.date,
        )

    def to_operation(self) -> Operation:
        return Operation(
            account_number=self.account_number,
            amount=self.amount,
            type=self.type,
            description=self.description,
            date=self.date,
        )

    def __repr__(self) -> str:
        return f"<OperationRecord {self.account_number} {self.type} {self.amount}>"
