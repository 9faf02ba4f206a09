"""
Pydantic schemas for account operations and derived views.

These define the API contract. Incoming operations are
validated here, before they reach the ledger: the core
itself accepts whatever it is given.
"""

from datetime import date, datetime, timezone

from pydantic import BaseModel, Field, field_validator

from bank_ledger.models.enums import OperationType
from bank_ledger.models.operation import Operation
from bank_ledger.models.views import DailyBucket, DebtPeriod


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


# --- Request Schemas ---

class OperationCreate(BaseModel):
    """A credit or debit to append to an account."""
    number: str | None = None
    amount: int = Field(gt=0)
    type: OperationType
    description: str = Field(default="", max_length=255)
    date: datetime

    @field_validator("date")
    @classmethod
    def date_must_not_be_in_future(cls, v: datetime) -> datetime:
        v = to_naive_utc(v)
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        if v > now:
            raise ValueError("date must not be in the future")
        return v


class OperationRequest(BaseModel):
    """Request body wrapping a single operation."""
    operation: OperationCreate


# --- Response Schemas ---

class OperationResponse(BaseModel):
    number: str
    amount: int
    description: str
    type: str
    date: datetime

    @classmethod
    def from_operation(cls, operation: Operation) -> "OperationResponse":
        return cls(
            number=operation.account_number,
            amount=operation.amount,
            description=operation.description,
            type=operation.type,
            date=operation.date,
        )


class AccountListResponse(BaseModel):
    data: list[str]


class OperationListResponse(BaseModel):
    data: list[OperationResponse]


class OperationCreatedResponse(BaseModel):
    data: OperationResponse


class Balance(BaseModel):
    balance: int


class BalanceResponse(BaseModel):
    data: Balance


class DailyBucketResponse(BaseModel):
    """One statement day: its operations and the balance at day end."""
    date: date
    operations: list[OperationResponse]
    balance: int

    @classmethod
    def from_bucket(cls, bucket: DailyBucket) -> "DailyBucketResponse":
        return cls(
            date=bucket.date,
            operations=[OperationResponse.from_operation(op) for op in bucket.operations],
            balance=bucket.cumulative_balance,
        )


class StatementResponse(BaseModel):
    data: list[DailyBucketResponse]


class DebtPeriodResponse(BaseModel):
    """A debt period. `end` is null while the debt is ongoing."""
    principal: int
    start: date
    end: date | None

    @classmethod
    def from_period(cls, period: DebtPeriod) -> "DebtPeriodResponse":
        return cls(
            principal=period.principal_balance,
            start=period.start_date,
            end=period.end_date,
        )


class DebtPeriodsResponse(BaseModel):
    data: list[DebtPeriodResponse]
