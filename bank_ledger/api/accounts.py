"""
Account API endpoints.

The API layer is thin: it validates payloads, maps errors
to status codes and shapes responses. Every computation is
delegated to the AccountService.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from bank_ledger.api.dependencies import get_account_service
from bank_ledger.exceptions import InvalidPeriodError
from bank_ledger.services.account_service import AccountService
from bank_ledger.schemas.account import (
    AccountListResponse,
    OperationRequest,
    OperationResponse,
    OperationListResponse,
    OperationCreatedResponse,
    Balance,
    BalanceResponse,
    DailyBucketResponse,
    StatementResponse,
    DebtPeriodResponse,
    DebtPeriodsResponse,
    to_naive_utc,
)

router = APIRouter(prefix="/accounts/{number}", tags=["Accounts"])
index_router = APIRouter(prefix="/accounts", tags=["Accounts"])


def _statement_period(start_date, end_date):
    """Normalize query instants to naive UTC and reject inverted periods."""
    start_date = to_naive_utc(start_date)
    if end_date is None:
        return start_date, None
    end_date = to_naive_utc(end_date)
    if start_date > end_date:
        raise InvalidPeriodError(
            f"start_date {start_date.isoformat()} is after "
            f"end_date {end_date.isoformat()}"
        )
    return start_date, end_date


@index_router.get("", response_model=AccountListResponse)
def list_accounts(service: AccountService = Depends(get_account_service)):
    """List the numbers of accounts that have recorded operations."""
    return AccountListResponse(data=service.list_accounts())


@router.get("/operations", response_model=OperationListResponse)
def list_operations(
    number: str,
    service: AccountService = Depends(get_account_service),
):
    """List every operation of an account, in the order recorded."""
    operations = service.list_operations(number)
    return OperationListResponse(
        data=[OperationResponse.from_operation(op) for op in operations],
    )


@router.post(
    "/operations",
    response_model=OperationCreatedResponse,
    status_code=201,
)
def create_operation(
    number: str,
    request: OperationRequest,
    service: AccountService = Depends(get_account_service),
):
    """
    Record a new operation on an account.

    The amount must be positive and the date must not be in
    the future. Both are checked by the request schema.
    """
    operation = service.record_operation(number, request.operation)
    return OperationCreatedResponse(data=OperationResponse.from_operation(operation))


@router.get("/balance", response_model=BalanceResponse)
def get_balance(
    number: str,
    service: AccountService = Depends(get_account_service),
):
    """Current balance, counting only operations dated before now."""
    return BalanceResponse(data=Balance(balance=service.get_balance(number)))


@router.get("/statement", response_model=StatementResponse)
def get_statement(
    number: str,
    start_date: datetime,
    end_date: datetime | None = None,
    service: AccountService = Depends(get_account_service),
):
    """
    Daily statement between two instants.

    `end_date` defaults to now. The running balance starts
    at zero on the first day of the period.
    """
    try:
        start_date, end_date = _statement_period(start_date, end_date)
        buckets = service.get_statement(number, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return StatementResponse(
        data=[DailyBucketResponse.from_bucket(b) for b in buckets],
    )


@router.get("/debts", response_model=DebtPeriodsResponse)
def get_debt_periods(
    number: str,
    service: AccountService = Depends(get_account_service),
):
    """Periods in which the account balance was negative."""
    periods = service.get_debt_periods(number)
    return DebtPeriodsResponse(
        data=[DebtPeriodResponse.from_period(p) for p in periods],
    )
