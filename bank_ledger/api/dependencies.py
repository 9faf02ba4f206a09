"""
FastAPI dependencies.

The store registry lives on the application state. Each
request looks the configured store up once and hands the
resulting handle to the AccountService.
"""

from fastapi import Depends, HTTPException, Request

from bank_ledger.config import get_settings
from bank_ledger.exceptions import StoreNotFoundError
from bank_ledger.services.account_service import AccountService
from bank_ledger.store.base import LedgerStore


def get_store(request: Request) -> LedgerStore:
    """Look up the configured ledger store, or answer 503."""
    registry = request.app.state.registry
    try:
        return registry.lookup(get_settings().STORE_NAME)
    except StoreNotFoundError as e:
        raise HTTPException(status_code=503, detail=str(e))


def get_account_service(store: LedgerStore = Depends(get_store)) -> AccountService:
    return AccountService(store)
