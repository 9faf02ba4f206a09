"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

import logging

from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError

from bank_ledger.config import get_settings
from bank_ledger.exceptions import StoreNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(request: Request):
    """
    Return application health status including store availability.

    The store check looks up the configured ledger store and
    pings it. A missing store or a failing SQL connection
    reports the service as degraded.
    """
    backend = None
    try:
        store = request.app.state.registry.lookup(get_settings().STORE_NAME)
        backend = store.backend
        store_status = "healthy" if store.ping() else "unhealthy"
    except (StoreNotFoundError, SQLAlchemyError) as e:
        logger.warning("Health check failed: %s", e)
        store_status = "unhealthy"

    return {
        "status": "healthy" if store_status == "healthy" else "degraded",
        "service": "bank-ledger",
        "store": store_status,
        "backend": backend,
    }
