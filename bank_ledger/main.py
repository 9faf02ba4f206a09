"""
Bank Ledger: FastAPI application.

This is the entry point for the application.
All routers are registered here, and the configured
ledger store is created and registered at startup.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from bank_ledger.config import get_settings
from bank_ledger.logging_config import configure_logging
from bank_ledger.api.health import router as health_router
from bank_ledger.api.accounts import index_router as accounts_index_router
from bank_ledger.api.accounts import router as accounts_router
from bank_ledger.store.registry import StoreRegistry, store_from_settings

settings = get_settings()
configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    registry = app.state.registry
    if settings.STORE_NAME not in registry.names():
        registry.register(settings.STORE_NAME, store_from_settings(settings))
    yield
    registry.close()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Balances, statements and debt periods of checking accounts",
    lifespan=lifespan,
)
app.state.registry = StoreRegistry()

# Register routers
app.include_router(health_router)
app.include_router(accounts_index_router)
app.include_router(accounts_router)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "bank_ledger.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
