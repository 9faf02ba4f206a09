"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode connection strings in code.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Bank Ledger"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Ledger store
    # "memory" keeps operations in a per-account locked arena,
    # "sql" keeps them in a SQLAlchemy table. The default
    # DATABASE_URL is an in-memory SQLite database, nothing
    # is written to disk.
    LEDGER_BACKEND: str = os.getenv("LEDGER_BACKEND", "memory")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://")
    STORE_NAME: str = os.getenv("STORE_NAME", "operations")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused for all
    subsequent calls.
    """
    return Settings()
