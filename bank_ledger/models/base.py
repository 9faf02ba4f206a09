"""
Database engine and base model for the SQL-backed store.

Only the SQL ledger store touches this module. The default
URL is an in-memory SQLite database, so the engine has to
hand the same connection to every session.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool


# Every SQL model inherits from this class. SQLAlchemy uses it
# to track the tables it needs to create.
class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(database_url: str) -> bool:
    if not database_url.startswith("sqlite"):
        return False
    return database_url.endswith("://") or ":memory:" in database_url


def make_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    In-memory SQLite lives inside a single connection, so it
    gets a StaticPool and is allowed to cross threads.
    Other URLs get a normal pool with pre-ping.
    """
    if _is_memory_sqlite(database_url):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    """
    Session factory bound to `engine`.

    autocommit=False and autoflush=False keep the commit point
    explicit: the store commits once per appended operation.
    """
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
