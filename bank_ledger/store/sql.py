"""
SQL-backed ledger store.

Operations are kept in the `operations` table through
SQLAlchemy. With the default in-memory SQLite URL the whole
database is one shared connection, so every session is
opened under a single store-wide lock.
"""

import logging
import threading

from sqlalchemy import select, text
from sqlalchemy.engine import Engine

from bank_ledger.models.base import Base, make_engine, make_session_factory
from bank_ledger.models.operation import Operation
from bank_ledger.models.operation_record import OperationRecord
from bank_ledger.store.base import LedgerStore

logger = logging.getLogger(__name__)


class SqlLedgerStore(LedgerStore):

    backend = "sql"

    def __init__(self, database_url: str = "sqlite://", engine: Engine | None = None):
        self.engine = engine if engine is not None else make_engine(database_url)
        self._session_factory = make_session_factory(self.engine)
        self._lock = threading.Lock()
        Base.metadata.create_all(bind=self.engine)

    def get(self, account_number: str) -> tuple[Operation, ...]:
        with self._lock, self._session_factory() as session:
            records = session.execute(
                select(OperationRecord)
                .where(OperationRecord.account_number == account_number)
                .order_by(OperationRecord.id)
            ).scalars().all()
            return tuple(r.to_operation() for r in records)

    def put(self, account_number: str, operation: Operation) -> Operation:
        record = OperationRecord.from_operation(operation)
        record.account_number = account_number
        with self._lock, self._session_factory() as session:
            try:
                session.add(record)
                session.commit()
            except Exception:
                session.rollback()
                raise
        logger.debug("Stored %r as row %s", operation, record.id)
        return record.to_operation()

    def accounts(self) -> list[str]:
        with self._lock, self._session_factory() as session:
            numbers = session.execute(
                select(OperationRecord.account_number)
                .distinct()
                .order_by(OperationRecord.account_number)
            ).scalars().all()
            return list(numbers)

    def ping(self) -> bool:
        with self._lock, self._session_factory() as session:
            session.execute(text("SELECT 1"))
        return True

    def close(self) -> None:
        self.engine.dispose()
