"""Storage interface and its SQLAlchemy implementation.

Every method issues exactly one statement. Failures are rolled back and
re-raised as StorageError so the HTTP boundary has a single type to map.
"""

import logging
from typing import Any, Protocol, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_api.errors import StorageError
from catalog_api.models.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# sqlite3 raises OverflowError, TypeError or ValueError when binding a value it
# cannot store, without wrapping them in a DBAPI error
STORAGE_FAILURES = (SQLAlchemyError, OverflowError, TypeError, ValueError)


class Storage(Protocol):
    """Persistence contract consumed by the resource routers."""

    def insert(self, model: type[ModelT], fields: dict[str, Any]) -> ModelT: ...

    def find_all(self, model: type[ModelT]) -> list[ModelT]: ...

    def find_by_key(self, model: type[ModelT], key: int) -> ModelT | None: ...

    def update_where(
        self, model: type[ModelT], key: int, fields: dict[str, Any]
    ) -> int: ...

    def delete_where(self, model: type[ModelT], key: int) -> int: ...


class SqlAlchemyStorage:
    """Storage backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def insert(self, model: type[ModelT], fields: dict[str, Any]) -> ModelT:
        """Insert one record and return it with its assigned id."""
        record = model(**fields)
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except STORAGE_FAILURES as exc:
            self._fail("insert", exc)
        return record

    def find_all(self, model: type[ModelT]) -> list[ModelT]:
        """Return every record, oldest first."""
        try:
            return list(self.db.scalars(select(model).order_by(model.id)).all())
        except STORAGE_FAILURES as exc:
            self._fail("select", exc)

    def find_by_key(self, model: type[ModelT], key: int) -> ModelT | None:
        """Return the record with the given id, or None."""
        try:
            return self.db.get(model, key)
        except STORAGE_FAILURES as exc:
            self._fail("select", exc)

    def update_where(
        self, model: type[ModelT], key: int, fields: dict[str, Any]
    ) -> int:
        """Apply fields to every record whose id matches; return the row count."""
        try:
            if not fields:
                # Nothing to write, report how many rows the key matches
                return self.db.scalar(
                    select(func.count()).select_from(model).where(model.id == key)
                )
            result = self.db.execute(
                update(model).where(model.id == key).values(**fields)
            )
            self.db.commit()
        except STORAGE_FAILURES as exc:
            self._fail("update", exc)
        return result.rowcount

    def delete_where(self, model: type[ModelT], key: int) -> int:
        """Delete every record whose id matches; return the row count."""
        try:
            result = self.db.execute(delete(model).where(model.id == key))
            self.db.commit()
        except STORAGE_FAILURES as exc:
            self._fail("delete", exc)
        return result.rowcount

    def _fail(self, operation: str, exc: Exception):
        self.db.rollback()
        message = str(getattr(exc, "orig", None) or exc)
        logger.debug(f"{operation} failed: {message}")
        raise StorageError(message, operation) from exc
