# fastlonn/core/storage.py
"""
Persistence adapters for the calculator state.

An adapter is a plain key-value store with JSON-serializable values.
MemoryStorage is used in tests; DatabaseStorage backs the running app.
"""

import json
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from fastlonn.database.database import KeyValue, SessionLocal


class StorageError(Exception):
    """General error type for problems reading or writing persisted state."""

    pass


class Storage(Protocol):
    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """
    In-memory adapter.

    Values are stored as JSON text so that anything that would fail to
    serialize in the database fails here too.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        return None if raw is None else json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Value for {key!r} is not JSON-serializable: {e}") from e

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class DatabaseStorage:
    """Adapter backed by the key_values table."""

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session_factory = session_factory

    def _session(self) -> Session:
        return self._session_factory()

    def get(self, key: str) -> Any | None:
        db = self._session()
        try:
            row = db.get(KeyValue, key)
            return None if row is None else row.value
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read {key!r}: {e}") from e
        finally:
            db.close()

    def set(self, key: str, value: Any) -> None:
        db = self._session()
        try:
            row = db.get(KeyValue, key)
            if row is None:
                db.add(KeyValue(key=key, value=value))
            else:
                row.value = value
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Could not write {key!r}: {e}") from e
        finally:
            db.close()

    def delete(self, key: str) -> None:
        db = self._session()
        try:
            row = db.get(KeyValue, key)
            if row is not None:
                db.delete(row)
                db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(f"Could not delete {key!r}: {e}") from e
        finally:
            db.close()
