"""Key-value persistence medium used by the task store.

The store only needs two string operations, so any object with matching
``read``/``write`` methods satisfies :class:`KeyValueStorage`.
"""
from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .db import SessionLocal
from .models import KeyValueModel

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The storage medium could not be reached."""


class KeyValueStorage(Protocol):
    def read(self, key: str) -> str | None:
        """Return the stored value, ``None`` when absent.

        Raises :class:`StorageError` when the medium is unavailable.
        """

    def write(self, key: str, value: str) -> bool:
        """Store ``value`` under ``key``; ``False`` means it was not saved."""


class SqlKeyValueStorage:
    def __init__(self, session_factory: sessionmaker[Session] = SessionLocal) -> None:
        self._session_factory = session_factory

    def read(self, key: str) -> str | None:
        try:
            with self._session_factory() as session:
                row = session.get(KeyValueModel, key)
                return row.value if row else None
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to read {key!r}") from exc

    def write(self, key: str, value: str) -> bool:
        try:
            with self._session_factory() as session:
                row = session.get(KeyValueModel, key)
                if row is None:
                    session.add(KeyValueModel(key=key, value=value))
                else:
                    row.value = value
                session.commit()
        except SQLAlchemyError:
            logger.exception("Unable to write %r", key)
            return False
        return True
