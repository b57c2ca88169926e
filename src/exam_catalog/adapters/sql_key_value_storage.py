"""SQLAlchemy implementation of KeyValueStorage."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exam_catalog.domain.errors import StorageError
from exam_catalog.infra.db.models.key_value import KeyValueRow
from exam_catalog.infra.db.session import get_session
from exam_catalog.ports.key_value_storage import KeyValueStorage

SessionFactory = Callable[[], AbstractContextManager[Session]]


class SqlKeyValueStorage(KeyValueStorage):
    """
    Key-value storage backed by the ``key_value_store`` table.

    - One short-lived session per call (commit on success, rollback on failure)
    - SQLAlchemy failures surface as StorageError
    """

    def __init__(self, session_factory: SessionFactory = get_session) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        try:
            with self._session_factory() as session:
                query = select(KeyValueRow.value).where(KeyValueRow.key == key)
                return session.execute(query).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read key '{key}'", key=key) from exc

    def set(self, key: str, value: str) -> None:
        try:
            with self._session_factory() as session:
                row = session.get(KeyValueRow, key)
                if row is None:
                    session.add(KeyValueRow(key=key, value=value))
                else:
                    row.value = value
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to write key '{key}'", key=key) from exc
