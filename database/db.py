"""Storage client owning the single SQLite connection of the application.

Create one :class:`ClinicStorage` at the application root, call
:meth:`ClinicStorage.open` and pass the instance to service functions.
Each service call runs inside :meth:`ClinicStorage.session`, which binds the
models to this storage and turns engine errors into :class:`StorageError`.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from peewee import PeeweeException, SqliteDatabase

from .models import ALL_MODELS

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


class StorageError(RuntimeError):
    """Raised when the storage engine rejects an operation."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ClinicStorage:
    """Explicit owner of the database connection."""

    def __init__(self, path: str | Path = MEMORY, *, pragmas: dict | None = None):
        self.path = str(path)
        self.pragmas = pragmas if pragmas is not None else {"foreign_keys": 1}
        self._database: SqliteDatabase | None = None

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"<ClinicStorage {self.path!r} {state}>"

    def __enter__(self) -> "ClinicStorage":
        self.open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._database is not None and not self._database.is_closed()

    @property
    def database(self) -> SqliteDatabase:
        if not self.is_open:
            raise StorageError(f"Storage {self.path} is not open")
        return self._database

    def open(self) -> None:
        """Open (creating if needed) the database file. Repeated calls are safe."""
        if self.is_open:
            return

        database = SqliteDatabase(self.path, pragmas=self.pragmas, autoconnect=False)
        try:
            if self.path != MEMORY:
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            database.connect()
        except (PeeweeException, sqlite3.Error, OSError) as exc:
            logger.error("Cannot open database %s: %s", self.path, exc)
            raise StorageError(f"Cannot open database {self.path}", cause=exc) from exc

        self._database = database
        logger.info("Database opened: %s", self.path)

    def close(self) -> None:
        if self._database is None:
            return
        if not self._database.is_closed():
            self._database.close()
            logger.info("Database closed: %s", self.path)
        self._database = None

    @contextmanager
    def session(self) -> Iterator[SqliteDatabase]:
        """Bind the models to this storage for one unit of work."""
        database = self.database
        try:
            with database.bind_ctx(ALL_MODELS):
                yield database
        except (PeeweeException, sqlite3.Error) as exc:
            logger.error("Storage operation failed: %s", exc)
            raise StorageError(str(exc), cause=exc) from exc


__all__ = ["ClinicStorage", "StorageError", "MEMORY"]
