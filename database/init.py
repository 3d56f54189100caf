"""Start-up initialization of the clinic database.

Call :func:`init_database` once at application start. It is idempotent and
never raises: a failure is logged and the storage stays in a degraded state
where each later operation fails on its own with ``StorageError``.
"""

from __future__ import annotations

import logging

from services.user_service import ensure_default_users

from .db import ClinicStorage, StorageError
from .migrate import apply_migrations

logger = logging.getLogger(__name__)


def init_database(storage: ClinicStorage) -> bool:
    """Open the storage, migrate the schema and seed the default accounts.

    Returns ``True`` on success, ``False`` if initialization failed.
    """
    try:
        storage.open()
        applied = apply_migrations(storage)
        seeded = ensure_default_users(storage)
    except StorageError:
        logger.exception("Database initialization failed for %s", storage.path)
        return False

    logger.info(
        "Database ready: %s (migrations applied: %s, users seeded: %s)",
        storage.path,
        applied or "none",
        seeded,
    )
    return True
