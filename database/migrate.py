"""Forward-only schema migrations.

Every applied step is recorded in ``schema_version``. Steps are append-only:
a new column or index gets a new version, existing steps are never edited.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from peewee import SqliteDatabase
from playhouse.migrate import SqliteMigrator, migrate

from .db import ClinicStorage
from .models import CONTENT_MODELS, SchemaVersion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Migration:
    version: int
    description: str
    apply: Callable[[SqliteDatabase, SqliteMigrator], None]


def _create_content_tables(database: SqliteDatabase, migrator: SqliteMigrator) -> None:
    # safe=True adopts databases created before versioning existed
    database.create_tables(CONTENT_MODELS, safe=True)


def _add_ordering_indexes(database: SqliteDatabase, migrator: SqliteMigrator) -> None:
    wanted = [
        ("leads", ("created_at",)),
        ("team_members", ("display_order",)),
    ]
    operations = []
    for table, columns in wanted:
        existing = {index.name for index in database.get_indexes(table)}
        name = f"{table}_{'_'.join(columns)}"
        if name in existing:
            continue
        operations.append(migrator.add_index(table, columns, False))
    if operations:
        migrate(*operations)


MIGRATIONS: list[Migration] = [
    Migration(1, "create content tables", _create_content_tables),
    Migration(2, "add list ordering indexes", _add_ordering_indexes),
]

LATEST_VERSION = MIGRATIONS[-1].version


def current_version(storage: ClinicStorage) -> int:
    """Highest applied schema version, 0 for an empty database."""
    with storage.session() as database:
        if not database.table_exists(SchemaVersion._meta.table_name):
            return 0
        versions = [row.version for row in SchemaVersion.select(SchemaVersion.version)]
    return max(versions, default=0)


def apply_migrations(storage: ClinicStorage) -> list[int]:
    """Apply pending migrations in order and return their versions."""
    applied: list[int] = []
    with storage.session() as database:
        database.create_tables([SchemaVersion], safe=True)
        done = {row.version for row in SchemaVersion.select(SchemaVersion.version)}
        migrator = SqliteMigrator(database)

        for step in MIGRATIONS:
            if step.version in done:
                continue
            with database.atomic():
                step.apply(database, migrator)
                SchemaVersion.create(version=step.version, description=step.description)
            logger.info("Schema migrated to v%s: %s", step.version, step.description)
            applied.append(step.version)

    return applied
