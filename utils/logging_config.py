"""Logging for the clinic core: one rotating file plus the console.

SQL echoed by peewee is noisy at DEBUG level; reads are dropped unless
``detailed_logging`` is on, writes to the content tables are kept.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s │ %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

READ_PREFIXES = ("SELECT", "PRAGMA")


def _sql_of(record: logging.LogRecord) -> str:
    # peewee logs a (sql, params) tuple as the message
    if hasattr(record, "sql"):
        return str(record.sql)
    if isinstance(record.msg, tuple) and record.msg:
        return str(record.msg[0])
    return record.getMessage()


class PeeweeFilter(logging.Filter):
    """Drops peewee records for read-only statements."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _sql_of(record).lstrip().upper().startswith(READ_PREFIXES)


def _level_for(settings: Settings) -> int:
    if settings.detailed_logging:
        return logging.DEBUG
    return getattr(logging, settings.log_level, logging.INFO)


def setup_logging(settings: Settings | None = None) -> Path:
    """Route logs to the console and the rotating clinic log; return its path."""
    settings = settings or get_settings()
    log_path = settings.resolve_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    level = _level_for(settings)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_h = RotatingFileHandler(
        log_path,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    console_h = logging.StreamHandler()
    for handler in (file_h, console_h):
        handler.setFormatter(fmt)
        handler.setLevel(level)

    logging.basicConfig(level=level, handlers=[file_h, console_h], force=True)

    peewee_logger = logging.getLogger("peewee")
    for old in [f for f in peewee_logger.filters if isinstance(f, PeeweeFilter)]:
        peewee_logger.removeFilter(old)
    if not settings.detailed_logging:
        peewee_logger.addFilter(PeeweeFilter())

    return log_path
