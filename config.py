from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from appdirs import user_data_dir, user_log_dir
from dotenv import load_dotenv

APP_NAME = "rathi_dental"
DATABASE_NAME = "RathiDental.db"
PREFERENCES_NAME = "preferences.json"
LOG_FILE_NAME = "clinic.log"


@dataclass
class Settings:
    data_dir: str = field(default_factory=lambda: user_data_dir(APP_NAME))
    database_name: str = DATABASE_NAME
    database_path: str | None = None
    preferences_name: str = PREFERENCES_NAME
    log_dir: str = field(default_factory=lambda: user_log_dir(APP_NAME))
    log_file_name: str = LOG_FILE_NAME
    log_max_bytes: int = 2_000_000
    log_backup_count: int = 3
    log_level: str = "INFO"
    detailed_logging: bool = False

    @property
    def document_root(self) -> Path:
        return Path(self.data_dir).expanduser()

    def resolve_database_path(self) -> str:
        """Path of the SQLite file, or ``:memory:`` when configured so."""
        if self.database_path:
            if self.database_path == ":memory:":
                return self.database_path
            return str(Path(self.database_path).expanduser())
        return str(self.document_root / self.database_name)

    def resolve_preferences_path(self) -> Path:
        return self.document_root / self.preferences_name

    def resolve_log_path(self) -> Path:
        return Path(self.log_dir).expanduser() / self.log_file_name


@lru_cache()
def get_settings() -> Settings:
    dotenv_path = Path(__file__).resolve().parent / ".env"
    load_dotenv(dotenv_path)

    return Settings(
        data_dir=os.getenv("DATA_DIR") or user_data_dir(APP_NAME),
        database_name=os.getenv("DATABASE_NAME", DATABASE_NAME),
        database_path=os.getenv("DATABASE_PATH") or None,
        log_dir=os.getenv("LOG_DIR") or user_log_dir(APP_NAME),
        log_file_name=os.getenv("LOG_FILE_NAME") or LOG_FILE_NAME,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        detailed_logging=os.getenv("DETAILED_LOGGING", "0").lower() in {"1", "true", "yes", "on"},
    )
