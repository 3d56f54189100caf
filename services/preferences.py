"""Small persistent key-value store for UI preferences and the session user.

Each value is JSON-serialized and kept under a fixed string key in a single
JSON file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

USER_TOKEN_KEY = "@rathi_dental_token"
USER_DATA_KEY = "user"
THEME_MODE_KEY = "@rathi_dental_theme"


class PreferenceStore:
    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def _load_for_update(self) -> dict[str, str]:
        """Current contents; an unreadable file is replaced by an empty mapping."""
        try:
            return self._load()
        except ValueError as exc:
            logger.warning("Discarding unreadable preferences %s: %s", self.path, exc)
            return {}

    def _dump(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.path)

    # ─────────────────────────── generic ───────────────────────────

    def set_item(self, key: str, value: Any) -> None:
        try:
            data = self._load_for_update()
            data[key] = json.dumps(value)
            self._dump(data)
        except (OSError, TypeError, ValueError):
            logger.exception("Error saving preference %s", key)
            raise

    def get_item(self, key: str) -> Any:
        """Stored value, or ``None`` if absent or unreadable."""
        try:
            raw = self._load().get(key)
            return json.loads(raw) if raw is not None else None
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error reading preference %s: %s", key, exc)
            return None

    def remove_item(self, key: str) -> None:
        try:
            data = self._load_for_update()
            if data.pop(key, None) is not None:
                self._dump(data)
        except (OSError, ValueError):
            logger.exception("Error removing preference %s", key)
            raise

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Error clearing preferences %s", self.path)
            raise

    # ─────────────────────────── shortcuts ───────────────────────────

    def set_user_token(self, token: str) -> None:
        self.set_item(USER_TOKEN_KEY, token)

    def get_user_token(self) -> str | None:
        return self.get_item(USER_TOKEN_KEY)

    def set_user_data(self, user_data: dict) -> None:
        self.set_item(USER_DATA_KEY, user_data)

    def get_user_data(self) -> dict | None:
        return self.get_item(USER_DATA_KEY)

    def set_theme_mode(self, is_dark: bool) -> None:
        self.set_item(THEME_MODE_KEY, bool(is_dark))

    def get_theme_mode(self) -> bool | None:
        return self.get_item(THEME_MODE_KEY)
