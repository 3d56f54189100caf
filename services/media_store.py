"""Media files kept next to the database rows that reference them.

Files live under the application document root, one directory per category.
The store never touches the database: callers copy a file first and store
the returned path in a row, and delete the row before deleting the file.
"""

from __future__ import annotations

import logging
import shutil
import urllib.parse
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from config import Settings
from database.db import StorageError
from utils.time_utils import millis_stamp

logger = logging.getLogger(__name__)


class MediaCategory(str, Enum):
    TEAM = "Team"
    TESTIMONIALS = "Testimonials"
    SERVICES = "Services"


class MediaStoreError(StorageError):
    """Raised when a media file cannot be copied or removed."""


def build_content_file_name(prefix: str, suffix: str = ".jpg") -> str:
    """Timestamped file name such as ``team_1718000000000.jpg``."""
    return f"{prefix}_{millis_stamp()}{suffix}"


def _local_path(source: str | Path) -> Path:
    text = str(source)
    if text.startswith("file://"):
        return Path(urllib.parse.unquote(urllib.parse.urlparse(text).path))
    return Path(text)


def _resolve_category(category: MediaCategory | str) -> MediaCategory:
    if isinstance(category, MediaCategory):
        return category
    try:
        return MediaCategory[str(category).upper()]
    except KeyError:
        pass
    try:
        return MediaCategory(category)
    except ValueError:
        allowed = ", ".join(member.name for member in MediaCategory)
        raise ValueError(f"Unknown media category {category!r}; expected one of: {allowed}") from None


def _check_file_name(file_name: str) -> str:
    if not file_name or file_name in {".", ".."} or Path(file_name).name != file_name:
        raise ValueError(f"Invalid media file name: {file_name!r}")
    return file_name


@dataclass
class MediaStore:
    """Category directories under the application document root."""

    root: Path

    def __post_init__(self) -> None:
        self.root = Path(self.root).expanduser()

    @classmethod
    def from_settings(cls, settings: Settings) -> "MediaStore":
        return cls(settings.document_root)

    def category_dir(self, category: MediaCategory | str) -> Path:
        return self.root / _resolve_category(category).value

    def ensure_directories_exist(self) -> list[Path]:
        """Create missing category directories and return the ones created."""
        created = []
        for category in MediaCategory:
            path = self.category_dir(category)
            if path.is_dir():
                continue
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise MediaStoreError(f"Cannot create directory {path}", cause=exc) from exc
            logger.info("Media directory created: %s", path)
            created.append(path)
        return created

    def save_content_item(
        self, source: str | Path, category: MediaCategory | str, file_name: str
    ) -> str:
        """Copy ``source`` into the category directory and return the new path.

        An existing file with the same name is replaced.
        """
        destination = self.category_dir(category) / _check_file_name(file_name)
        source_path = _local_path(source)
        self.ensure_directories_exist()

        if not source_path.is_file():
            exc = FileNotFoundError(f"{source_path} does not exist")
            logger.error("Cannot save %s: %s", source_path, exc)
            raise MediaStoreError(f"Cannot save media file {destination}", cause=exc) from exc
        if source_path.resolve() == destination.resolve():
            return str(destination)

        try:
            if destination.exists():
                destination.unlink()
                logger.debug("Replacing media file %s", destination)
            shutil.copyfile(source_path, destination)
        except OSError as exc:
            with suppress(OSError):
                destination.unlink(missing_ok=True)
            logger.error("Cannot save %s to %s: %s", source_path, destination, exc)
            raise MediaStoreError(f"Cannot save media file {destination}", cause=exc) from exc

        logger.info("Media file saved: %s", destination)
        return str(destination)

    def delete_content_item(self, path: str | Path | None) -> None:
        """Delete the file at ``path``; a missing file is not an error."""
        if not path:
            return
        target = _local_path(path)
        if not target.exists():
            return
        if not target.is_file():
            logger.warning("Not a media file, skipped: %s", target)
            return
        try:
            target.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise MediaStoreError(f"Cannot delete media file {target}", cause=exc) from exc
        logger.info("Media file deleted: %s", target)

    def get_directory_items(self, category: MediaCategory | str) -> list[Path]:
        self.ensure_directories_exist()
        directory = self.category_dir(category)
        return sorted(item for item in directory.iterdir() if item.is_file())

    def save_image_to_app_directory(self, source: str | Path) -> str:
        """Copy ``source`` to the document root under its own file name.

        Used by the gallery. Unlike :meth:`save_content_item` an existing
        destination is never replaced.
        """
        source_path = _local_path(source)
        destination = self.root / _check_file_name(source_path.name)

        try:
            self.root.mkdir(parents=True, exist_ok=True)
            if destination.exists():
                raise FileExistsError(f"{destination} already exists")
            shutil.copyfile(source_path, destination)
        except FileExistsError as exc:
            logger.error("Error saving image: %s", exc)
            raise MediaStoreError(f"Cannot save image {destination}", cause=exc) from exc
        except OSError as exc:
            with suppress(OSError):
                destination.unlink(missing_ok=True)
            logger.error("Error saving image: %s", exc)
            raise MediaStoreError(f"Cannot save image {destination}", cause=exc) from exc

        return str(destination)
