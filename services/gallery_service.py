"""Treatment gallery: before/after image pairs."""

from __future__ import annotations

import logging

from database.db import ClinicStorage, StorageError
from database.models import GalleryCategory, GalleryItem
from services.dto import GalleryItemCreateCommand, GalleryItemDTO
from services.media_store import MediaStore

logger = logging.getLogger(__name__)


def add_gallery_item(
    storage: ClinicStorage,
    title: str,
    category: GalleryCategory | str,
    before_image_path: str,
    after_image_path: str,
) -> int:
    command = GalleryItemCreateCommand(
        title=title,
        category=category,
        before_image_path=before_image_path,
        after_image_path=after_image_path,
    )
    with storage.session():
        item_id = GalleryItem.insert(**command.to_payload()).execute()
    logger.info("Gallery item %s added (%s)", item_id, command.category.value)
    return item_id


def get_gallery_items(storage: ClinicStorage) -> list[GalleryItemDTO]:
    """All gallery items, newest first."""
    with storage.session():
        query = GalleryItem.select().order_by(GalleryItem.id.desc())
        return [GalleryItemDTO.from_model(item) for item in query]


def get_gallery_item(storage: ClinicStorage, item_id: int) -> GalleryItemDTO | None:
    with storage.session():
        item = GalleryItem.get_or_none(GalleryItem.id == item_id)
        return GalleryItemDTO.from_model(item) if item else None


def delete_gallery_item(storage: ClinicStorage, item_id: int) -> None:
    with storage.session():
        cnt = GalleryItem.delete().where(GalleryItem.id == item_id).execute()
    if cnt:
        logger.info("Gallery item %s deleted", item_id)


# ─────────────────────────── with image files ───────────────────────────


def add_gallery_item_with_images(
    storage: ClinicStorage,
    media: MediaStore,
    title: str,
    category: GalleryCategory | str,
    before_source: str,
    after_source: str,
) -> int:
    """Copy both images into the app directory, then insert the row.

    If the insert fails the copied images are removed again.
    """
    saved: list[str] = []
    try:
        saved.append(media.save_image_to_app_directory(before_source))
        saved.append(media.save_image_to_app_directory(after_source))
        return add_gallery_item(storage, title, category, saved[0], saved[1])
    except (StorageError, ValueError):
        for path in saved:
            media.delete_content_item(path)
        raise


def remove_gallery_item(storage: ClinicStorage, media: MediaStore, item_id: int) -> None:
    """Delete the row first, then its image files."""
    item = get_gallery_item(storage, item_id)
    delete_gallery_item(storage, item_id)
    if item is None:
        return
    for path in (item.before_image_path, item.after_image_path):
        if path:
            media.delete_content_item(path)
