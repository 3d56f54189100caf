"""Patient testimonials."""

from __future__ import annotations

import logging
from dataclasses import replace

from database.db import ClinicStorage, StorageError
from database.models import Testimonial
from services.dto import TestimonialCreateCommand, TestimonialDTO
from services.media_store import MediaCategory, MediaStore, build_content_file_name

logger = logging.getLogger(__name__)


def add_testimonial(storage: ClinicStorage, command: TestimonialCreateCommand) -> int:
    with storage.session():
        testimonial_id = Testimonial.insert(**command.to_payload()).execute()
    logger.info("Testimonial %s added from %s", testimonial_id, command.patient_name)
    return testimonial_id


def get_testimonials(storage: ClinicStorage) -> list[TestimonialDTO]:
    with storage.session():
        query = Testimonial.select().order_by(Testimonial.id.desc())
        return [TestimonialDTO.from_model(t) for t in query]


def get_testimonial(storage: ClinicStorage, testimonial_id: int) -> TestimonialDTO | None:
    with storage.session():
        testimonial = Testimonial.get_or_none(Testimonial.id == testimonial_id)
        return TestimonialDTO.from_model(testimonial) if testimonial else None


def delete_testimonial(storage: ClinicStorage, testimonial_id: int) -> None:
    with storage.session():
        cnt = Testimonial.delete().where(Testimonial.id == testimonial_id).execute()
    if cnt:
        logger.info("Testimonial %s deleted", testimonial_id)


def add_testimonial_with_photo(
    storage: ClinicStorage,
    media: MediaStore,
    command: TestimonialCreateCommand,
    source_path: str | None = None,
) -> int:
    """Insert a testimonial, copying the optional photo to ``Testimonials/`` first."""
    if not source_path:
        return add_testimonial(storage, command)

    saved_path = media.save_content_item(
        source_path, MediaCategory.TESTIMONIALS, build_content_file_name("testimonial")
    )
    try:
        return add_testimonial(storage, replace(command, image_path=saved_path))
    except StorageError:
        media.delete_content_item(saved_path)
        raise


def remove_testimonial(storage: ClinicStorage, media: MediaStore, testimonial_id: int) -> None:
    testimonial = get_testimonial(storage, testimonial_id)
    delete_testimonial(storage, testimonial_id)
    if testimonial and testimonial.image_path:
        media.delete_content_item(testimonial.image_path)
