"""Care guides: aftercare instructions published by the clinic."""

from __future__ import annotations

import logging

from database.db import ClinicStorage
from database.models import CareGuide
from services.dto import CareGuideCreateCommand, CareGuideDTO

logger = logging.getLogger(__name__)


def add_care_guide(storage: ClinicStorage, title: str, content: str) -> int:
    command = CareGuideCreateCommand(title=title, content=content)
    with storage.session():
        guide_id = CareGuide.insert(**command.to_payload()).execute()
    logger.info("Care guide %s added: %s", guide_id, command.title)
    return guide_id


def get_care_guides(storage: ClinicStorage) -> list[CareGuideDTO]:
    with storage.session():
        query = CareGuide.select().order_by(CareGuide.id.desc())
        return [CareGuideDTO.from_model(guide) for guide in query]


def delete_care_guide(storage: ClinicStorage, guide_id: int) -> None:
    with storage.session():
        cnt = CareGuide.delete().where(CareGuide.id == guide_id).execute()
    if cnt:
        logger.info("Care guide %s deleted", guide_id)
