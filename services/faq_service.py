"""Frequently asked questions."""

from __future__ import annotations

import logging

from database.db import ClinicStorage
from database.models import FAQ
from services.dto import FAQCreateCommand, FAQDTO

logger = logging.getLogger(__name__)


def add_faq(storage: ClinicStorage, question: str, answer: str) -> int:
    command = FAQCreateCommand(question=question, answer=answer)
    with storage.session():
        faq_id = FAQ.insert(**command.to_payload()).execute()
    logger.info("FAQ %s added", faq_id)
    return faq_id


def get_faqs(storage: ClinicStorage) -> list[FAQDTO]:
    with storage.session():
        return [FAQDTO.from_model(faq) for faq in FAQ.select().order_by(FAQ.id.desc())]


def delete_faq(storage: ClinicStorage, faq_id: int) -> None:
    with storage.session():
        cnt = FAQ.delete().where(FAQ.id == faq_id).execute()
    if cnt:
        logger.info("FAQ %s deleted", faq_id)
