"""Call-back requests left by patients.

``status`` is the only mutable column; the admin toggles it between
``pending`` and ``contacted`` by hand.
"""

from __future__ import annotations

import logging

from database.db import ClinicStorage
from database.models import Lead, LeadStatus
from services.dto import LeadCreateCommand, LeadDTO
from services.validators import validate_phone
from utils.time_utils import utc_now

logger = logging.getLogger(__name__)

DEFAULT_TREATMENT_INTEREST = "General"


def add_lead(
    storage: ClinicStorage,
    name: str,
    phone: str,
    treatment_interest: str = DEFAULT_TREATMENT_INTEREST,
) -> int:
    command = LeadCreateCommand(name=name, phone=phone, treatment_interest=treatment_interest)
    if not validate_phone(command.phone):
        logger.warning("Lead from %s has an unusual phone number: %r", command.name, command.phone)
    payload = command.to_payload()
    payload.update(status=LeadStatus.PENDING.value, created_at=utc_now())
    with storage.session():
        lead_id = Lead.insert(**payload).execute()
    logger.info("Lead %s added (%s)", lead_id, command.treatment_interest)
    return lead_id


def get_leads(storage: ClinicStorage) -> list[LeadDTO]:
    """All leads, most recent request first."""
    with storage.session():
        query = Lead.select().order_by(Lead.created_at.desc(), Lead.id.desc())
        return [LeadDTO.from_model(lead) for lead in query]


def update_lead_status(storage: ClinicStorage, lead_id: int, status: LeadStatus | str) -> None:
    try:
        status = LeadStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in LeadStatus)
        raise ValueError(f"Unknown lead status {status!r}; expected one of: {allowed}") from None

    with storage.session():
        cnt = Lead.update(status=status.value).where(Lead.id == lead_id).execute()
    if cnt:
        logger.info("Lead %s marked %s", lead_id, status.value)


def toggle_lead_status(storage: ClinicStorage, lead_id: int) -> LeadStatus | None:
    """Flip pending ↔ contacted and return the new status, ``None`` if absent."""
    with storage.session():
        lead = Lead.get_or_none(Lead.id == lead_id)
    if lead is None:
        return None
    new_status = (
        LeadStatus.CONTACTED
        if lead.status == LeadStatus.PENDING.value
        else LeadStatus.PENDING
    )
    update_lead_status(storage, lead_id, new_status)
    return new_status
