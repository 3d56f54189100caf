"""Clinic team members shown on the team screen."""

from __future__ import annotations

import logging
from dataclasses import replace

from database.db import ClinicStorage, StorageError
from database.models import TeamMember
from services.dto import TeamMemberCreateCommand, TeamMemberDTO
from services.media_store import MediaCategory, MediaStore, build_content_file_name

logger = logging.getLogger(__name__)


def add_team_member(storage: ClinicStorage, command: TeamMemberCreateCommand) -> int:
    with storage.session():
        member_id = TeamMember.insert(**command.to_payload()).execute()
    logger.info("Team member %s added: %s", member_id, command.name)
    return member_id


def get_team_members(storage: ClinicStorage) -> list[TeamMemberDTO]:
    """Members by ``display_order``; equal orders show the newest first."""
    with storage.session():
        query = TeamMember.select().order_by(
            TeamMember.display_order.asc(), TeamMember.id.desc()
        )
        return [TeamMemberDTO.from_model(m) for m in query]


def get_team_member(storage: ClinicStorage, member_id: int) -> TeamMemberDTO | None:
    with storage.session():
        member = TeamMember.get_or_none(TeamMember.id == member_id)
        return TeamMemberDTO.from_model(member) if member else None


def delete_team_member(storage: ClinicStorage, member_id: int) -> None:
    with storage.session():
        cnt = TeamMember.delete().where(TeamMember.id == member_id).execute()
    if cnt:
        logger.info("Team member %s deleted", member_id)


def add_team_member_with_photo(
    storage: ClinicStorage,
    media: MediaStore,
    command: TeamMemberCreateCommand,
    source_path: str,
) -> int:
    """Save the photo under ``Team/`` and insert the member pointing at it."""
    saved_path = media.save_content_item(
        source_path, MediaCategory.TEAM, build_content_file_name("team")
    )
    try:
        return add_team_member(storage, replace(command, image_path=saved_path))
    except StorageError:
        media.delete_content_item(saved_path)
        raise


def remove_team_member(storage: ClinicStorage, media: MediaStore, member_id: int) -> None:
    """Delete the member row, then the photo it referenced."""
    member = get_team_member(storage, member_id)
    delete_team_member(storage, member_id)
    if member and member.image_path:
        media.delete_content_item(member.image_path)
