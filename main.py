import logging

from config import Settings, get_settings
from core.app_context import AppContext, build_context
from database.init import init_database
from services.media_store import MediaStoreError
from utils.logging_config import setup_logging

__all__ = ["bootstrap"]


def bootstrap(settings: Settings | None = None) -> AppContext:
    """Prepare the clinic core: logging, database, media directories, session."""

    settings = settings or get_settings()
    setup_logging(settings)
    logger = logging.getLogger(__name__)

    context = build_context(settings)
    if not init_database(context.storage):
        logger.warning("Continuing without a usable database")

    try:
        context.media_store.ensure_directories_exist()
    except MediaStoreError as e:
        logger.warning("Media directories unavailable: %s", e)

    user = context.auth_session.restore()
    if user:
        logger.info("Restored session for %s", user.email)
    return context
