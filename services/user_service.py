"""Login principals: credential lookup and first-run seeding."""

import hmac
import logging

from database.db import ClinicStorage
from database.models import User, UserRole
from services.dto import UserDTO

logger = logging.getLogger(__name__)

DEFAULT_USERS = (
    {"email": "admin@rathidental.com", "password": "admin", "role": UserRole.ADMIN.value},
    {"email": "user", "password": "user", "role": UserRole.USER.value},
)


def ensure_default_users(storage: ClinicStorage) -> int:
    """Insert the built-in accounts whose email is absent; existing rows are kept."""
    created = 0
    with storage.session():
        for account in DEFAULT_USERS:
            _, was_created = User.get_or_create(
                email=account["email"],
                defaults={"password": account["password"], "role": account["role"]},
            )
            if was_created:
                created += 1
                logger.info("Seeded user %s", account["email"])
    return created


def get_user_by_email_and_password(
    storage: ClinicStorage, email: str, password: str
) -> UserDTO | None:
    """Return the user with exactly this email and password, or ``None``.

    The email comparison is case-sensitive, so ``user`` and ``User`` are
    different accounts.
    """
    with storage.session():
        user = User.get_or_none(User.email == email)
        if user is None:
            return None
        # TODO: store salted hashes instead of plain text passwords
        if not hmac.compare_digest(
            str(user.password).encode("utf-8"), str(password).encode("utf-8")
        ):
            return None
        try:
            return UserDTO.from_model(user)
        except ValueError:
            logger.warning("User %s has unknown role %r; login refused", user.email, user.role)
            return None


def count_users(storage: ClinicStorage) -> int:
    with storage.session():
        return User.select().count()
