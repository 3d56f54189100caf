"""Current-user holder backed by the preference store."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from database.db import ClinicStorage
from database.models import UserRole
from services.dto import UserDTO
from services.preferences import USER_DATA_KEY, PreferenceStore
from services.user_service import get_user_by_email_and_password

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What the session keeps about a user; never the password."""

    id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @classmethod
    def from_dto(cls, user: UserDTO) -> "SessionUser":
        return cls(id=user.id, email=user.email, role=user.role.value)


class AuthSession:
    def __init__(self, storage: ClinicStorage, preferences: PreferenceStore):
        self._storage = storage
        self._preferences = preferences
        self._user: SessionUser | None = None

    @property
    def current_user(self) -> SessionUser | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_admin(self) -> bool:
        return bool(self._user and self._user.is_admin)

    def login(self, email: str, password: str) -> SessionUser | None:
        """Look the credentials up; on success remember and persist the user."""
        user = get_user_by_email_and_password(self._storage, email, password)
        if user is None:
            logger.info("Login rejected for %s", email)
            return None
        self._user = SessionUser.from_dto(user)
        self._preferences.set_user_data(asdict(self._user))
        logger.info("User %s logged in as %s", user.email, user.role.value)
        return self._user

    def logout(self) -> None:
        if self._user is not None:
            logger.info("User %s logged out", self._user.email)
        self._user = None
        self._preferences.remove_item(USER_DATA_KEY)

    def restore(self) -> SessionUser | None:
        """Reload the user persisted by a previous :meth:`login`."""
        data = self._preferences.get_user_data()
        if not data:
            return None
        try:
            self._user = SessionUser(id=int(data["id"]), email=str(data["email"]), role=str(data["role"]))
        except (KeyError, TypeError, ValueError):
            logger.warning("Ignoring malformed session data: %r", data)
            return None
        return self._user
