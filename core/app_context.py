"""Application context: owner of the storage and its companions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

from config import Settings, get_settings
from database.db import ClinicStorage
from services.auth_service import AuthSession
from services.media_store import MediaStore
from services.preferences import PreferenceStore

DependencyName = str


class AppContext:
    """Application context with lazily created dependencies."""

    _DEPENDENCY_NAMES: ClassVar[set[str]] = {
        "storage",
        "media_store",
        "preferences",
        "auth_session",
    }

    def __init__(
        self,
        settings: Settings,
        *,
        storage_factory: Callable[[Settings], ClinicStorage],
        media_store_factory: Callable[[Settings], MediaStore],
        preferences_factory: Callable[[Settings], PreferenceStore],
        auth_session_factory: Callable[["AppContext"], AuthSession],
        overrides: dict[str, Any] | None = None,
        instances: dict[str, Any] | None = None,
    ) -> None:
        self._settings = settings
        self._storage_factory = storage_factory
        self._media_store_factory = media_store_factory
        self._preferences_factory = preferences_factory
        self._auth_session_factory = auth_session_factory
        self._overrides: dict[str, Any] = dict(overrides or {})
        self._instances: dict[str, Any] = dict(instances or {})

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def storage(self) -> ClinicStorage:
        return self._get_dependency(
            "storage",
            lambda: self._storage_factory(self._settings),
        )

    @property
    def media_store(self) -> MediaStore:
        return self._get_dependency(
            "media_store",
            lambda: self._media_store_factory(self._settings),
        )

    @property
    def preferences(self) -> PreferenceStore:
        return self._get_dependency(
            "preferences",
            lambda: self._preferences_factory(self._settings),
        )

    @property
    def auth_session(self) -> AuthSession:
        return self._get_dependency(
            "auth_session",
            lambda: self._auth_session_factory(self),
        )

    def override(self, **deps: Any) -> "AppContext":
        """Return a new context with some dependencies replaced."""

        override_args = dict(deps)
        new_settings = override_args.pop("settings", self._settings)

        unknown = set(override_args) - self._DEPENDENCY_NAMES
        if unknown:
            names = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown dependencies to override: {names}")

        overrides = dict(self._overrides)
        overrides.update(override_args)
        if new_settings is self._settings:
            instances = {
                key: value
                for key, value in self._instances.items()
                if key not in override_args
            }
        else:
            instances = {}
        return AppContext(
            settings=new_settings,
            storage_factory=self._storage_factory,
            media_store_factory=self._media_store_factory,
            preferences_factory=self._preferences_factory,
            auth_session_factory=self._auth_session_factory,
            overrides=overrides,
            instances=instances,
        )

    def close(self) -> None:
        """Close the storage if it was ever created."""
        storage = self._overrides.get("storage") or self._instances.get("storage")
        if storage is not None:
            storage.close()

    def _get_dependency(
        self, name: DependencyName, factory: Callable[[], Any]
    ) -> Any:
        if name in self._overrides:
            return self._overrides[name]
        if name not in self._instances:
            self._instances[name] = factory()
        return self._instances[name]


def build_context(settings: Settings | None = None) -> AppContext:
    settings = settings or get_settings()
    return AppContext(
        settings=settings,
        storage_factory=lambda s: ClinicStorage(s.resolve_database_path()),
        media_store_factory=MediaStore.from_settings,
        preferences_factory=lambda s: PreferenceStore(s.resolve_preferences_path()),
        auth_session_factory=lambda context: AuthSession(
            context.storage, context.preferences
        ),
    )


_app_context: AppContext | None = None


def get_app_context() -> AppContext:
    """Return (creating on first use) the process-wide context."""

    global _app_context
    if _app_context is None:
        _app_context = build_context()
    return _app_context


__all__ = ["AppContext", "build_context", "get_app_context"]
