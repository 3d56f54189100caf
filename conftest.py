import os
import signal
import sys
from pathlib import Path

import pytest

# Force tests to use in-memory SQLite by default to avoid touching any real DB.
os.environ.setdefault("DATABASE_PATH", ":memory:")

# ensure project root is on sys.path when running tests
sys.path.append(str(Path(__file__).resolve().parent))

from database.db import ClinicStorage
from database.init import init_database
from services.media_store import MediaStore
from services.preferences import PreferenceStore

_TEST_TIMEOUT = int(os.environ.get("PYTEST_TIMEOUT", "60"))


@pytest.fixture(autouse=True)
def watchdog():
    """Fail a test if it hangs longer than the timeout."""
    if not hasattr(signal, "SIGALRM"):
        yield
        return

    def handler(signum, frame):  # pragma: no cover - timeout handler
        pytest.fail("Test timeout exceeded", pytrace=False)

    signal.signal(signal.SIGALRM, handler)
    signal.alarm(_TEST_TIMEOUT)
    try:
        yield
    finally:
        signal.alarm(0)


@pytest.fixture()
def raw_storage():
    """Open in-memory storage without any tables."""
    storage = ClinicStorage(":memory:")
    storage.open()
    try:
        yield storage
    finally:
        storage.close()


@pytest.fixture()
def storage(raw_storage):
    """Initialized in-memory storage: schema migrated, default users seeded."""
    assert init_database(raw_storage)
    return raw_storage


@pytest.fixture()
def media_store(tmp_path):
    return MediaStore(tmp_path / "documents")


@pytest.fixture()
def preferences(tmp_path):
    return PreferenceStore(tmp_path / "documents" / "preferences.json")
