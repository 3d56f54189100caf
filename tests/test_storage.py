import pytest
from peewee import IntegrityError

from database.db import ClinicStorage, StorageError
from database.init import init_database
from database.models import Lead, User
from database.models import Testimonial as TestimonialModel
from services import faq_service as fs


def test_closed_storage_rejects_operations():
    storage = ClinicStorage(":memory:")

    with pytest.raises(StorageError, match="not open"):
        fs.get_faqs(storage)


def test_open_and_close_are_idempotent():
    storage = ClinicStorage(":memory:")
    storage.open()
    storage.open()
    assert storage.is_open
    storage.close()
    storage.close()
    assert not storage.is_open
    assert "closed" in repr(storage)


def test_context_manager_closes(tmp_path):
    with ClinicStorage(tmp_path / "c.db") as storage:
        assert storage.is_open
    assert not storage.is_open


def test_constraint_violation_carries_engine_error(storage):
    with pytest.raises(StorageError) as exc_info:
        with storage.session():
            User.create(email="user", password="x", role="user")

    assert isinstance(exc_info.value.cause, IntegrityError)
    assert exc_info.value.__cause__ is exc_info.value.cause


@pytest.mark.parametrize(
    "model, values",
    [
        (TestimonialModel, {"patient_name": "A", "treatment_type": "B", "content": "C", "rating": 9}),
        (TestimonialModel, {"patient_name": "A", "treatment_type": "B", "content": "C", "rating": 0}),
        (Lead, {"name": "A", "phone": "1", "status": "archived"}),
    ],
)
def test_check_constraints_are_enforced(storage, model, values):
    with pytest.raises(StorageError):
        with storage.session():
            model.insert(**values).execute()


def test_storages_are_isolated():
    with ClinicStorage(":memory:") as first, ClinicStorage(":memory:") as second:
        assert init_database(first)
        assert init_database(second)

        fs.add_faq(first, "Only here?", "Yes")

        assert len(fs.get_faqs(first)) == 1
        assert fs.get_faqs(second) == []
