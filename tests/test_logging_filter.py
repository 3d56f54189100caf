import logging

import pytest

from config import Settings
from services import faq_service as fs
from utils.logging_config import PeeweeFilter, setup_logging


def _record(msg: str, sql: str | None = None) -> logging.LogRecord:
    record = logging.LogRecord("peewee", logging.DEBUG, "", 0, msg, None, None)
    if sql is not None:
        record.sql = sql
    return record


@pytest.mark.parametrize(
    "record",
    [
        _record('SELECT * FROM "leads"'),
        _record('   SELECT "t1"."id" FROM "faqs" AS "t1"'),
        _record("ignored", sql='SELECT * FROM "team_members"'),
        _record("ignored", sql="   SELECT 1"),
    ],
)
def test_filter_hides_select_queries(record):
    assert not PeeweeFilter().filter(record)


@pytest.mark.parametrize(
    "query",
    [
        'INSERT INTO "leads" ("name") VALUES (?)',
        'UPDATE "leads" SET "status" = ?',
        'DELETE FROM "faqs" WHERE ("id" = ?)',
        'CREATE TABLE IF NOT EXISTS "users" ("id" INTEGER NOT NULL PRIMARY KEY)',
    ],
)
def test_filter_keeps_writes(query):
    filt = PeeweeFilter()

    assert filt.filter(_record(query))
    assert filt.filter(_record(f"   {query}"))
    assert filt.filter(_record("ignored", sql=query))


def test_filter_unpacks_peewee_tuple_messages():
    filt = PeeweeFilter()
    select = logging.LogRecord(
        "peewee", logging.DEBUG, "", 0, ('SELECT "t1"."id" FROM "faqs" AS "t1"', []), None, None
    )
    insert = logging.LogRecord(
        "peewee", logging.DEBUG, "", 0, ('INSERT INTO "faqs" ("question") VALUES (?)', ["Q"]), None, None
    )

    assert not filt.filter(select)
    assert filt.filter(insert)


@pytest.fixture
def filtered_peewee_logger():
    peewee_logger = logging.getLogger("peewee")
    filt = PeeweeFilter()
    peewee_logger.addFilter(filt)
    try:
        yield peewee_logger
    finally:
        peewee_logger.removeFilter(filt)


def test_real_queries_hide_reads_and_keep_writes(storage, filtered_peewee_logger, caplog):
    caplog.set_level(logging.DEBUG, logger="peewee")

    fs.add_faq(storage, "Do you treat children?", "Yes")
    fs.get_faqs(storage)

    messages = [r.getMessage() for r in caplog.records if r.name == "peewee"]
    assert any("INSERT" in m for m in messages)
    assert not [m for m in messages if "SELECT" in m]


def test_setup_logging_uses_configured_file(tmp_path):
    settings = Settings(
        log_dir=str(tmp_path / "logs"),
        log_file_name="front_desk.log",
        log_level="WARNING",
    )
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        log_path = setup_logging(settings)
        logging.getLogger("clinic.test").warning("chair 2 out of service")
        for handler in root.handlers:
            handler.flush()

        assert log_path == tmp_path / "logs" / "front_desk.log"
        assert "chair 2 out of service" in log_path.read_text(encoding="utf-8")
        assert any(isinstance(f, PeeweeFilter) for f in logging.getLogger("peewee").filters)
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        peewee_logger = logging.getLogger("peewee")
        for f in [f for f in peewee_logger.filters if isinstance(f, PeeweeFilter)]:
            peewee_logger.removeFilter(f)
