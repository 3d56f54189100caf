import json
import logging

import pytest

from services.preferences import THEME_MODE_KEY, USER_DATA_KEY, PreferenceStore


def test_missing_values_are_none(preferences):
    assert preferences.get_theme_mode() is None
    assert preferences.get_user_data() is None
    assert preferences.get_user_token() is None


def test_theme_mode_round_trip(preferences):
    preferences.set_theme_mode(True)
    assert preferences.get_theme_mode() is True

    preferences.set_theme_mode(False)
    assert preferences.get_theme_mode() is False


def test_values_are_stored_as_json_strings(preferences):
    preferences.set_theme_mode(True)
    preferences.set_user_data({"id": 1, "email": "user", "role": "user"})

    raw = json.loads(preferences.path.read_text(encoding="utf-8"))

    assert raw[THEME_MODE_KEY] == "true"
    assert json.loads(raw[USER_DATA_KEY]) == {"id": 1, "email": "user", "role": "user"}


def test_values_survive_new_instance(preferences):
    preferences.set_user_token("abc")

    assert PreferenceStore(preferences.path).get_user_token() == "abc"


def test_remove_and_clear(preferences):
    preferences.set_theme_mode(True)
    preferences.set_user_token("abc")

    preferences.remove_item(THEME_MODE_KEY)
    preferences.remove_item("never-set")
    assert preferences.get_theme_mode() is None
    assert preferences.get_user_token() == "abc"

    preferences.clear()
    preferences.clear()
    assert preferences.get_user_token() is None


def test_corrupted_file_reads_as_none(preferences, caplog):
    preferences.path.parent.mkdir(parents=True, exist_ok=True)
    preferences.path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert preferences.get_theme_mode() is None

    assert "Error reading preference" in caplog.text


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_write_replaces_unreadable_file(preferences, caplog, content):
    preferences.path.parent.mkdir(parents=True, exist_ok=True)
    preferences.path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        preferences.set_theme_mode(True)

    assert "Discarding unreadable preferences" in caplog.text
    assert preferences.get_theme_mode() is True
    assert json.loads(preferences.path.read_text(encoding="utf-8")) == {THEME_MODE_KEY: "true"}
