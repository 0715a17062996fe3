import pytest

from sadak_sathi.config import parse_args
from sadak_sathi.config.settings import (
    SETTINGS,
    DashboardSettings,
    _gemini_keys,
    _get_multiple_keys,
    update_from_kwargs,
)


def test_numbered_keys_are_collected_in_order(monkeypatch):
    monkeypatch.setenv("TEST_KEY", "base")
    monkeypatch.setenv("TEST_KEY_1", "one")
    monkeypatch.setenv("TEST_KEY_2", "two")
    monkeypatch.setenv("TEST_KEY_4", "gap")
    assert _get_multiple_keys("TEST_KEY") == ["base", "one", "two"]


def test_legacy_api_key_is_a_fallback(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY_1", raising=False)
    monkeypatch.setenv("API_KEY", "legacy")
    assert _gemini_keys() == ["legacy"]


def test_first_key_becomes_the_default():
    settings = DashboardSettings(gemini_api_keys=["a", "b"])
    assert settings.gemini_api_key == "a"
    assert DashboardSettings(gemini_api_keys=[]).gemini_api_key is None


def test_update_from_kwargs_returns_copy():
    updated = update_from_kwargs(road_sheet_gid="77")
    assert updated.road_sheet_gid == "77"
    assert updated.spreadsheet_id == SETTINGS.spreadsheet_id
    assert updated is not SETTINGS


def test_parse_args_ignores_unknown_flags(monkeypatch):
    monkeypatch.delenv("SADAK_SHEET_ID", raising=False)
    monkeypatch.delenv("SHEET_FETCH_TIMEOUT", raising=False)
    args = parse_args(["--sheet-id", "xyz", "--status", "blocked"])
    assert (args.sheet_id, args.timeout) == ("xyz", 15.0)


def test_parse_args_rejects_non_positive_timeout():
    with pytest.raises(SystemExit):
        parse_args(["--timeout", "0"])
