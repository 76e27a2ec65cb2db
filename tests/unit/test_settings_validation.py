"""Unit tests for startup settings validation."""

import pytest

from core.settings import AppSettings, ValidationSettings, app_settings, validation_settings
from core.validation import validate_all_settings


def test_defaults_are_valid():
    validate_all_settings()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("RECENCY_WINDOW_MONTHS", "12")
    monkeypatch.setenv("LOG_JSON", "false")

    assert ValidationSettings().RECENCY_WINDOW_MONTHS == 12
    assert AppSettings().LOG_JSON is False


def test_posix_tz_variable_is_ignored(monkeypatch):
    monkeypatch.setenv("TZ", ":/etc/localtime")
    monkeypatch.delenv("COMPLIANCE_TZ", raising=False)

    assert AppSettings().COMPLIANCE_TZ == "America/New_York"
    validate_all_settings()


@pytest.mark.parametrize(
    "target, name, value, expected",
    [
        (app_settings, "LOG_LEVEL", "LOUD", "LOG_LEVEL=LOUD"),
        (app_settings, "COMPLIANCE_TZ", "Mars/Olympus_Mons", "COMPLIANCE_TZ=Mars/Olympus_Mons"),
        (validation_settings, "RECENCY_WINDOW_MONTHS", 0, "RECENCY_WINDOW_MONTHS=0"),
        (validation_settings, "DEFAULT_DOCUMENT_TYPE", "passport", "DEFAULT_DOCUMENT_TYPE=passport"),
        (validation_settings, "MAX_TEXT_LENGTH", 0, "MAX_TEXT_LENGTH=0"),
    ],
)
def test_invalid_setting_fails_startup(monkeypatch, target, name, value, expected):
    monkeypatch.setattr(target, name, value)

    with pytest.raises(RuntimeError) as exc_info:
        validate_all_settings()

    assert expected in str(exc_info.value)


def test_all_problems_reported_together(monkeypatch):
    monkeypatch.setattr(app_settings, "LOG_LEVEL", "LOUD")
    monkeypatch.setattr(validation_settings, "MAX_TEXT_LENGTH", -1)

    with pytest.raises(RuntimeError) as exc_info:
        validate_all_settings()

    message = str(exc_info.value)
    assert "LOG_LEVEL" in message
    assert "MAX_TEXT_LENGTH" in message
