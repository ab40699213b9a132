from __future__ import annotations

from datetime import datetime, timezone

from app.config import settings
from app.services.timezone import detect_timezone_from_user, local_minute_of_day


def test_detect_timezone_from_language_code():
    assert detect_timezone_from_user("ru-RU") == "Europe/Moscow"
    assert detect_timezone_from_user("de") == "Europe/Berlin"
    assert detect_timezone_from_user("ja_JP") == "Asia/Tokyo"


def test_detect_timezone_falls_back_to_settings():
    assert detect_timezone_from_user(None) == settings.timezone
    assert detect_timezone_from_user("xx") == settings.timezone


def test_local_minute_of_day_converts_zone():
    moment = datetime(2026, 1, 15, 20, 30, tzinfo=timezone.utc)
    assert local_minute_of_day("UTC", moment) == 20 * 60 + 30
    # Москва UTC+3 круглый год
    assert local_minute_of_day("Europe/Moscow", moment) == 23 * 60 + 30
    assert local_minute_of_day("Asia/Tokyo", moment) == 5 * 60 + 30


def test_naive_moment_is_treated_as_utc():
    assert local_minute_of_day("UTC", datetime(2026, 1, 15, 7, 5)) == 425


def test_unknown_zone_uses_default(caplog):
    moment = datetime(2026, 1, 15, 20, 30, tzinfo=timezone.utc)
    with caplog.at_level("WARNING"):
        value = local_minute_of_day("Mars/Olympus", moment)
    assert value == local_minute_of_day(settings.timezone, moment)
    assert "Mars/Olympus" in caplog.text
