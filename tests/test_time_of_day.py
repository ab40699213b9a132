from __future__ import annotations

from datetime import time

import pytest

from app.services.time_of_day import (
    MINUTES_PER_DAY,
    InvalidTimeFormat,
    format_time,
    from_time,
    parse_time,
    shift,
)


def test_parse_colon_forms():
    assert parse_time("07:30") == 450
    assert parse_time("7:30") == 450
    assert parse_time("00:00") == 0
    assert parse_time("23:59") == 1439


def test_parse_compact_form_matches_colon_form():
    assert parse_time("730") == parse_time("07:30") == 450
    assert parse_time("0730") == 450
    assert parse_time("2330") == 1410
    assert parse_time("000") == 0


def test_parse_strips_noise():
    assert parse_time("  23:30  ") == 1410
    assert parse_time("7:30 am") == 450
    assert parse_time("07h30") == 450


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "25:61", "24:00", "12:60", "7", "12345", "1:2", "12:345", "::", "abc", "99"],
)
def test_parse_rejects_invalid(raw):
    with pytest.raises(InvalidTimeFormat) as exc:
        parse_time(raw)
    assert exc.value.value == raw


def test_invalid_time_format_is_value_error():
    with pytest.raises(ValueError):
        parse_time("25:00")


def test_parse_format_round_trip_for_every_minute():
    for hour in range(24):
        for minute in range(60):
            text = f"{hour:02d}:{minute:02d}"
            assert format_time(parse_time(text)) == text


def test_format_pads_and_rejects_out_of_range():
    assert format_time(5) == "00:05"
    assert format_time(254) == "04:14"
    with pytest.raises(ValueError):
        format_time(MINUTES_PER_DAY)
    with pytest.raises(ValueError):
        format_time(-1)


def test_shift_forward_across_midnight():
    assert shift(1410, 284) == (254, 1)
    assert shift(1410, 284).day_offset == 1


def test_shift_backward_across_midnight():
    result = shift(420, -554)
    assert result.result == 1306
    assert result.day_offset == -1


def test_shift_within_day():
    assert shift(420, -374) == (46, 0)
    assert shift(0, 0) == (0, 0)
    assert shift(1439, 1) == (0, 1)
    assert shift(0, -1) == (1439, -1)


@pytest.mark.parametrize("anchor", [0, 1, 719, 1438, 1439])
@pytest.mark.parametrize("delta", [-10_000, -2881, -1440, -554, -1, 0, 1, 284, 1440, 2881, 10_000])
def test_shift_reconstructs_raw_minutes(anchor, delta):
    result, day_offset = shift(anchor, delta)
    assert 0 <= result < MINUTES_PER_DAY
    assert anchor + delta == day_offset * MINUTES_PER_DAY + result


def test_from_time():
    assert from_time(time(23, 30)) == 1410
    assert from_time(time(0, 1)) == 1
