from __future__ import annotations

import re
from datetime import time
from typing import NamedTuple


MINUTES_PER_DAY = 24 * 60

_COLON_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_COMPACT_PATTERN = re.compile(r"^(\d{3,4})$")
_NOISE = re.compile(r"[^\d:]")


class InvalidTimeFormat(ValueError):
    """Строка не похожа на время суток (ЧЧ:ММ, Ч:ММ, ЧММ или ЧЧММ)."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid time of day: {value!r}")
        self.value = value


class Shift(NamedTuple):
    result: int
    day_offset: int


def _to_minutes(hours: int, minutes: int, raw: str) -> int:
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise InvalidTimeFormat(raw)
    return hours * 60 + minutes


def parse_time(value: str) -> int:
    """
    Переводит строку во время суток в минутах от полуночи.
    Всё, кроме цифр и двоеточия, отбрасывается: "7:30 am" и "07h30" дают 450.
    """
    cleaned = _NOISE.sub("", value or "")
    match = _COLON_PATTERN.match(cleaned)
    if match:
        return _to_minutes(int(match.group(1)), int(match.group(2)), value)
    match = _COMPACT_PATTERN.match(cleaned)
    if match:
        digits = match.group(1)
        return _to_minutes(int(digits[:-2]), int(digits[-2:]), value)
    raise InvalidTimeFormat(value)


def format_time(minute_of_day: int) -> str:
    if not 0 <= minute_of_day < MINUTES_PER_DAY:
        raise ValueError(f"minute_of_day out of range: {minute_of_day}")
    hours, minutes = divmod(minute_of_day, 60)
    return f"{hours:02d}:{minutes:02d}"


def shift(anchor: int, delta_minutes: int) -> Shift:
    # divmod округляет вниз, поэтому остаток всегда в [0, 1439]
    day_offset, result = divmod(anchor + delta_minutes, MINUTES_PER_DAY)
    return Shift(result=result, day_offset=day_offset)


def from_time(value: time) -> int:
    return value.hour * 60 + value.minute
