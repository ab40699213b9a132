from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple, Union

from app.models import QualityTier, SleepMode
from app.services.time_of_day import MINUTES_PER_DAY, format_time, parse_time, shift


CYCLE_LENGTH_MINUTES = 90
SLEEP_ONSET_DELAY_MINUTES = 14
CYCLE_COUNTS = (3, 4, 5, 6)

QUALITY_BY_CYCLES = {
    3: QualityTier.FAIR,
    4: QualityTier.GOOD,
    5: QualityTier.OPTIMAL,
    6: QualityTier.OPTIMAL,
}


@dataclass(frozen=True, slots=True)
class Recommendation:
    cycle_count: int
    result_time: int
    total_sleep_minutes: int
    day_offset: int
    quality: QualityTier
    relative_label: str
    hours_from_now: int

    @property
    def clock(self) -> str:
        return format_time(self.result_time)


def classify_quality(cycles: int) -> QualityTier:
    try:
        return QUALITY_BY_CYCLES[cycles]
    except KeyError:
        raise ValueError(f"Unsupported cycle count: {cycles}") from None


def cycle_sequence(mode: SleepMode) -> Tuple[int, ...]:
    """Отбой → подъём идёт от 3 циклов к 6, подъём → отбой наоборот."""
    if mode is SleepMode.BEDTIME:
        return CYCLE_COUNTS
    return tuple(reversed(CYCLE_COUNTS))


def total_sleep_minutes(cycles: int) -> int:
    return SLEEP_ONSET_DELAY_MINUTES + cycles * CYCLE_LENGTH_MINUTES


def hours_between(result: int, day_offset: int, now: int) -> int:
    diff_minutes = result + day_offset * MINUTES_PER_DAY - now
    # половина часа округляется вверх: +90 мин → 2, -90 мин → -1
    return math.floor(diff_minutes / 60 + 0.5)


def relative_label(hours_from_now: int) -> str:
    if hours_from_now == 0:
        return "now"
    if hours_from_now > 0:
        return f"in {hours_from_now}h"
    return f"{abs(hours_from_now)}h ago"


def calculate(
    anchor_input: str,
    mode: Union[SleepMode, str],
    now: int,
) -> List[Recommendation]:
    """
    Подбирает четыре варианта времени на противоположном конце сна.

    В режиме BEDTIME anchor_input — время отбоя, результат — время подъёма;
    в режиме WAKETIME наоборот. Порядок вариантов совпадает с cycle_sequence
    и не пересортировывается по времени. InvalidTimeFormat пробрасывается
    без частичных результатов.
    """
    mode = SleepMode(mode)
    if not 0 <= now < MINUTES_PER_DAY:
        raise ValueError(f"now out of range: {now}")
    anchor = parse_time(anchor_input)
    direction = 1 if mode is SleepMode.BEDTIME else -1

    recommendations: list[Recommendation] = []
    for cycles in cycle_sequence(mode):
        minutes = total_sleep_minutes(cycles)
        result, day_offset = shift(anchor, direction * minutes)
        hours = hours_between(result, day_offset, now)
        recommendations.append(
            Recommendation(
                cycle_count=cycles,
                result_time=result,
                total_sleep_minutes=minutes,
                day_offset=day_offset,
                quality=classify_quality(cycles),
                relative_label=relative_label(hours),
                hours_from_now=hours,
            )
        )
    return recommendations
