from __future__ import annotations

from typing import Sequence

from app.models import QualityTier, SleepMode
from app.services.sleep import Recommendation
from app.services.time_of_day import format_time


INVALID_FORMAT_MESSAGE = "Неверный формат. Используйте ЧЧ:ММ (например, 23:30)."

QUALITY_ICONS = {
    QualityTier.OPTIMAL: "⭐",
    QualityTier.GOOD: "✨",
    QualityTier.FAIR: "💤",
}

QUALITY_LABELS = {
    QualityTier.OPTIMAL: "оптимально",
    QualityTier.GOOD: "хорошо",
    QualityTier.FAIR: "приемлемо",
}

ACTION_LABELS = {
    SleepMode.BEDTIME: "Подъём",
    SleepMode.WAKETIME: "Отбой",
}


def format_duration(minutes: int) -> str:
    hours, rest = divmod(minutes, 60)
    return f"{hours}h{rest:02d}"


def quality_icon(tier: QualityTier) -> str:
    return QUALITY_ICONS[tier]


def quality_label(tier: QualityTier) -> str:
    return QUALITY_LABELS[tier]


def humanize_relative(hours_from_now: int) -> str:
    if hours_from_now == 0:
        return "сейчас"
    if hours_from_now > 0:
        return f"через {hours_from_now} ч"
    return f"{abs(hours_from_now)} ч назад"


def _day_marker(day_offset: int) -> str:
    if day_offset > 0:
        return " (+1 д)" if day_offset == 1 else f" (+{day_offset} д)"
    if day_offset < 0:
        return " (−1 д)" if day_offset == -1 else f" (−{abs(day_offset)} д)"
    return ""


def describe_recommendation(rec: Recommendation, mode: SleepMode) -> str:
    return (
        f"{quality_icon(rec.quality)} <b>{rec.clock}</b>{_day_marker(rec.day_offset)} — "
        f"{ACTION_LABELS[SleepMode(mode)]}, {rec.cycle_count} цикл(а), "
        f"{format_duration(rec.total_sleep_minutes)} сна, "
        f"{quality_label(rec.quality)} ({humanize_relative(rec.hours_from_now)})"
    )


def render_recommendations(
    anchor: int,
    mode: SleepMode,
    recommendations: Sequence[Recommendation],
) -> str:
    mode = SleepMode(mode)
    if mode is SleepMode.BEDTIME:
        header = f"🛏️ Отбой в <b>{format_time(anchor)}</b>. Лучше проснуться:"
    else:
        header = f"⏰ Подъём в <b>{format_time(anchor)}</b>. Лучше лечь:"
    lines = [header, ""]
    lines.extend(describe_recommendation(rec, mode) for rec in recommendations)
    lines.append("")
    lines.append("Один цикл сна ≈ 90 мин, плюс ~14 мин на засыпание.")
    return "\n".join(lines)
