from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import settings
from app.services.time_of_day import from_time


logger = logging.getLogger(__name__)

# Маппинг language_code на примерные timezone
LANGUAGE_TO_TIMEZONE = {
    "ru": "Europe/Moscow",
    "uk": "Europe/Kyiv",
    "be": "Europe/Minsk",
    "kz": "Asia/Almaty",
    "uz": "Asia/Tashkent",
    "en": "America/New_York",  # По умолчанию для английского
    "de": "Europe/Berlin",
    "fr": "Europe/Paris",
    "es": "Europe/Madrid",
    "it": "Europe/Rome",
    "pt": "America/Sao_Paulo",
    "pl": "Europe/Warsaw",
    "tr": "Europe/Istanbul",
    "ar": "Asia/Dubai",
    "zh": "Asia/Shanghai",
    "ja": "Asia/Tokyo",
    "ko": "Asia/Seoul",
}


def detect_timezone_from_user(language_code: Optional[str] = None) -> str:
    """
    Определяет timezone на основе language_code пользователя.
    Если language_code не указан или не найден, возвращает зону из настроек.
    """
    if not language_code:
        return settings.timezone

    # Берем первые 2 символа (например, "ru" из "ru-RU")
    lang = language_code.lower().split("-")[0].split("_")[0]
    return LANGUAGE_TO_TIMEZONE.get(lang, settings.timezone)


def resolve_zone(tz_name: Optional[str]) -> ZoneInfo:
    if tz_name:
        try:
            return ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone {tz_name!r}, falling back to {settings.timezone}")
    return ZoneInfo(settings.timezone)


def local_minute_of_day(tz_name: Optional[str], moment: Optional[datetime] = None) -> int:
    """Текущее (или переданное) время как минуты от полуночи по часам пользователя."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return from_time(moment.astimezone(resolve_zone(tz_name)).time())
