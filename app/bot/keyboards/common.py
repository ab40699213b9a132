from __future__ import annotations

from aiogram.utils.keyboard import InlineKeyboardBuilder, ReplyKeyboardBuilder

from app.models import SleepMode


BEDTIME_BUTTON = "🛏️ Время отбоя"
WAKETIME_BUTTON = "⏰ Время подъёма"

MODE_BUTTONS = {
    BEDTIME_BUTTON: SleepMode.BEDTIME,
    WAKETIME_BUTTON: SleepMode.WAKETIME,
}


def main_menu() -> ReplyKeyboardBuilder:
    builder = ReplyKeyboardBuilder()
    builder.button(text=BEDTIME_BUTTON)
    builder.button(text=WAKETIME_BUTTON)
    builder.adjust(2)
    return builder


def anchor_keyboard() -> InlineKeyboardBuilder:
    builder = InlineKeyboardBuilder()
    builder.button(text="Сейчас", callback_data="anchor:now")
    builder.button(text="Отмена", callback_data="anchor:cancel")
    builder.adjust(2)
    return builder


def timezone_keyboard() -> InlineKeyboardBuilder:
    """Создает клавиатуру с популярными часовыми поясами"""
    builder = InlineKeyboardBuilder()

    timezones = [
        ("🇷🇺 Москва (MSK)", "Europe/Moscow"),
        ("🇺🇦 Киев (EET)", "Europe/Kyiv"),
        ("🇧🇾 Минск (MSK)", "Europe/Minsk"),
        ("🇰🇿 Алматы (ALMT)", "Asia/Almaty"),
        ("🇪🇺 Берлин (CET)", "Europe/Berlin"),
        ("🇫🇷 Париж (CET)", "Europe/Paris"),
        ("🇬🇧 Лондон (GMT)", "Europe/London"),
        ("🇺🇸 Нью-Йорк (EST)", "America/New_York"),
        ("🇺🇸 Лос-Анджелес (PST)", "America/Los_Angeles"),
        ("🇯🇵 Токио (JST)", "Asia/Tokyo"),
    ]

    for label, tz in timezones:
        builder.button(text=label, callback_data=f"timezone:set:{tz}")

    builder.adjust(2)  # По 2 кнопки в ряд
    return builder
