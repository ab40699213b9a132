from __future__ import annotations

import logging
from datetime import datetime

from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message
from sqlmodel import delete, select

from app.bot.keyboards.common import main_menu, timezone_keyboard
from app.database import get_session
from app.models import User
from app.services.time_of_day import format_time
from app.services.timezone import detect_timezone_from_user, local_minute_of_day


logger = logging.getLogger(__name__)

router = Router(name="commands")

HELP_TEXT = (
    "Я подскажу, когда ложиться и вставать, чтобы просыпаться между циклами сна.\n"
    "/bedtime 23:30 — во сколько проснуться, если лечь в 23:30\n"
    "/wake 07:00 — во сколько лечь, чтобы встать в 07:00\n"
    "/fix_timezone — исправить часовой пояс\n"
    "/delete_data — удалить профиль\n\n"
    "Время можно писать как 23:30, 7:30 или 730."
)


@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext) -> None:
    await state.clear()
    async with get_session() as session:
        result = await session.exec(select(User).where(User.telegram_id == message.from_user.id))
        user = result.first()
        if not user:
            # Автоматически определяем timezone из language_code пользователя
            user = User(
                telegram_id=message.from_user.id,
                timezone=detect_timezone_from_user(message.from_user.language_code),
            )
            session.add(user)
            await session.commit()
            logger.info(f"Registered user {user.telegram_id} with timezone {user.timezone}")
    local_now = format_time(local_minute_of_day(user.timezone))
    await message.answer(
        "Привет! Один цикл сна длится около 90 минут, а засыпание занимает ~14 минут. "
        "Просыпаться лучше на границе циклов.\n\n"
        f"Ваш часовой пояс: {user.timezone} (сейчас {local_now}).\n\n"
        f"{HELP_TEXT}",
        reply_markup=main_menu().as_markup(resize_keyboard=True),
    )


@router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await message.answer(
        HELP_TEXT,
        reply_markup=main_menu().as_markup(resize_keyboard=True),
    )


@router.message(Command("fix_timezone"))
async def cmd_fix_timezone(message: Message) -> None:
    """Позволяет выбрать часовой пояс через inline кнопки"""
    async with get_session() as session:
        result = await session.exec(select(User).where(User.telegram_id == message.from_user.id))
        user = result.first()
        if not user:
            await message.answer("Профиль не найден. Используйте /start.")
            return

        await message.answer(
            f"Текущий часовой пояс: {user.timezone}\n\n"
            "Выберите ваш часовой пояс:",
            reply_markup=timezone_keyboard().as_markup(),
        )


@router.callback_query(F.data.startswith("timezone:set:"))
async def timezone_set_callback(callback: CallbackQuery) -> None:
    """Обработчик выбора часового пояса"""
    timezone = callback.data.split(":", 2)[-1]

    async with get_session() as session:
        result = await session.exec(select(User).where(User.telegram_id == callback.from_user.id))
        user = result.first()
        if not user:
            await callback.answer("Профиль не найден. Используйте /start.")
            return

        old_tz = user.timezone
        user.timezone = timezone
        user.updated_at = datetime.utcnow()
        session.add(user)
        await session.commit()
        logger.info(f"User {user.telegram_id} timezone changed: {old_tz} -> {timezone}")

        await callback.message.edit_text(
            f"✅ Часовой пояс изменён:\n"
            f"Было: {old_tz}\n"
            f"Стало: {timezone}\n\n"
            f"Подсказки «через N ч» теперь считаются по этому поясу."
        )
        await callback.answer(f"Часовой пояс установлен: {timezone}")


@router.message(Command("delete_data"))
async def cmd_delete(message: Message, state: FSMContext) -> None:
    await state.clear()
    async with get_session() as session:
        await session.exec(delete(User).where(User.telegram_id == message.from_user.id))
        await session.commit()
    await message.answer("Данные удалены. При необходимости начните заново через /start.")
