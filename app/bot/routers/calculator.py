from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from aiogram import F, Router
from aiogram.filters import Command, CommandObject
from aiogram.fsm.context import FSMContext
from aiogram.fsm.state import State, StatesGroup
from aiogram.types import CallbackQuery, Message

from app.bot.keyboards.common import MODE_BUTTONS, anchor_keyboard, main_menu
from app.config import settings
from app.database import fetch_user
from app.models import SleepMode
from app.services.rendering import INVALID_FORMAT_MESSAGE, render_recommendations
from app.services.sleep import calculate
from app.services.time_of_day import InvalidTimeFormat, format_time, parse_time
from app.services.timezone import local_minute_of_day


logger = logging.getLogger(__name__)

router = Router(name="calculator")


class CalculatorStates(StatesGroup):
    waiting_time = State()


PROMPTS = {
    SleepMode.BEDTIME: "Во сколько вы ложитесь? Отправьте время в формате ЧЧ:ММ (например, 23:30).",
    SleepMode.WAKETIME: "Во сколько нужно проснуться? Отправьте время в формате ЧЧ:ММ (например, 07:00).",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def _user_timezone(telegram_id: int) -> str:
    user = await fetch_user(telegram_id)
    return user.timezone if user else settings.timezone


async def send_recommendations(
    message: Message,
    anchor_text: str,
    mode: SleepMode,
    tz_name: str,
    moment: Optional[datetime] = None,
) -> bool:
    """
    Считает варианты и отправляет их в чат.
    Возвращает False, если время не распознано (пользователю уже показана подсказка).
    """
    now = local_minute_of_day(tz_name, moment)
    try:
        anchor = parse_time(anchor_text)
        recommendations = calculate(anchor_text, mode, now)
    except InvalidTimeFormat as exc:
        logger.info(f"Rejected time input {exc.value!r} (mode={mode.value})")
        await message.answer(INVALID_FORMAT_MESSAGE)
        return False
    logger.info(
        f"Calculated {mode.value} from {format_time(anchor)} at now={format_time(now)} ({tz_name}): "
        f"{[rec.clock for rec in recommendations]}"
    )
    await message.answer(render_recommendations(anchor, mode, recommendations))
    return True


async def _ask_for_time(message: Message, state: FSMContext, mode: SleepMode) -> None:
    await state.set_state(CalculatorStates.waiting_time)
    await state.update_data(mode=mode.value)
    await message.answer(PROMPTS[mode], reply_markup=anchor_keyboard().as_markup())


async def _handle_command(message: Message, command: CommandObject, state: FSMContext, mode: SleepMode) -> None:
    if not command.args:
        await _ask_for_time(message, state, mode)
        return
    await state.clear()
    tz_name = await _user_timezone(message.from_user.id)
    await send_recommendations(message, command.args, mode, tz_name)


@router.message(Command("bedtime"))
async def cmd_bedtime(message: Message, command: CommandObject, state: FSMContext) -> None:
    await _handle_command(message, command, state, SleepMode.BEDTIME)


@router.message(Command("wake"))
async def cmd_wake(message: Message, command: CommandObject, state: FSMContext) -> None:
    await _handle_command(message, command, state, SleepMode.WAKETIME)


@router.message(F.text.in_(set(MODE_BUTTONS)))
async def menu_mode(message: Message, state: FSMContext) -> None:
    await _ask_for_time(message, state, MODE_BUTTONS[message.text])


@router.message(CalculatorStates.waiting_time, F.text)
async def handle_time_input(message: Message, state: FSMContext) -> None:
    data = await state.get_data()
    mode = SleepMode(data.get("mode", SleepMode.BEDTIME.value))
    tz_name = await _user_timezone(message.from_user.id)
    if await send_recommendations(message, message.text, mode, tz_name):
        await state.clear()


@router.callback_query(CalculatorStates.waiting_time, F.data == "anchor:now")
async def anchor_now(callback: CallbackQuery, state: FSMContext) -> None:
    data = await state.get_data()
    mode = SleepMode(data.get("mode", SleepMode.BEDTIME.value))
    tz_name = await _user_timezone(callback.from_user.id)
    moment = _utcnow()
    anchor_text = format_time(local_minute_of_day(tz_name, moment))
    await state.clear()
    await send_recommendations(callback.message, anchor_text, mode, tz_name, moment)
    await callback.answer()


@router.callback_query(F.data == "anchor:now")
async def anchor_now_expired(callback: CallbackQuery, state: FSMContext) -> None:
    # состояние ожидания уже сброшено: кнопка осталась от старого запроса
    await state.clear()
    await callback.message.answer(
        "Запрос устарел. Выберите режим ещё раз.",
        reply_markup=main_menu().as_markup(resize_keyboard=True),
    )
    await callback.answer()


@router.callback_query(F.data == "anchor:cancel")
async def anchor_cancel(callback: CallbackQuery, state: FSMContext) -> None:
    await state.clear()
    await callback.message.answer(
        "Отменено.",
        reply_markup=main_menu().as_markup(resize_keyboard=True),
    )
    await callback.answer()
