from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.types import BotCommand

from app.bot.routers import calculator, commands
from app.config import settings
from app.database import init_db


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)


async def setup_bot_commands(bot: Bot) -> None:
    """Устанавливает меню команд для бота"""
    commands_list = [
        BotCommand(command="start", description="Начать работу с ботом"),
        BotCommand(command="help", description="Показать справку"),
        BotCommand(command="bedtime", description="Когда проснуться, если лечь сейчас или в ЧЧ:ММ"),
        BotCommand(command="wake", description="Когда лечь, чтобы встать в ЧЧ:ММ"),
        BotCommand(command="fix_timezone", description="Исправить часовой пояс"),
        BotCommand(command="delete_data", description="Удалить все данные"),
    ]
    await bot.set_my_commands(commands_list)


async def main() -> None:
    await init_db()
    bot = Bot(
        token=settings.telegram_token.get_secret_value(),
        default=DefaultBotProperties(parse_mode="HTML"),
    )
    await setup_bot_commands(bot)
    dp = Dispatcher()
    dp.include_router(commands.router)
    dp.include_router(calculator.router)
    try:
        await dp.start_polling(bot)
    finally:
        await bot.session.close()


if __name__ == "__main__":
    asyncio.run(main())
