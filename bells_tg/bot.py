"""Рассылка звонков в Telegram.

Запускает табло и при каждом звонке отправляет сообщение в указанный
чат.
Токен бота и чат задаются переменными окружения
``BELLS_TELEGRAM_TOKEN`` и ``BELLS_TELEGRAM_CHAT``.
"""

from sys import exit

from aiogram import Bot
from aiogram.exceptions import TelegramBadRequest, TelegramNetworkError
from loguru import logger

from bells.board import Board, BoardState
from bells.provider import get_provider
from bells.settings import BellsSettings
from bells.ticker import Ticker
from bells.utils import setup_logger
from bells.view.text import TextView


class BellSender:
    """Отправляет уведомления о звонках в чат."""

    def __init__(self, bot: Bot, chat_id: int, view: TextView) -> None:
        self.bot = bot
        self.chat_id = chat_id
        self.view = view

    async def __call__(self, state: BoardState) -> None:
        try:
            await self.bot.send_message(self.chat_id, self.view.bell(state))
        except (TelegramBadRequest, TelegramNetworkError) as e:
            logger.error(e)


async def main() -> None:
    """Главная функция запуска рассылки.

    Загружает расписание и запускает табло.
    """
    settings = BellsSettings()
    setup_logger(settings.debug)
    if settings.telegram_token is None or settings.telegram_chat is None:
        logger.error("Set BELLS_TELEGRAM_TOKEN and BELLS_TELEGRAM_CHAT")
        exit(1)

    week = await get_provider(settings.source).timetable()
    bot = Bot(settings.telegram_token)
    ticker = Ticker(Board(week), interval=settings.interval)
    ticker.on_bell(BellSender(bot, settings.telegram_chat, TextView()))

    logger.info("Start bells for chat {} ...", settings.telegram_chat)
    try:
        await ticker.run()
    finally:
        await bot.session.close()
