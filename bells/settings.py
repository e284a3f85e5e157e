"""Общие настройки приложения."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class BellsSettings(BaseSettings):
    """Настройки запуска табло.

    Загружаются один раз из переменных окружения или файла ``.env``.
    Все переменные начинаются с ``BELLS_``.
    """

    source: str = "preset:default"
    """Откуда загружать расписание: файл, ссылка или ``preset:<имя>``."""

    interval: float = 1.0
    """Как часто обновлять табло, в секундах."""

    debug: bool = False

    telegram_token: str | None = None
    telegram_chat: int | None = None

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BELLS_")
