"""Поставщики настроек расписания.

Занимаются загрузкой настроек расписания звонков из некоторого
источника.
Это может быть файл, интернет-ресурс или готовая заготовка.
Загрузка выполняется один раз при запуске, до первого обновления
табло.

Источник указывается строкой:

- ``preset:<имя>``: готовая заготовка из :py:mod:`bells.presets`.
- ``http://...`` или ``https://...``: документ по ссылке.
- Всё остальное считается путём к json файлу.
"""

from abc import ABC, abstractmethod
from pathlib import Path

import aiohttp
import anyio
import ujson
from loguru import logger

from bells.config import TimetableConfig
from bells.exceptions import ProviderError
from bells.presets import get_preset
from bells.week import WeekTimetable


class Provider(ABC):
    """Базовый поставщик настроек расписания."""

    @property
    @abstractmethod
    def source(self) -> str:
        """Откуда загружаются настройки."""

    @abstractmethod
    async def config(self) -> TimetableConfig:
        """Возвращает настройки расписания."""

    async def timetable(self) -> WeekTimetable:
        """Возвращает расписание звонков на неделю."""
        config = await self.config()
        return WeekTimetable.from_config(config)


class FileProvider(Provider):
    """Загружает настройки из json файла."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    @property
    def source(self) -> str:
        return str(self.path)

    async def config(self) -> TimetableConfig:
        logger.info("Load config from {}", self.path)
        try:
            async with await anyio.open_file(self.path, encoding="utf-8") as f:
                data = ujson.loads(await f.read())
        except (OSError, ValueError) as e:
            raise ProviderError(f"Can't read config {self.path}: {e}") from e
        return TimetableConfig.model_validate(data)


class UrlProvider(Provider):
    """Загружает настройки по ссылке."""

    def __init__(self, url: str) -> None:
        self.url = url

    @property
    def source(self) -> str:
        return self.url

    async def config(self) -> TimetableConfig:
        logger.info("Download config from {}", self.url)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.url) as response:
                    if not response.ok:
                        raise ProviderError(
                            f"Response status: {response.status}"
                        )
                    text = await response.text()
        except aiohttp.ClientError as e:
            raise ProviderError(f"Can't download config: {e}") from e

        try:
            data = ujson.loads(text)
        except ValueError as e:
            raise ProviderError(f"Config is not valid JSON: {e}") from e
        return TimetableConfig.model_validate(data)


class PresetProvider(Provider):
    """Отдаёт одну из готовых заготовок настроек."""

    def __init__(self, name: str) -> None:
        self.name = name

    @property
    def source(self) -> str:
        return f"preset:{self.name}"

    async def config(self) -> TimetableConfig:
        logger.info("Use preset {}", self.name)
        try:
            return get_preset(self.name)
        except KeyError as e:
            raise ProviderError(e.args[0]) from e


def get_provider(source: str) -> Provider:
    """Подбирает поставщика по строке источника."""
    if source.startswith("preset:"):
        return PresetProvider(source.removeprefix("preset:"))
    if source.startswith(("http://", "https://")):
        return UrlProvider(source)
    return FileProvider(source)
