"""Вспомогательные функции для работы проекта.

Содержит:

- Склонение слов относительно числа.
- Настройку журнала событий.
"""

import sys

from loguru import logger


def plural_form(n: int, v: tuple[str, str, str]) -> str:
    """Возвращает склонённое значение в зависимости от числа.

    Возвращает склонённое слово: "для одного", "для двух",
    "для пяти" значений.

    .. code-block:: python

        plural_form(minutes, ("минута", "минуты", "минут"))
        # minutes = 1 -> минута
        # minutes = 22 -> минуты
        # minutes = 10 -> минут
    """
    return v[2 if (4 < n % 100 < 20) else (2, 0, 1, 1, 1, 2)[min(n % 10, 5)]]  # noqa


def setup_logger(debug: bool = False) -> None:
    """Настраивает вывод журнала событий.

    По умолчанию выводятся сообщения начиная с INFO.
    В режиме отладки выводятся все сообщения.
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO")
