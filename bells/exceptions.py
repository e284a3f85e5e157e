"""Исключения расписания звонков.

Исключения возникают только при построении расписания и загрузке
настроек.
Отсутствие уроков, ещё не начавшийся или уже закончившийся учебный
день исключениями не являются, это обычные результаты поиска.
"""


class BellsError(Exception):
    """Базовое исключение расписания звонков."""


class ParseError(BellsError, ValueError):
    """Не удалось разобрать строку времени.

    Возникает если в строке меньше двух числовых частей.
    Прерывает построение расписания.
    """


class ProviderError(BellsError):
    """Поставщику не удалось загрузить настройки расписания."""
