"""Дни недели и месяцы.

Дни недели нумеруются с воскресенья: 0 - воскресенье, 6 - суббота.
Названия используются в файле настроек и при отображении расписания.
"""

from datetime import date
from enum import IntEnum

DAY_NAMES = (
    "воскресенье",
    "понедельник",
    "вторник",
    "среда",
    "четверг",
    "пятница",
    "суббота",
)
SHORT_DAY_NAMES = ("вс", "пн", "вт", "ср", "чт", "пт", "сб")
EN_DAY_NAMES = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)

# Родительный падеж, для дат вида "18 октября"
MONTH_NAMES = (
    "января",
    "февраля",
    "марта",
    "апреля",
    "мая",
    "июня",
    "июля",
    "августа",
    "сентября",
    "октября",
    "ноября",
    "декабря",
)


class WeekDay(IntEnum):
    """День недели, начиная с воскресенья."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_date(cls, day: date) -> "WeekDay":
        """Получает день недели из даты."""
        return cls(day.isoweekday() % 7)

    @classmethod
    def from_name(cls, name: str) -> "WeekDay":
        """Получает день недели по названию.

        Принимает полное или короткое русское название, английское
        название или номер дня.
        Регистр и пробелы по краям не учитываются.

        .. code-block:: python

            WeekDay.from_name("Понедельник")  # WeekDay.MONDAY
            WeekDay.from_name("сб")  # WeekDay.SATURDAY
            WeekDay.from_name("0")  # WeekDay.SUNDAY
        """
        key = name.strip().lower()
        for names in (DAY_NAMES, SHORT_DAY_NAMES, EN_DAY_NAMES):
            if key in names:
                return cls(names.index(key))
        if key.isdigit() and int(key) < len(DAY_NAMES):
            return cls(int(key))
        raise ValueError(f"Unknown weekday name: {name!r}")

    def next(self) -> "WeekDay":
        """Следующий день недели."""
        return WeekDay((self.value + 1) % 7)

    def to_str(self) -> str:
        return DAY_NAMES[self.value]
