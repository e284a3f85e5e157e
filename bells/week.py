"""Расписание звонков на неделю.

Строит расписание на каждый день недели из настроек.
Каждый учебный день состоит из семи уроков, между которыми идут
перемены указанной продолжительности.
"""

from collections.abc import Iterator, Mapping, Sequence
from datetime import date
from types import MappingProxyType

from loguru import logger

from bells.clock import ClockTime
from bells.config import TimetableConfig
from bells.enums import WeekDay
from bells.period import Break, Lesson, Period
from bells.timetable import DayTimetable, Empty, LookupResult

LESSONS_PER_DAY = 7
DEFAULT_START = ClockTime.from_hm(9, 0)


def build_day(
    start: ClockTime, lesson: int, breaks: Sequence[int]
) -> DayTimetable:
    """Собирает расписание на день.

    Уроки и перемены идут друг за другом начиная со ``start``.
    После урока с номером ``n`` идёт перемена ``breaks[n - 1]``, если
    она указана.
    Обычно перемен на одну меньше чем уроков.
    """
    day = DayTimetable()
    t = start
    for n in range(LESSONS_PER_DAY):
        day.append(Lesson(n + 1, t, lesson))
        t = t.add(lesson)
        if n < len(breaks):
            day.append(Break(n + 1, t, breaks[n]))
            t = t.add(breaks[n])
    return day


class WeekTimetable(Mapping[WeekDay, DayTimetable]):
    """Расписание звонков на неделю.

    Сопоставляет день недели с расписанием на этот день.
    Если дня нет в расписании, значит в этот день нет уроков.
    После создания не изменяется.
    """

    def __init__(self, days: Mapping[WeekDay, DayTimetable]) -> None:
        self._days = MappingProxyType(dict(days))

    @classmethod
    def from_config(cls, config: TimetableConfig) -> "WeekTimetable":
        """Строит расписание на неделю из настроек.

        Если название дня или время начала не удалось разобрать,
        расписание не строится вовсе.
        """
        days: dict[WeekDay, DayTimetable] = {}
        for name, day_config in config.week.items():
            weekday = WeekDay.from_name(name)
            if weekday in days:
                raise ValueError(f"Weekday {weekday.to_str()} set twice")
            start = ClockTime.parse(day_config.start)
            days[weekday] = build_day(start, config.lesson, day_config.breaks)
            logger.debug(
                "Build {}: {} - {}",
                weekday.to_str(),
                days[weekday].start,
                days[weekday].end,
            )
        logger.info("Built timetable for {} days", len(days))
        return cls(days)

    def day(self, weekday: WeekDay) -> DayTimetable | None:
        """Расписание на день недели, если в этот день есть уроки."""
        return self._days.get(weekday)

    def today(self, today: date) -> DayTimetable | None:
        """Расписание на указанную дату."""
        return self.day(WeekDay.from_date(today))

    def locate(self, weekday: WeekDay, time: ClockTime) -> LookupResult:
        """Находит период в расписании указанного дня."""
        day = self.day(weekday)
        if day is None:
            return Empty()
        return day.locate(time)

    def first_after(self, weekday: WeekDay) -> Period | None:
        """Первый урок следующего дня.

        Смотрит только на следующий календарный день.
        Если в этот день нет уроков, вернёт None.
        """
        day = self.day(weekday.next())
        if not day:
            return None
        return day[0]

    def __getitem__(self, weekday: WeekDay) -> DayTimetable:
        return self._days[weekday]

    def __iter__(self) -> Iterator[WeekDay]:
        return iter(sorted(self._days))

    def __len__(self) -> int:
        return len(self._days)
