"""Состояние табло расписания звонков.

Табло показывает текущую дату и время, текущий урок или перемену,
сколько до его окончания осталось и что будет дальше.
Состояние каждый раз вычисляется заново по времени на часах.

Время передаётся явно, чтобы состояние табло можно было получить для
любого момента, а не только для текущего.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from bells.clock import ClockTime
from bells.enums import WeekDay
from bells.period import Period
from bells.timetable import AfterEnd, BeforeStart, Empty, InPeriod
from bells.week import WeekTimetable


class BoardStatus(Enum):
    """Что сейчас происходит в учебном дне."""

    NO_LESSONS = "no_lessons"
    NOT_STARTED = "not_started"
    ENDED = "ended"
    IN_PERIOD = "in_period"


@dataclass(slots=True, frozen=True)
class BoardState:
    """Всё, что нужно показать на табло."""

    date: date
    now: ClockTime
    status: BoardStatus

    period: Period | None = None
    """Текущий урок или перемена."""

    time_left: ClockTime | None = None
    """Сколько осталось до окончания периода или до начала уроков."""

    tomorrow: bool = False
    """Следующий период будет уже завтра."""

    next_start: ClockTime | None = None
    next_period: Period | None = None

    bell: bool = False
    """Идёт первая минута текущего периода."""


class Board:
    """Собирает состояние табло из расписания на неделю."""

    def __init__(self, week: WeekTimetable) -> None:
        self.week = week

    def _tomorrow(
        self, now: datetime, time: ClockTime, status: BoardStatus
    ) -> BoardState:
        weekday = WeekDay.from_date(now.date())
        first = self.week.first_after(weekday)
        return BoardState(
            date=now.date(),
            now=time,
            status=status,
            time_left=first.start.add(24, 0).sub(time) if first else None,
            tomorrow=True,
            next_start=first.start if first else None,
            next_period=first,
        )

    def state(self, now: datetime) -> BoardState:
        """Состояние табло на указанный момент."""
        time = ClockTime.from_datetime(now)
        res = self.week.locate(WeekDay.from_date(now.date()), time)

        match res:
            case Empty():
                return self._tomorrow(now, time, BoardStatus.NO_LESSONS)
            case AfterEnd():
                return self._tomorrow(now, time, BoardStatus.ENDED)
            case BeforeStart(first):
                return BoardState(
                    date=now.date(),
                    now=time,
                    status=BoardStatus.NOT_STARTED,
                    time_left=first.start.sub(time),
                    next_start=first.start,
                    next_period=first,
                )
            case InPeriod(current, next_period):
                return BoardState(
                    date=now.date(),
                    now=time,
                    status=BoardStatus.IN_PERIOD,
                    period=current,
                    time_left=current.end.sub(time),
                    next_start=(
                        next_period.start if next_period else current.end
                    ),
                    next_period=next_period,
                    bell=time == current.start,
                )
        raise TypeError(f"Unexpected lookup result: {res!r}")
