"""Представление табло в виде моделей pydantic.

Используется для ответов веб приложения.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel

from bells.board import BoardState
from bells.enums import WeekDay
from bells.period import Break, Period
from bells.timetable import DayTimetable
from bells.view.base import View
from bells.view.text import date_label
from bells.week import WeekTimetable


class PeriodModel(BaseModel):
    """Урок или перемена."""

    kind: Literal["lesson", "break"]
    index: int
    start: str
    end: str
    duration: int
    label: str


class BoardModel(BaseModel):
    """Состояние табло."""

    day: date
    date_label: str
    now: str
    status: str
    period: PeriodModel | None
    time_left: str | None
    tomorrow: bool
    next_start: str | None
    next_period: PeriodModel | None
    bell: bool


class DayModel(BaseModel):
    """Расписание звонков на день."""

    weekday: int
    name: str
    start: str | None
    end: str | None
    periods: list[PeriodModel]


class WeekModel(BaseModel):
    """Расписание звонков на неделю."""

    days: list[DayModel]


def period_model(period: Period | None) -> PeriodModel | None:
    if period is None:
        return None
    return PeriodModel(
        kind="break" if isinstance(period, Break) else "lesson",
        index=period.index,
        start=str(period.start),
        end=str(period.end),
        duration=period.duration,
        label=period.describe(),
    )


class ModelView(View[BaseModel]):
    """Представляет табло и расписание моделями pydantic."""

    def board(self, state: BoardState) -> BoardModel:
        return BoardModel(
            day=state.date,
            date_label=date_label(state.date),
            now=state.now.format(),
            status=state.status.value,
            period=period_model(state.period),
            time_left=state.time_left.countdown() if state.time_left else None,
            tomorrow=state.tomorrow,
            next_start=str(state.next_start) if state.next_start else None,
            next_period=period_model(state.next_period),
            bell=state.bell,
        )

    def bell(self, state: BoardState) -> BoardModel:
        return self.board(state)

    def day(self, weekday: WeekDay, day: DayTimetable | None) -> DayModel:
        return DayModel(
            weekday=weekday.value,
            name=weekday.to_str(),
            start=str(day.start) if day else None,
            end=str(day.end) if day else None,
            periods=[period_model(p) for p in day or ()],
        )

    def week(self, week: WeekTimetable) -> WeekModel:
        return WeekModel(
            days=[self.day(weekday, day) for weekday, day in week.items()]
        )
