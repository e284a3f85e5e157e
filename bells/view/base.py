"""Базовый класс представления.

Как можно представить табло и расписание звонков в различных
форматах.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from bells.board import BoardState
from bells.enums import WeekDay
from bells.timetable import DayTimetable
from bells.week import WeekTimetable

_VR = TypeVar("_VR")


class View(Generic[_VR], ABC):
    """Базовый класс представления.

    От него наследуются все классы представления.
    Позволяет предоставлять табло и расписание в некотором формате.
    """

    @abstractmethod
    def board(self, state: BoardState) -> _VR:
        """Состояние табло."""

    @abstractmethod
    def bell(self, state: BoardState) -> _VR:
        """Уведомление о звонке."""

    @abstractmethod
    def day(self, weekday: WeekDay, day: DayTimetable | None) -> _VR:
        """Расписание звонков на день."""

    @abstractmethod
    def week(self, week: WeekTimetable) -> _VR:
        """Расписание звонков на неделю."""
