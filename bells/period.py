"""Периоды учебного дня.

Учебный день состоит из уроков и перемен.
Каждый период занимает полуоткрытый промежуток ``[start, end)``:
начало входит в период, а конец уже относится к следующему.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from bells.clock import ClockTime
from bells.utils import plural_form

_MINUTES = ("минута", "минуты", "минут")


@dataclass(slots=True, frozen=True)
class Period(ABC):
    """Промежуток времени в расписании звонков."""

    index: int
    """Номер урока в дне.

    Перемена получает номер урока, после которого она идёт.
    """

    start: ClockTime
    """Время начала периода."""

    duration: int
    """Продолжительность периода в минутах."""

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError(
                f"Period duration must be positive, got {self.duration}"
            )

    @property
    def end(self) -> ClockTime:
        """Время окончания периода, уже не входит в него."""
        return self.start.add(self.duration)

    def contains(self, time: ClockTime) -> bool:
        """Проверяет что время попадает в период."""
        return self.start <= time < self.end

    @abstractmethod
    def describe(self) -> str:
        """Название периода для отображения."""

    def __str__(self) -> str:
        return self.describe()


@dataclass(slots=True, frozen=True)
class Lesson(Period):
    """Урок."""

    def describe(self) -> str:
        return f"{self.index}-й урок"


@dataclass(slots=True, frozen=True)
class Break(Period):
    """Перемена между уроками."""

    def describe(self) -> str:
        minutes = plural_form(self.duration, _MINUTES)
        return f"Перемена ({self.duration} {minutes})"
