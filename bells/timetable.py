"""Расписание звонков на день.

Предоставляет упорядоченный список уроков и перемен одного дня и
поиск текущего периода по времени.

Периоды в дне идут друг за другом без промежутков:
конец одного периода совпадает с началом следующего.
Благодаря этому любое время внутри учебного дня попадает ровно в
один период и его можно найти двоичным поиском.

Результат поиска всегда одно из значений:

- :py:class:`Empty`: в этот день нет уроков.
- :py:class:`BeforeStart`: уроки ещё не начались.
- :py:class:`AfterEnd`: уроки уже закончились.
- :py:class:`InPeriod`: текущий и следующий период.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from bells.clock import ClockTime
from bells.period import Lesson, Period

# Результаты поиска
# =================


@dataclass(slots=True, frozen=True)
class Empty:
    """В этот день нет уроков."""


@dataclass(slots=True, frozen=True)
class BeforeStart:
    """Уроки ещё не начались."""

    first: Period


@dataclass(slots=True, frozen=True)
class AfterEnd:
    """Уроки уже закончились."""


@dataclass(slots=True, frozen=True)
class InPeriod:
    """Время попадает в период расписания."""

    current: Period
    next: Period | None


LookupResult = Empty | BeforeStart | AfterEnd | InPeriod


# Расписание на день
# ==================


class DayTimetable:
    """Расписание звонков на один день.

    Хранит периоды в порядке их начала.
    Наружу предоставляет только операции над расписанием, без
    произвольного изменения списка, чтобы не нарушить порядок периодов.
    """

    def __init__(self, periods: Iterable[Period] = ()) -> None:
        self._periods: list[Period] = []
        for period in periods:
            self.insert(period)

    @property
    def start(self) -> ClockTime | None:
        """Начало учебного дня."""
        return self._periods[0].start if self._periods else None

    @property
    def end(self) -> ClockTime | None:
        """Конец учебного дня."""
        return self._periods[-1].end if self._periods else None

    # Изменение расписания
    # ====================

    def append(self, period: Period) -> None:
        """Добавляет период в конец дня.

        Период должен начинаться ровно тогда, когда заканчивается
        последний период дня.
        """
        if self._periods and period.start != self._periods[-1].end:
            raise ValueError(
                f"Period starts at {period.start}, "
                f"but day ends at {self._periods[-1].end}"
            )
        self._periods.append(period)

    def insert(self, period: Period) -> None:
        """Вставляет период на своё место по времени начала.

        Не проверяет что периоды остались без промежутков и
        пересечений.
        Это остаётся на совести вызывающей стороны, проверить можно
        через :py:meth:`is_contiguous`.
        """
        a, b = 0, len(self._periods)
        while a < b:
            c = (a + b) // 2
            if period.start < self._periods[c].start:
                b = c
            else:
                a = c + 1
        self._periods.insert(a, period)

    def is_contiguous(self) -> bool:
        """Проверяет что периоды идут друг за другом без промежутков."""
        return all(
            p.end == n.start for p, n in zip(self._periods, self._periods[1:])
        )

    # Поиск периода
    # =============

    def _index(self, time: ClockTime) -> int:
        # Время должно лежать внутри учебного дня
        a, b = 0, len(self._periods) - 1
        while a < b:
            c = (a + b) // 2
            period = self._periods[c]
            if time < period.start:
                b = c
            elif time >= period.end:
                a = c + 1
            else:
                return c
        return a

    def locate(self, time: ClockTime) -> LookupResult:
        """Находит период, в который попадает время.

        Используется чтобы показать текущий урок или перемену, сколько
        до её окончания осталось и что будет дальше.
        """
        if not self._periods:
            return Empty()
        if time < self._periods[0].start:
            return BeforeStart(self._periods[0])
        if time >= self._periods[-1].end:
            return AfterEnd()

        i = self._index(time)
        next_period = (
            self._periods[i + 1] if i + 1 < len(self._periods) else None
        )
        return InPeriod(self._periods[i], next_period)

    # Доступ к периодам
    # =================

    def lessons(self) -> list[Period]:
        """Только уроки, без перемен."""
        return [p for p in self._periods if isinstance(p, Lesson)]

    def __getitem__(self, index: int) -> Period:
        return self._periods[index]

    def __iter__(self) -> Iterator[Period]:
        return iter(self._periods)

    def __len__(self) -> int:
        return len(self._periods)

    def __bool__(self) -> bool:
        return bool(self._periods)

    def __repr__(self) -> str:
        return f"DayTimetable({self.start}-{self.end}, {len(self)} periods)"
