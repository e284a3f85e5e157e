"""Время с точностью до минуты.

Предоставляет неизменяемое значение времени в минутах от полуночи.
Значение может выходить за пределы суток, тогда оно используется как
промежуток времени.
К примеру чтобы узнать сколько осталось до первого урока завтра.

.. code-block:: python

    start = ClockTime.parse("9:00")
    now = ClockTime.from_hm(8, 30)
    start.sub(now)  # ClockTime(minutes=30)
    start.add(24, 0).sub(now).countdown()  # "24:30"
"""

from dataclasses import dataclass
from datetime import datetime

from bells.exceptions import ParseError

MINUTES_PER_DAY = 24 * 60


@dataclass(slots=True, frozen=True, order=True)
class ClockTime:
    """Время в минутах от начала суток.

    Сравнение и равенство выполняются по количеству минут.
    Секунды всегда равны нулю.
    """

    minutes: int

    @classmethod
    def from_hm(cls, hour: int, minute: int) -> "ClockTime":
        """Время из часов и минут."""
        return cls(60 * hour + minute)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "ClockTime":
        """Локальное время из даты, секунды отбрасываются."""
        return cls.from_hm(dt.hour, dt.minute)

    @classmethod
    def parse(cls, text: str) -> "ClockTime":
        """Разбирает время из строки вида ``H:MM`` или ``HH:MM``.

        Используются только первые две части строки.
        Если частей меньше двух или они не числа, возникает
        :py:class:`bells.exceptions.ParseError`.
        """
        parts = text.strip().split(":")
        if len(parts) < 2:
            raise ParseError(f"Time must be in H:MM format, got {text!r}")
        try:
            hour, minute = (int(p) for p in parts[:2])
        except ValueError as e:
            raise ParseError(f"Time parts must be numbers: {text!r}") from e
        return cls.from_hm(hour, minute)

    # Составные части времени
    # =======================

    @property
    def hour(self) -> int:
        return self.minutes // 60 % 24

    @property
    def minute(self) -> int:
        return self.minutes % 60

    @property
    def second(self) -> int:
        return 0

    # Арифметика
    # ==========

    def add(self, hours: int, minutes: int | None = None) -> "ClockTime":
        """Сдвигает время.

        С одним аргументом сдвигает на указанное число минут.
        С двумя на указанное число часов и минут.
        Результат не ограничивается пределами суток.
        """
        if minutes is None:
            return ClockTime(self.minutes + hours)
        return ClockTime(self.minutes + 60 * hours + minutes)

    def sub(self, other: "ClockTime") -> "ClockTime":
        """Разница во времени.

        Результат может быть отрицательным, если ``other`` позже.
        """
        return ClockTime(self.minutes - other.minutes)

    # Форматирование
    # ==============

    def format(self, seconds: bool = True) -> str:
        """Время в виде ``HH:MM:SS`` или ``HH:MM``."""
        res = f"{self.hour:02}:{self.minute:02}"
        if seconds:
            res += f":{self.second:02}"
        return res

    def countdown(self) -> str:
        """Время как промежуток в виде ``HH:MM``.

        В отличии от :py:meth:`format` часы не сворачиваются в сутки.
        """
        sign = "-" if self.minutes < 0 else ""
        h, m = divmod(abs(self.minutes), 60)
        return f"{sign}{h:02}:{m:02}"

    def __str__(self) -> str:
        return self.format(seconds=False)
