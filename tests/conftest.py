from datetime import datetime

import pytest

from bells.clock import ClockTime
from bells.presets import DEFAULT
from bells.timetable import DayTimetable
from bells.week import WeekTimetable, build_day

# 2026-10-18 воскресенье, 2026-10-19 понедельник
SUNDAY = datetime(2026, 10, 18)
MONDAY = datetime(2026, 10, 19)
SATURDAY = datetime(2026, 10, 24)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def day() -> DayTimetable:
    return build_day(ClockTime.from_hm(9, 0), 45, [10, 10, 20, 20, 10, 10])


@pytest.fixture
def week() -> WeekTimetable:
    return WeekTimetable.from_config(DEFAULT)


def hm(text: str) -> ClockTime:
    return ClockTime.parse(text)
