import pytest
from conftest import hm

from bells.clock import ClockTime
from bells.period import Break, Lesson
from bells.timetable import (
    AfterEnd,
    BeforeStart,
    DayTimetable,
    Empty,
    InPeriod,
)


def test_build_day_shape(day: DayTimetable) -> None:
    assert len(day) == 13
    assert len(day.lessons()) == 7
    assert [p.index for p in day.lessons()] == [1, 2, 3, 4, 5, 6, 7]
    assert sum(isinstance(p, Break) for p in day) == 6
    assert day.is_contiguous()


def test_build_day_times(day: DayTimetable) -> None:
    assert day[0] == Lesson(1, hm("9:00"), 45)
    assert day[1] == Break(1, hm("9:45"), 10)
    assert day[1].end == hm("9:55")
    assert day[2].start == hm("9:55")
    assert day[-1] == Lesson(7, hm("14:50"), 45)
    assert day.start == hm("9:00")
    assert day.end == hm("15:35")


def test_locate_start_boundary(day: DayTimetable) -> None:
    assert day.locate(hm("9:00")) == InPeriod(day[0], day[1])


def test_locate_half_open(day: DayTimetable) -> None:
    assert day.locate(hm("9:44")).current == day[0]
    assert day.locate(hm("9:45")) == InPeriod(day[1], day[2])


def test_locate_before_start(day: DayTimetable) -> None:
    assert day.locate(hm("8:59")) == BeforeStart(day[0])
    assert day.locate(ClockTime(0)) == BeforeStart(day[0])


def test_locate_after_end(day: DayTimetable) -> None:
    assert day.locate(hm("15:35")) == AfterEnd()
    assert day.locate(hm("23:59")) == AfterEnd()


def test_locate_last_period(day: DayTimetable) -> None:
    assert day.locate(hm("15:34")) == InPeriod(day[-1], None)


def test_locate_every_minute(day: DayTimetable) -> None:
    for minutes in range(day.start.minutes, day.end.minutes):
        t = ClockTime(minutes)
        res = day.locate(t)
        assert isinstance(res, InPeriod)
        assert res.current.start <= t < res.current.end


def test_empty_day() -> None:
    day = DayTimetable()
    assert day.start is None
    assert day.end is None
    assert not day
    for minutes in range(0, 24 * 60, 7):
        assert day.locate(ClockTime(minutes)) == Empty()


def test_single_period_day() -> None:
    day = DayTimetable([Lesson(1, hm("8:00"), 40)])
    assert day.locate(hm("8:39")) == InPeriod(day[0], None)
    assert day.locate(hm("8:40")) == AfterEnd()


def test_insert_keeps_order() -> None:
    l1 = Lesson(1, hm("9:00"), 45)
    b1 = Break(1, hm("9:45"), 10)
    l2 = Lesson(2, hm("9:55"), 45)
    day = DayTimetable([l2, l1])
    assert not day.is_contiguous()
    day.insert(b1)
    assert list(day) == [l1, b1, l2]
    assert day.is_contiguous()
    assert day.locate(hm("9:50")) == InPeriod(b1, l2)


def test_insert_does_not_check_gaps() -> None:
    day = DayTimetable([Lesson(1, hm("9:00"), 45)])
    day.insert(Lesson(2, hm("11:00"), 45))
    assert len(day) == 2
    assert not day.is_contiguous()


def test_append_requires_contiguous() -> None:
    day = DayTimetable()
    day.append(Lesson(1, hm("9:00"), 45))
    with pytest.raises(ValueError):
        day.append(Lesson(2, hm("10:00"), 45))
    day.append(Break(1, hm("9:45"), 5))
    assert day.end == hm("9:50")


def test_no_generic_mutation(day: DayTimetable) -> None:
    with pytest.raises(TypeError):
        day[0] = Lesson(1, hm("8:00"), 45)  # type: ignore[index]
    assert not hasattr(day, "pop")


def test_period_labels() -> None:
    assert str(Lesson(5, hm("9:00"), 45)) == "5-й урок"
    assert Break(1, hm("9:45"), 10).describe() == "Перемена (10 минут)"
    assert Break(1, hm("9:45"), 1).describe() == "Перемена (1 минута)"
    assert Break(1, hm("9:45"), 2).describe() == "Перемена (2 минуты)"
    assert Break(1, hm("9:45"), 21).describe() == "Перемена (21 минута)"


def test_period_end_and_contains() -> None:
    lesson = Lesson(1, hm("9:00"), 45)
    assert lesson.end == hm("9:45")
    assert lesson.contains(hm("9:00"))
    assert not lesson.contains(hm("9:45"))


def test_period_duration_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Lesson(1, hm("9:00"), 0)
    with pytest.raises(ValueError):
        Break(1, hm("9:00"), -10)


def test_lesson_is_not_break() -> None:
    assert Lesson(1, hm("9:00"), 10) != Break(1, hm("9:00"), 10)
