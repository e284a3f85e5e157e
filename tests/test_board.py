from datetime import datetime

from conftest import MONDAY, SATURDAY, SUNDAY, hm

from bells.board import Board, BoardStatus
from bells.period import Break, Lesson
from bells.week import WeekTimetable


def at(day: datetime, hour: int, minute: int, second: int = 0) -> datetime:
    return day.replace(hour=hour, minute=minute, second=second)


def test_not_started(week: WeekTimetable) -> None:
    state = Board(week).state(at(MONDAY, 8, 30, 15))
    assert state.status == BoardStatus.NOT_STARTED
    assert state.period is None
    assert state.time_left.minutes == 30
    assert state.next_period == Lesson(1, hm("9:00"), 45)
    assert state.next_start == hm("9:00")
    assert not state.tomorrow
    assert not state.bell


def test_lesson_start_rings(week: WeekTimetable) -> None:
    state = Board(week).state(at(MONDAY, 9, 0))
    assert state.status == BoardStatus.IN_PERIOD
    assert state.period == Lesson(1, hm("9:00"), 45)
    assert state.time_left.minutes == 45
    assert state.next_start == hm("9:45")
    assert state.next_period == Break(1, hm("9:45"), 10)
    assert state.bell


def test_bell_during_first_minute(week: WeekTimetable) -> None:
    board = Board(week)
    assert board.state(at(MONDAY, 9, 0, 1)).bell
    assert board.state(at(MONDAY, 9, 0, 59)).bell
    assert not board.state(at(MONDAY, 8, 59, 59)).bell
    assert not board.state(at(MONDAY, 9, 1)).bell
    assert board.state(at(MONDAY, 9, 45)).bell


def test_break(week: WeekTimetable) -> None:
    state = Board(week).state(at(MONDAY, 9, 47, 30))
    assert state.period == Break(1, hm("9:45"), 10)
    assert state.time_left.minutes == 8
    assert state.next_period == Lesson(2, hm("9:55"), 45)


def test_last_lesson(week: WeekTimetable) -> None:
    state = Board(week).state(at(MONDAY, 15, 34))
    assert state.period == Lesson(7, hm("14:50"), 45)
    assert state.next_period is None
    assert state.next_start == hm("15:35")
    assert not state.tomorrow


def test_ended_shows_tomorrow(week: WeekTimetable) -> None:
    state = Board(week).state(at(MONDAY, 16, 0))
    assert state.status == BoardStatus.ENDED
    assert state.tomorrow
    assert state.next_period == Lesson(1, hm("9:00"), 45)
    assert state.time_left.minutes == 17 * 60
    assert state.time_left.countdown() == "17:00"


def test_ended_before_day_off(week: WeekTimetable) -> None:
    state = Board(week).state(at(SATURDAY, 16, 0))
    assert state.status == BoardStatus.ENDED
    assert state.next_period is None
    assert state.next_start is None
    assert state.time_left is None


def test_no_lessons(week: WeekTimetable) -> None:
    state = Board(week).state(at(SUNDAY, 12, 0))
    assert state.status == BoardStatus.NO_LESSONS
    assert state.tomorrow
    assert state.next_period == Lesson(1, hm("9:00"), 45)
    assert state.time_left.minutes == 21 * 60
    assert state.date == SUNDAY.date()
    assert state.now == hm("12:00")
