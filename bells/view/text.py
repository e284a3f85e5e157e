"""Текстовое представление табло.

Используется в консоли и в сообщениях бота.
"""

from datetime import date

from bells.board import BoardState, BoardStatus
from bells.enums import MONTH_NAMES, WeekDay
from bells.period import Period
from bells.timetable import DayTimetable
from bells.view.base import View
from bells.week import WeekTimetable

NO_TIME = "—:—"

_HINTS = {
    BoardStatus.NO_LESSONS: "уроков нет",
    BoardStatus.NOT_STARTED: "уроки ещё не начались",
    BoardStatus.ENDED: "уроки закончились",
}


def date_label(day: date) -> str:
    """Дата вида "воскресенье, 18 октября 2026 г."."""
    weekday = WeekDay.from_date(day).to_str()
    return f"{weekday}, {day.day} {MONTH_NAMES[day.month - 1]} {day.year} г."


def period_line(period: Period) -> str:
    return f"{period.start}-{period.end}  {period}"


class TextView(View[str]):
    """Представляет табло и расписание в виде текста."""

    def board(self, state: BoardState) -> str:
        if state.period is not None:
            period = str(state.period)
        else:
            period = _HINTS[state.status]

        if state.next_period is not None:
            next_period = str(state.next_period)
        elif state.tomorrow:
            next_period = _HINTS[BoardStatus.NO_LESSONS]
        else:
            next_period = "конец уроков"

        time_left = state.time_left.countdown() if state.time_left else NO_TIME
        next_start = str(state.next_start) if state.next_start else NO_TIME
        next_label = "Завтра" if state.tomorrow else "Далее"

        return (
            f"📅 {date_label(state.date)}"
            f"\n🕒 Сейчас: {state.now.format()}"
            f"\n🔔 {period}"
            f"\n⏳ Осталось: {time_left}"
            f"\n➡️ {next_label}: {next_start} {next_period}"
        )

    def bell(self, state: BoardState) -> str:
        if state.period is None:
            return f"🔔 {state.now}"
        return f"🔔 {state.now} {state.period}"

    def day(self, weekday: WeekDay, day: DayTimetable | None) -> str:
        header = f"🔔 {weekday.to_str().capitalize()}"
        if not day:
            return f"{header}\nуроков нет"
        lines = [header]
        lines.extend(period_line(p) for p in day)
        return "\n".join(lines)

    def week(self, week: WeekTimetable) -> str:
        return "\n\n".join(self.day(weekday, day) for weekday, day in week.items())
