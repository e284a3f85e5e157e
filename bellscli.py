"""Командный интерфейс табло расписания звонков.

Позволяет посмотреть табло на текущий или любой другой момент,
расписание звонков на день и неделю, а также запустить табло,
которое обновляется раз в секунду.

```sh
python bellscli.py now
python bellscli.py --source preset:legacy day понедельник
python bellscli.py now --at "2026-10-19 09:45:00"
```
"""

import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import NamedTuple

import click

from bells.board import Board, BoardState
from bells.config import TimetableConfig
from bells.enums import WeekDay
from bells.provider import get_provider
from bells.settings import BellsSettings
from bells.ticker import Ticker
from bells.utils import setup_logger
from bells.view.text import TextView
from bells.week import WeekTimetable

# Определение группы
# ==================


class AppContext(NamedTuple):
    """Контекст приложения."""

    config: TimetableConfig
    week: WeekTimetable
    view: TextView
    settings: BellsSettings


pass_app = click.make_pass_decorator(AppContext)


class BellScreen:
    """Табло в консоли с уведомлением о звонке.

    Уведомление остаётся под табло, пока не пройдёт ``bell``
    миллисекунд с момента звонка.
    """

    def __init__(
        self,
        view: TextView,
        bell: int,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.view = view
        self.bell = timedelta(milliseconds=bell)
        self.clock = clock
        self._rung: BoardState | None = None
        self._rung_at: datetime | None = None

    def render(self, state: BoardState) -> str:
        """Табло и уведомление о звонке, если оно ещё не истекло."""
        text = self.view.board(state)
        if self._rung is None or self._rung_at is None:
            return text
        if self.clock() - self._rung_at >= self.bell:
            self._rung = None
            self._rung_at = None
            return text
        return f"{text}\n\n{self.view.bell(self._rung)}"

    def show(self, state: BoardState) -> None:
        click.clear()
        click.echo(self.render(state))

    def ring(self, state: BoardState) -> None:
        self._rung = state
        self._rung_at = self.clock()
        click.echo(f"\n{self.view.bell(state)}")
        click.echo("\a", nl=False)


def _get_weekday(
    ctx: click.Context, arg: click.Argument, value: str | None
) -> WeekDay | None:
    if value is None:
        return None
    try:
        return WeekDay.from_name(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.option(
    "--source",
    "-s",
    type=str,
    default=None,
    help="Файл, ссылка или preset:<имя> с настройками расписания.",
)
@click.option("--debug", is_flag=True, help="Подробный журнал событий.")
@click.group()
@click.pass_context
def cli(ctx: click.Context, source: str | None, debug: bool) -> None:
    """Табло расписания звонков.

    Показывает текущий урок или перемену, сколько до её окончания
    осталось и что будет дальше.
    """
    settings = BellsSettings()
    if source is not None:
        settings = settings.model_copy(update={"source": source})
    setup_logger(debug or settings.debug)

    config = asyncio.run(get_provider(settings.source).config())
    week = WeekTimetable.from_config(config)
    ctx.obj = AppContext(config, week, TextView(), settings)


# Определение команд
# ==================


@cli.command()
@click.option(
    "--at",
    type=click.DateTime(formats=["%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"]),
    default=None,
    help="Показать табло на указанный момент.",
)
@pass_app
def now(app: AppContext, at: datetime | None) -> None:
    """Состояние табло."""
    state = Board(app.week).state(at or datetime.now())
    click.echo(app.view.board(state))


@cli.command()
@click.argument("weekday", callback=_get_weekday, required=False)
@pass_app
def day(app: AppContext, weekday: WeekDay | None) -> None:
    """Расписание звонков на день, по умолчанию на сегодня."""
    if weekday is None:
        weekday = WeekDay.from_date(datetime.now().date())
    click.echo(app.view.day(weekday, app.week.day(weekday)))


@cli.command()
@pass_app
def week(app: AppContext) -> None:
    """Расписание звонков на неделю."""
    click.echo(app.view.week(app.week))


@cli.command()
@pass_app
def watch(app: AppContext) -> None:
    """Табло, которое обновляется до нажатия Ctrl+C."""
    ticker = Ticker(Board(app.week), interval=app.settings.interval)
    screen = BellScreen(app.view, app.config.bell)
    ticker.on_tick(screen.show)
    ticker.on_bell(screen.ring)

    try:
        asyncio.run(ticker.run())
    except KeyboardInterrupt:
        ticker.stop()


if __name__ == "__main__":
    cli()
