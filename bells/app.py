"""Веб приложение табло.

Отдаёт состояние табло и расписание звонков в виде json.
Страница табло опрашивает ``/now`` раз в секунду.

```sh
uvicorn bells.app:app
```
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException
from loguru import logger
from pydantic import BaseModel

from bells.board import Board
from bells.enums import WeekDay
from bells.provider import get_provider
from bells.settings import BellsSettings
from bells.version import PROJECT_VERSION
from bells.view.model import BoardModel, DayModel, ModelView, WeekModel
from bells.week import WeekTimetable

settings = BellsSettings()
view = ModelView()


class Status(BaseModel):
    """Информация о работе приложения."""

    version: str
    source: str
    days: int
    bell: int


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Жизненный цикл сервера.

    Расписание загружается до того, как сервер начнёт отвечать.
    """
    logger.info("Start server")
    provider = get_provider(settings.source)
    app.state.source = provider.source
    config = await provider.config()
    app.state.bell = config.bell
    app.state.week = WeekTimetable.from_config(config)
    yield
    logger.info("Stop server")


app = FastAPI(lifespan=lifespan)


def _week() -> WeekTimetable:
    return app.state.week


@app.get("/now")
async def get_now() -> BoardModel:
    """Возвращает состояние табло на текущий момент."""
    return view.board(Board(_week()).state(datetime.now()))


@app.get("/timetable")
async def get_timetable() -> WeekModel:
    """Возвращает расписание звонков на неделю."""
    return view.week(_week())


@app.get("/timetable/{day}")
async def get_day(day: str) -> DayModel:
    """Возвращает расписание звонков на день недели."""
    try:
        weekday = WeekDay.from_name(day)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return view.day(weekday, _week().day(weekday))


@app.get("/status")
async def get_status() -> Status:
    """Возвращает статус приложения."""
    return Status(
        version=PROJECT_VERSION,
        source=app.state.source,
        days=len(_week()),
        bell=app.state.bell,
    )
