"""Настройки расписания звонков.

Описывает документ с настройками, из которого строится расписание
на неделю.
Проверяется только форма документа.

Ключи принимаются в нескольких вариантах:

.. code-block:: json

    {
        "урок": 45,
        "звонок": 5000,
        "расписание": {
            "понедельник": {"начало": "9:00", "перемены": [10, 10, 20]},
            "суббота": {"начало": "8:30", "перемены": [10, 10]}
        }
    }

Тот же документ можно записать с ключами ``lesson``, ``bell``,
``week``, ``start``, ``breaks`` или ``lessonMinutes``, ``perWeekday``,
``startTime``.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MAX_BREAKS = 7


class DayConfig(BaseModel):
    """Настройки одного дня недели."""

    model_config = ConfigDict(frozen=True)

    start: str = Field(
        default="9:00",
        validation_alias=AliasChoices("start", "начало", "startTime"),
    )
    """Время начала первого урока."""

    breaks: list[int] = Field(
        default_factory=list,
        max_length=MAX_BREAKS,
        validation_alias=AliasChoices("breaks", "перемены"),
    )
    """Продолжительность перемен после каждого урока в минутах."""


class TimetableConfig(BaseModel):
    """Настройки расписания звонков на неделю."""

    model_config = ConfigDict(frozen=True)

    lesson: int = Field(
        default=45,
        validation_alias=AliasChoices("lesson", "урок", "lessonMinutes"),
    )
    """Продолжительность урока в минутах."""

    bell: int = Field(
        default=5000,
        validation_alias=AliasChoices("bell", "звонок"),
    )
    """Сколько показывать уведомление о звонке, в миллисекундах."""

    week: dict[str, DayConfig] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("week", "расписание", "perWeekday"),
    )
    """Настройки по дням недели, ключ - название дня."""
