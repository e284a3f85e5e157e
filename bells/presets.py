"""Готовые настройки расписания звонков.

Каждая заготовка записана как обычный документ настроек.
Заготовки описывают разные расписания и не смешиваются между собой.

- ``default``: с понедельника по субботу уроки начинаются в 9:00.
- ``legacy``: расписание, где начало уроков и перемены зависят от
  дня недели.
"""

from bells.config import TimetableConfig

_BREAKS = [10, 10, 20, 20, 10, 10]
# Длинные перемены сдвинуты на один урок раньше
_SHIFTED_BREAKS = [10, 20, 20, 10, 10, 10]

DEFAULT = TimetableConfig.model_validate(
    {
        "урок": 45,
        "расписание": {
            day: {"начало": "9:00", "перемены": _BREAKS}
            for day in (
                "понедельник",
                "вторник",
                "среда",
                "четверг",
                "пятница",
                "суббота",
            )
        },
    }
)

LEGACY = TimetableConfig.model_validate(
    {
        "урок": 45,
        "расписание": {
            "понедельник": {"начало": "9:30", "перемены": _SHIFTED_BREAKS},
            "вторник": {"начало": "9:00", "перемены": _BREAKS},
            "среда": {"начало": "9:00", "перемены": _BREAKS},
            "четверг": {"начало": "9:30", "перемены": _SHIFTED_BREAKS},
            "пятница": {"начало": "9:00", "перемены": _BREAKS},
            "суббота": {"начало": "8:30", "перемены": _BREAKS},
        },
    }
)

PRESETS: dict[str, TimetableConfig] = {
    "default": DEFAULT,
    "legacy": LEGACY,
}


def get_preset(name: str) -> TimetableConfig:
    """Возвращает заготовку настроек по имени."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown preset {name!r}, available: {', '.join(PRESETS)}"
        ) from None
