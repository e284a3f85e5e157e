"""Управление версиями.

Версия проекта отображается в статусе приложения.
Отсюда же её берёт ``pyproject.toml`` при сборке пакета.
"""

__version__ = "1.2.0"

PROJECT_VERSION = f"v{__version__}"
