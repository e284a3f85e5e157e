"""Периодическое обновление табло.

Раз в указанный промежуток времени заново вычисляет состояние табло
и передаёт его обработчикам.
Когда начинается новый урок или перемена, один раз вызывает
обработчик звонка.

.. code-block:: python

    ticker = Ticker(Board(week))
    ticker.on_tick(lambda state: print(view.board(state)))
    ticker.on_bell(lambda state: print(view.bell(state)))
    await ticker.run()
"""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime
from inspect import isawaitable

from loguru import logger

from bells.board import Board, BoardState

StateHandler = Callable[[BoardState], Awaitable[None] | None]


class Ticker:
    """Обновляет табло с заданной частотой.

    :param board: Откуда получать состояние табло.
    :param interval: Промежуток между обновлениями в секундах.
    :param clock: Источник текущего времени.
    """

    def __init__(
        self,
        board: Board,
        interval: float = 1.0,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.board = board
        self.interval = interval
        self.clock = clock

        self._tick_handlers: list[StateHandler] = []
        self._bell_handlers: list[StateHandler] = []
        self._last_bell: tuple | None = None
        self._stop = asyncio.Event()

    # Обработчики
    # ===========

    def on_tick(self, handler: StateHandler) -> StateHandler:
        """Добавляет обработчик каждого обновления табло."""
        self._tick_handlers.append(handler)
        return handler

    def on_bell(self, handler: StateHandler) -> StateHandler:
        """Добавляет обработчик звонка."""
        self._bell_handlers.append(handler)
        return handler

    async def _call(self, handlers: list[StateHandler], state: BoardState
    ) -> None:
        for handler in handlers:
            try:
                res = handler(state)
                if isawaitable(res):
                    await res
            except Exception as e:
                logger.exception(e)

    # Обновление табло
    # ================

    async def tick(self) -> BoardState:
        """Одно обновление табло."""
        state = self.board.state(self.clock())
        await self._call(self._tick_handlers, state)

        if state.bell and state.period is not None:
            # Звонок для одного периода звенит только один раз
            key = (state.date, state.period.start)
            if key != self._last_bell:
                self._last_bell = key
                logger.info("Bell: {} at {}", state.period, state.now)
                await self._call(self._bell_handlers, state)
        return state

    async def run(self) -> None:
        """Обновляет табло, пока не будет вызван :py:meth:`stop`.

        Первое обновление происходит сразу.
        Остановленное табло повторно не запускается.
        """
        logger.info("Start ticker, interval {}s", self.interval)
        while not self._stop.is_set():
            await self.tick()
            try:
                await asyncio.wait_for(self._stop.wait(), self.interval)
            except TimeoutError:
                pass
        logger.info("Ticker stopped")

    def stop(self) -> None:
        """Останавливает обновление табло."""
        self._stop.set()
