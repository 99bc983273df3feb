from __future__ import annotations

import asyncio
import contextlib
from typing import Protocol

from wallpaper_push.observability import get_logger

logger = get_logger(__name__)


class Dispatcher(Protocol):
    async def dispatch(self) -> object: ...


class DispatchScheduler:
    def __init__(self, interval_seconds: int, dispatcher: Dispatcher) -> None:
        if interval_seconds <= 0:
            msg = "interval_seconds must be positive"
            raise ValueError(msg)
        if not hasattr(dispatcher, "dispatch"):
            msg = "dispatcher must define dispatch"
            raise TypeError(msg)

        self._interval_seconds = interval_seconds
        self._dispatcher = dispatcher
        self._task: asyncio.Task[None] | None = None
        self._stop_event = asyncio.Event()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._task = asyncio.create_task(self._run())

    async def shutdown(self) -> None:
        if self._task is None:
            return
        self._stop_event.set()
        await self._task
        self._task = None

    async def _run(self) -> None:
        while not self._stop_event.is_set():
            with contextlib.suppress(TimeoutError):
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval_seconds)
            if self._stop_event.is_set():
                break
            await self._dispatcher.dispatch()
            logger.debug("dispatch_cycle_completed", next_in_seconds=self._interval_seconds)
