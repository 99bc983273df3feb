from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

from wallpaper_push.messaging import MessagingTransport

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wallpaper_push.dispatch import DispatchResult, NotificationPayload, RefreshDispatcher


class ScriptedTransport(MessagingTransport):
    """Plays back delivery ids and exceptions in order, one per send."""

    def __init__(self, outcomes: Iterable[str | Exception]) -> None:
        self._outcomes = iter(outcomes)
        self.payloads: list[NotificationPayload] = []

    @classmethod
    def always(cls, outcome: str | Exception) -> ScriptedTransport:
        return cls(itertools.repeat(outcome))

    @property
    def calls(self) -> int:
        return len(self.payloads)

    async def send(self, payload: NotificationPayload) -> str:
        self.payloads.append(payload)
        try:
            outcome = next(self._outcomes)
        except StopIteration as exc:
            msg = "Transport outcomes exhausted"
            raise AssertionError(msg) from exc
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class CountingDispatcher:
    def __init__(self) -> None:
        self.calls = 0

    async def dispatch(self) -> None:
        self.calls += 1


class RecordingDispatcher:
    def __init__(self, inner: RefreshDispatcher) -> None:
        self._inner = inner
        self.results: list[DispatchResult] = []

    async def dispatch(self) -> DispatchResult:
        result = await self._inner.dispatch()
        self.results.append(result)
        return result
