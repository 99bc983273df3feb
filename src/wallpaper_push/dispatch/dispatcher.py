from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from tenacity import AsyncRetrying, RetryError, retry_if_exception_type, stop_after_attempt, wait_fixed

from wallpaper_push.dispatch.models import (
    AttemptOutcome,
    DispatchAttempt,
    DispatchResult,
    DispatchState,
    NotificationPayload,
    build_refresh_payload,
)
from wallpaper_push.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from wallpaper_push.messaging.base import MessagingTransport

logger = get_logger(__name__)

MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 0.5


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class RefreshDispatcher:
    """Broadcasts one silent refresh message per invocation.

    Every delivery error is retried with a fixed delay, up to ``max_attempts``
    sends. The same payload is resent on each retry. Errors never leave
    :meth:`dispatch`; the outcome is logged and returned for inspection.
    """

    def __init__(
        self,
        transport: MessagingTransport,
        *,
        clock: Callable[[], datetime] = _utc_now,
        sleep: Callable[[float], Awaitable[None]] | None = None,
        max_attempts: int = MAX_ATTEMPTS,
        retry_delay_seconds: float = RETRY_DELAY_SECONDS,
    ) -> None:
        if max_attempts <= 0:
            msg = "max_attempts must be positive"
            raise ValueError(msg)
        if retry_delay_seconds < 0:
            msg = "retry_delay_seconds must not be negative"
            raise ValueError(msg)

        self._transport = transport
        self._clock = clock
        self._sleep = sleep if sleep is not None else asyncio.sleep
        self._max_attempts = max_attempts
        self._retry_delay_seconds = retry_delay_seconds

    async def dispatch(self) -> DispatchResult:
        payload = build_refresh_payload(self._clock())
        attempts: list[DispatchAttempt] = []
        logger.info("dispatch_triggered", topic=payload.target_topic, payload_timestamp=payload.timestamp)

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(Exception),
                wait=wait_fixed(self._retry_delay_seconds),
                stop=stop_after_attempt(self._max_attempts),
                sleep=self._sleep,
            ):
                with attempt:
                    await self._attempt(payload, attempt.retry_state.attempt_number, attempts)
        except RetryError:
            logger.error(
                "dispatch_failed",
                topic=payload.target_topic,
                attempts=len(attempts),
                last_error=attempts[-1].error,
            )
            return DispatchResult(state=DispatchState.FAILED, payload=payload, attempts=tuple(attempts))

        logger.info(
            "dispatch_succeeded",
            topic=payload.target_topic,
            attempt=len(attempts),
            delivery_id=attempts[-1].delivery_id,
        )
        return DispatchResult(state=DispatchState.SUCCESS, payload=payload, attempts=tuple(attempts))

    async def _attempt(self, payload: NotificationPayload, index: int, attempts: list[DispatchAttempt]) -> None:
        try:
            delivery_id = await self._transport.send(payload)
        except Exception as exc:
            error = _describe(exc)
            attempts.append(DispatchAttempt(index=index, outcome=AttemptOutcome.FAILURE, error=error))
            logger.warning(
                "dispatch_attempt_failed",
                attempt=index,
                max_attempts=self._max_attempts,
                error_type=type(exc).__name__,
                error=error,
            )
            raise
        attempts.append(DispatchAttempt(index=index, outcome=AttemptOutcome.SUCCESS, delivery_id=delivery_id))
