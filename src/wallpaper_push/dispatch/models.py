from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

REFRESH_TYPE = "daily_refresh"
REFRESH_TOPIC = "daily-updates"
REFRESH_TTL_SECONDS = 3600


class Priority(Enum):
    HIGH = "high"
    NORMAL = "normal"


class AttemptOutcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class DispatchState(Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class NotificationPayload:
    """Data-only message; carries no display fields so devices decide locally whether to refresh."""

    type: str
    timestamp: str
    priority: Priority
    time_to_live_seconds: int
    target_topic: str

    def data(self) -> dict[str, str]:
        return {"type": self.type, "timestamp": self.timestamp}


@dataclass(frozen=True, slots=True)
class DispatchAttempt:
    index: int
    outcome: AttemptOutcome
    delivery_id: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class DispatchResult:
    state: DispatchState
    payload: NotificationPayload
    attempts: tuple[DispatchAttempt, ...]

    @property
    def succeeded(self) -> bool:
        return self.state is DispatchState.SUCCESS

    @property
    def last_error(self) -> str | None:
        if not self.attempts:
            return None
        return self.attempts[-1].error


def build_refresh_payload(now: datetime) -> NotificationPayload:
    return NotificationPayload(
        type=REFRESH_TYPE,
        timestamp=now.isoformat(),
        priority=Priority.HIGH,
        time_to_live_seconds=REFRESH_TTL_SECONDS,
        target_topic=REFRESH_TOPIC,
    )
