from wallpaper_push.dispatch.dispatcher import MAX_ATTEMPTS, RETRY_DELAY_SECONDS, RefreshDispatcher
from wallpaper_push.dispatch.models import (
    REFRESH_TOPIC,
    REFRESH_TTL_SECONDS,
    REFRESH_TYPE,
    AttemptOutcome,
    DispatchAttempt,
    DispatchResult,
    DispatchState,
    NotificationPayload,
    Priority,
    build_refresh_payload,
)

__all__ = [
    "MAX_ATTEMPTS",
    "REFRESH_TOPIC",
    "REFRESH_TTL_SECONDS",
    "REFRESH_TYPE",
    "RETRY_DELAY_SECONDS",
    "AttemptOutcome",
    "DispatchAttempt",
    "DispatchResult",
    "DispatchState",
    "NotificationPayload",
    "Priority",
    "RefreshDispatcher",
    "build_refresh_payload",
]
