from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st
from tests.test_utils.factories import NotificationPayloadFactory

from wallpaper_push.dispatch import (
    AttemptOutcome,
    DispatchAttempt,
    DispatchResult,
    DispatchState,
    Priority,
    build_refresh_payload,
)
from wallpaper_push.messaging import FcmTransport

aware_datetimes = st.datetimes(
    min_value=datetime(2000, 1, 1),  # noqa: DTZ001
    max_value=datetime(2100, 1, 1),  # noqa: DTZ001
    timezones=st.just(UTC),
)


@given(now=aware_datetimes)
def test_refresh_payload_fields_are_fixed_for_every_invocation(now: datetime) -> None:
    payload = build_refresh_payload(now)

    assert payload.type == "daily_refresh"
    assert payload.priority is Priority.HIGH
    assert payload.time_to_live_seconds == 3600
    assert payload.target_topic == "daily-updates"
    assert datetime.fromisoformat(payload.timestamp) == now


@given(now=aware_datetimes)
def test_fcm_message_is_data_only_with_string_values(now: datetime) -> None:
    message = FcmTransport.build_message(build_refresh_payload(now))["message"]

    assert isinstance(message, dict)
    assert "notification" not in message
    assert all(isinstance(value, str) for value in message["data"].values())
    assert message["android"] == {"priority": "HIGH", "ttl": "3600s"}
    assert message["topic"] == "daily-updates"


def test_payload_is_immutable() -> None:
    payload = NotificationPayloadFactory.build()

    with pytest.raises(dataclasses.FrozenInstanceError):
        payload.timestamp = "later"  # type: ignore[misc]


def test_payload_data_contains_only_type_and_timestamp() -> None:
    payload = NotificationPayloadFactory.build(timestamp="2026-10-16T00:00:00+00:00")

    assert payload.data() == {"type": "daily_refresh", "timestamp": "2026-10-16T00:00:00+00:00"}


def test_result_last_error_reflects_final_attempt() -> None:
    payload = NotificationPayloadFactory.build()
    result = DispatchResult(
        state=DispatchState.SUCCESS,
        payload=payload,
        attempts=(
            DispatchAttempt(index=1, outcome=AttemptOutcome.FAILURE, error="boom"),
            DispatchAttempt(index=2, outcome=AttemptOutcome.SUCCESS, delivery_id="projects/p/messages/2"),
        ),
    )

    assert result.succeeded
    assert result.last_error is None
