from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

from wallpaper_push.messaging.base import MessagingTransport
from wallpaper_push.messaging.errors import DeliveryError
from wallpaper_push.observability import get_logger

if TYPE_CHECKING:
    import httpx

    from wallpaper_push.config.models import FirebaseConfig
    from wallpaper_push.dispatch.models import NotificationPayload
    from wallpaper_push.messaging.auth import AccessTokenProvider

logger = get_logger(__name__)

_MAX_ERROR_BODY = 400


class FcmTransport(MessagingTransport):
    """Topic broadcast through the FCM HTTP v1 ``messages:send`` endpoint."""

    def __init__(self, client: httpx.AsyncClient, config: FirebaseConfig, token_provider: AccessTokenProvider) -> None:
        self._client = client
        self._config = config
        self._token_provider = token_provider

    async def send(self, payload: NotificationPayload) -> str:
        access_token = await self._token_provider.token()
        response = await self._client.post(
            self._config.send_url,
            headers={"Authorization": f"Bearer {access_token}"},
            json=self.build_message(payload),
        )
        if response.status_code >= HTTPStatus.BAD_REQUEST:
            raise DeliveryError(response.text[:_MAX_ERROR_BODY], status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            msg = "response is not JSON"
            raise DeliveryError(msg, status_code=response.status_code) from exc

        name = body.get("name") if isinstance(body, dict) else None
        if not isinstance(name, str) or not name:
            msg = "response missing message name"
            raise DeliveryError(msg, status_code=response.status_code)

        logger.debug("fcm_message_accepted", topic=payload.target_topic, message_name=name)
        return name

    @staticmethod
    def build_message(payload: NotificationPayload) -> dict[str, object]:
        # No "notification" key: data-only messages are delivered silently.
        return {
            "message": {
                "topic": payload.target_topic,
                "data": {key: str(value) for key, value in payload.data().items()},
                "android": {
                    "priority": payload.priority.value.upper(),
                    "ttl": f"{payload.time_to_live_seconds}s",
                },
            },
        }
