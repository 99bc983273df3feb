from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wallpaper_push.dispatch.models import NotificationPayload


class MessagingTransport(ABC):
    @abstractmethod
    async def send(self, payload: NotificationPayload) -> str:
        """Deliver ``payload`` to its topic and return the provider's delivery id."""
