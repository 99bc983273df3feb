from wallpaper_push.messaging.auth import (
    FIREBASE_MESSAGING_SCOPE,
    AccessTokenProvider,
    ServiceAccountTokenProvider,
    StaticTokenProvider,
)
from wallpaper_push.messaging.base import MessagingTransport
from wallpaper_push.messaging.errors import CredentialsError, DeliveryError
from wallpaper_push.messaging.fcm import FcmTransport

__all__ = [
    "FIREBASE_MESSAGING_SCOPE",
    "AccessTokenProvider",
    "CredentialsError",
    "DeliveryError",
    "FcmTransport",
    "MessagingTransport",
    "ServiceAccountTokenProvider",
    "StaticTokenProvider",
]
