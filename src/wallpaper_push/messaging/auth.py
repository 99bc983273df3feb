from __future__ import annotations

import asyncio
import base64
import binascii
import json
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from google.auth.transport.requests import Request
from google.oauth2 import service_account

from wallpaper_push.messaging.errors import CredentialsError
from wallpaper_push.observability import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from google.auth.credentials import Credentials

FIREBASE_MESSAGING_SCOPE = "https://www.googleapis.com/auth/firebase.messaging"
SERVICE_ACCOUNT_ENV = "FIREBASE_SA_B64"

logger = get_logger(__name__)


class AccessTokenProvider(Protocol):
    async def token(self) -> str: ...


@dataclass(slots=True)
class StaticTokenProvider:
    access_token: str

    async def token(self) -> str:
        return self.access_token


class ServiceAccountTokenProvider:
    """OAuth2 bearer tokens for the FCM HTTP v1 API.

    ``google-auth`` refreshes synchronously, so the refresh runs in a worker
    thread. Tokens are reused until the credentials report themselves invalid
    (google-auth treats a token as expired slightly before its real expiry).
    """

    def __init__(self, credentials: Credentials) -> None:
        self._credentials = credentials
        self._lock = asyncio.Lock()
        self._request = Request()

    @classmethod
    def from_info(cls, info: object) -> ServiceAccountTokenProvider:
        if not isinstance(info, dict):
            msg = "service account info must be a JSON object"
            raise CredentialsError(msg)
        try:
            credentials = service_account.Credentials.from_service_account_info(
                info,
                scopes=[FIREBASE_MESSAGING_SCOPE],
            )
        except (KeyError, ValueError) as exc:
            msg = "invalid service account info"
            raise CredentialsError(msg) from exc
        return cls(credentials)

    @classmethod
    def from_file(cls, path: Path) -> ServiceAccountTokenProvider:
        try:
            info = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            msg = f"service account file not found: {path}"
            raise CredentialsError(msg) from exc
        except json.JSONDecodeError as exc:
            msg = f"service account file is not valid JSON: {path}"
            raise CredentialsError(msg) from exc
        return cls.from_info(info)

    @classmethod
    def from_env(cls) -> ServiceAccountTokenProvider:
        encoded = os.environ.get(SERVICE_ACCOUNT_ENV, "")
        if not encoded:
            msg = f"missing {SERVICE_ACCOUNT_ENV}"
            raise CredentialsError(msg)
        try:
            info = json.loads(base64.b64decode(encoded).decode("utf-8"))
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
            msg = f"{SERVICE_ACCOUNT_ENV} is not base64 encoded JSON"
            raise CredentialsError(msg) from exc
        return cls.from_info(info)

    async def token(self) -> str:
        async with self._lock:
            if not self._credentials.valid:
                await asyncio.to_thread(self._credentials.refresh, self._request)
                logger.debug("access_token_refreshed", expiry=self._credentials.expiry)
        token: str = self._credentials.token
        return token
