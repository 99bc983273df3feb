from __future__ import annotations

from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_INTERVAL_MINUTES = 15


class FirebaseConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    project_id: str
    credentials_file: str | None = None

    @field_validator("project_id")
    @classmethod
    def _validate_project_id(cls, value: str) -> str:
        if value.strip() == "":
            msg = "is required"
            raise ValueError(msg)
        return value.strip()

    @property
    def send_url(self) -> str:
        return f"https://fcm.googleapis.com/v1/projects/{self.project_id}/messages:send"


class ScheduleConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    interval_minutes: int = Field(default=DEFAULT_INTERVAL_MINUTES, gt=0, strict=True)
    timezone: str = "UTC"

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = "must be a known IANA timezone"
            raise ValueError(msg) from exc
        return value

    @property
    def interval_seconds(self) -> int:
        return self.interval_minutes * 60


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    firebase: FirebaseConfig
    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> AppConfig:
        return cls.model_validate(data)
