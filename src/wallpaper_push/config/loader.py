from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import AppConfig

if TYPE_CHECKING:
    from pathlib import Path


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    project_id = os.environ.get("FIREBASE_PROJECT_ID", "").strip()
    if not project_id:
        return data
    firebase = data.get("firebase")
    if firebase is None:
        firebase = {}
    if not isinstance(firebase, dict):
        return data
    return {**data, "firebase": {**firebase, "project_id": project_id}}


def _resolve_credentials_file(config: AppConfig, path: Path) -> AppConfig:
    credentials_file = config.firebase.credentials_file
    if credentials_file is None:
        return config
    resolved = (path.parent / credentials_file).resolve()
    firebase = config.firebase.model_copy(update={"credentials_file": str(resolved)})
    return config.model_copy(update={"firebase": firebase})


def load_config(path: Path) -> AppConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        msg = f"config not found: {path}"
        raise ConfigError(msg) from exc
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc

    try:
        config = AppConfig.from_raw(_apply_env_overrides(data))
    except ValidationError as exc:
        msg = f"invalid config: {path}"
        raise ConfigError(msg) from exc

    return _resolve_credentials_file(config, path)
