from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "wallpaper-push.toml"
    path.write_text(
        '[firebase]\nproject_id = "github-wallpaper"\n\n[schedule]\ninterval_minutes = 15\n',
        encoding="utf-8",
    )
    return path
