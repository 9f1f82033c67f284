from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError

DEFAULT_PLAYER = "mpv"
VIDEO_DIR_VAR = "VIDEO_DIR"
VIDEO_PLAYER_VAR = "VIDEO_PLAYER"


@dataclass(frozen=True)
class LauncherConfig:
    video_dir: Path
    video_player: str = DEFAULT_PLAYER


def load_config(environ: Mapping[str, str]) -> LauncherConfig:
    video_dir = _as_str(environ.get(VIDEO_DIR_VAR))
    if video_dir is None:
        raise ConfigError(f"{VIDEO_DIR_VAR} environment variable is required")
    player = _as_str(environ.get(VIDEO_PLAYER_VAR)) or DEFAULT_PLAYER
    return LauncherConfig(
        video_dir=Path(video_dir).expanduser(),
        video_player=player,
    )


def _as_str(value: Any) -> str | None:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None
