from __future__ import annotations

from pathlib import Path

import pytest

from movie_launcher.config import DEFAULT_PLAYER, LauncherConfig, load_config
from movie_launcher.errors import ConfigError


def test_load_config_requires_video_dir() -> None:
    with pytest.raises(ConfigError, match="VIDEO_DIR"):
        load_config({})


def test_load_config_blank_video_dir() -> None:
    with pytest.raises(ConfigError):
        load_config({"VIDEO_DIR": "   "})


def test_load_config_default_player(tmp_path: Path) -> None:
    config = load_config({"VIDEO_DIR": str(tmp_path)})
    assert config == LauncherConfig(video_dir=tmp_path, video_player=DEFAULT_PLAYER)
    assert config.video_player == "mpv"


def test_load_config_custom_player(tmp_path: Path) -> None:
    config = load_config({"VIDEO_DIR": str(tmp_path), "VIDEO_PLAYER": " vlc "})
    assert config.video_player == "vlc"


def test_load_config_blank_player_uses_default(tmp_path: Path) -> None:
    config = load_config({"VIDEO_DIR": str(tmp_path), "VIDEO_PLAYER": ""})
    assert config.video_player == DEFAULT_PLAYER


def test_load_config_expands_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config = load_config({"VIDEO_DIR": "~/Videos"})
    assert config.video_dir == tmp_path / "Videos"
