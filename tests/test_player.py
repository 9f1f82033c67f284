from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from movie_launcher.errors import PlaybackError
from movie_launcher.player import build_player_command, play_video


def test_build_player_command_keeps_path_literal() -> None:
    path = Path("/videos/My Movie; rm -rf.mp4")
    assert build_player_command("mpv", path) == ["mpv", str(path)]


def test_build_player_command_with_options() -> None:
    path = Path("/videos/a.mkv")
    assert build_player_command("mpv --fs", path) == ["mpv", "--fs", str(path)]


def test_build_player_command_rejects_empty() -> None:
    with pytest.raises(PlaybackError):
        build_player_command("   ", Path("a.mp4"))


def test_play_video_success() -> None:
    calls: list[list[str]] = []

    def runner(command: list[str]) -> subprocess.CompletedProcess[bytes]:
        calls.append(command)
        return subprocess.CompletedProcess(command, 0)

    play_video(Path("/videos/a.mp4"), "vlc", runner=runner)
    assert calls == [["vlc", "/videos/a.mp4"]]


def test_play_video_nonzero_exit() -> None:
    def runner(command: list[str]) -> subprocess.CompletedProcess[bytes]:
        return subprocess.CompletedProcess(command, 3)

    with pytest.raises(PlaybackError, match="status 3"):
        play_video(Path("/videos/a.mp4"), "mpv", runner=runner)


def test_play_video_player_missing() -> None:
    def runner(command: list[str]) -> subprocess.CompletedProcess[bytes]:
        raise FileNotFoundError(command[0])

    with pytest.raises(PlaybackError, match="not found"):
        play_video(Path("/videos/a.mp4"), "no-such-player", runner=runner)


def test_play_video_real_process_failure(tmp_path: Path) -> None:
    with pytest.raises(PlaybackError):
        play_video(tmp_path / "a.mp4", "false")
