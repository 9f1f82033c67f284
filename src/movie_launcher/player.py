from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Callable

from .errors import PlaybackError

logger = logging.getLogger(__name__)

Runner = Callable[[list[str]], subprocess.CompletedProcess[bytes]]


def build_player_command(player: str, path: Path) -> list[str]:
    """Player argv with the video path as one literal trailing argument.

    ``player`` may carry its own options, e.g. ``"mpv --fs"``.
    """
    try:
        base = shlex.split(player)
    except ValueError as exc:
        raise PlaybackError(f"Invalid player command: {player} ({exc})") from exc
    if not base:
        raise PlaybackError("Player command is empty")
    return [*base, str(path)]


def play_video(path: Path, player: str, *, runner: Runner | None = None) -> None:
    command = build_player_command(player, path)
    runner = runner or _run_foreground
    logger.info("launching %s", command)
    try:
        completed = runner(command)
    except FileNotFoundError as exc:
        raise PlaybackError(f"Player not found on PATH: {command[0]}") from exc
    except OSError as exc:
        raise PlaybackError(f"Failed to start player {command[0]}: {exc}") from exc
    if completed.returncode != 0:
        logger.error("%s exited with status %d", command[0], completed.returncode)
        raise PlaybackError(
            f"Error playing video: {command[0]} exited with status {completed.returncode}"
        )
    logger.info("%s finished", command[0])


def _run_foreground(command: list[str]) -> subprocess.CompletedProcess[bytes]:
    # No redirection: the child shares this process's stdin, stdout and stderr.
    return subprocess.run(command, check=False)
