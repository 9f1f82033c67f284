from __future__ import annotations

from pathlib import Path

from platformdirs import user_log_path

APP_NAME = "movie-launcher"


def log_root() -> Path:
    root = user_log_path(APP_NAME)
    root.mkdir(parents=True, exist_ok=True)
    return root


def log_path() -> Path:
    return log_root() / f"{APP_NAME}.log"
