from __future__ import annotations

import logging
import sys
from pathlib import Path

from .paths import log_path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOGGER_NAME = "movie_launcher"


def setup_logging(verbose: bool = False, path: Path | None = None) -> Path | None:
    """Send log records to a file; the terminal belongs to the UI while it runs.

    Returns the log file in use, or None when it could not be opened.
    """
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    try:
        path = path or log_path()
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        print(f"warning: logging disabled ({exc})", file=sys.stderr)
        root.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return path
