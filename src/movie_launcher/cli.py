from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from rich.console import Console

from . import __version__
from .browser import Browser
from .config import LauncherConfig, load_config
from .errors import LauncherError, UIError
from .logs import setup_logging
from .player import play_video
from .scanner import scan_videos
from .ui.app import VideoBrowserApp

logger = logging.getLogger(__name__)

PROG = "movie-launcher"
EPILOG = """Example: movie-launcher matrix 1999

Environment:
  VIDEO_DIR     directory to search (required)
  VIDEO_PLAYER  player command (default: mpv)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Find videos by keyword, pick one and play it.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("keywords", nargs="+", metavar="KEYWORD", help="Search keywords")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Write the log here instead of the user log dir")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def browse(videos: Sequence[Path], root: Path) -> Path | None:
    app = VideoBrowserApp(Browser(videos), root)
    try:
        selection = app.run()
    except Exception as exc:
        raise UIError(f"Error running UI: {exc}") from exc
    if app.return_code:
        raise UIError(f"Error running UI: exited with status {app.return_code}")
    return selection


def run(config: LauncherConfig, keywords: Sequence[str], console: Console) -> int:
    console.print(f"Searching for videos matching: {' '.join(keywords)}")
    videos = scan_videos(config.video_dir, keywords)
    if not videos:
        console.print("No videos found matching your search.")
        return 0
    selection = browse(videos, config.video_dir)
    if selection is None:
        return 0
    console.print(f"Playing: {selection}")
    play_video(selection, config.video_player)
    return 0


def main(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    log_file = Path(args.log_file).expanduser() if args.log_file else None
    setup_logging(args.verbose, log_file)
    console = Console(markup=False, highlight=False, soft_wrap=True)
    error_console = Console(stderr=True, markup=False, highlight=False, soft_wrap=True)
    try:
        config = load_config(os.environ if environ is None else environ)
        return run(config, args.keywords, console)
    except LauncherError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        error_console.print(str(exc), style="bold red")
        return 1
    except KeyboardInterrupt:
        return 130
