from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from .errors import ScanError

logger = logging.getLogger(__name__)

VIDEO_EXTENSIONS = frozenset(
    {
        ".mp4",
        ".mkv",
        ".avi",
        ".mov",
        ".wmv",
        ".flv",
        ".webm",
        ".m4v",
        ".mpg",
        ".mpeg",
        ".3gp",
        ".ogv",
    }
)


def is_video_file(path: Path | str) -> bool:
    return Path(path).suffix.lower() in VIDEO_EXTENSIONS


def matches_keywords(path: Path | str, keywords: Iterable[str]) -> bool:
    text = str(path).lower()
    return all(keyword.lower() in text for keyword in keywords)


def filter_paths(paths: Sequence[Path], text: str) -> list[Path]:
    """Paths whose lowercased string contains ``text``; empty text keeps all."""
    if not text:
        return list(paths)
    needle = text.lower()
    return [path for path in paths if needle in str(path).lower()]


def scan_videos(root: Path, keywords: Sequence[str]) -> list[Path]:
    """Video files under ``root`` whose full path contains every keyword.

    Entries are visited in lexical order per directory. Any unreadable
    directory aborts the scan with ScanError; no partial result is returned.
    """
    lowered = [keyword.lower() for keyword in keywords]
    if not root.is_dir():
        raise ScanError(f"Not a directory: {root}")
    results: list[Path] = []
    try:
        for path in _walk_files(root):
            if is_video_file(path) and matches_keywords(path, lowered):
                results.append(path)
    except OSError as exc:
        logger.error("scan aborted under %s: %s", root, exc)
        raise ScanError(f"Error searching videos: {exc}") from exc
    logger.info("scan of %s matched %d videos for %s", root, len(results), lowered)
    return results


def _walk_files(root: Path) -> Iterator[Path]:
    # One iterator per open directory; a subdirectory is entered where its name sorts.
    stack = [iter(_sorted_entries(root))]
    while stack:
        path = next(stack[-1], None)
        if path is None:
            stack.pop()
        elif path.is_dir() and not path.is_symlink():
            stack.append(iter(_sorted_entries(path)))
        else:
            yield path


def _sorted_entries(directory: Path) -> list[Path]:
    with os.scandir(directory) as it:
        return [directory / entry.name for entry in sorted(it, key=lambda entry: entry.name)]
