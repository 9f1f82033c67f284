from __future__ import annotations

from pathlib import Path

from rich.text import Text

from ..browser import BrowserMode, BrowserView

HELP_LINE = (
    "Video Browser - arrows/jk, PgUp/PgDn, g/G (top/bottom), "
    "/ to filter, Enter to play, q to quit"
)
FILTER_HELP_LINE = "Filter - type to edit, Enter to apply, Esc to clear"

_ROW_STYLE = "#c0caf5"
_CURSOR_STYLE = "reverse bold"
_DIR_STYLE = "#565f89"
_EMPTY_STYLE = "italic #565f89"


def render_help(view: BrowserView) -> str:
    if view.mode == BrowserMode.FILTER_EDITING:
        return FILTER_HELP_LINE
    return HELP_LINE


def render_status(view: BrowserView) -> str:
    status = f"Found {view.total} videos (showing {view.first}-{view.last})"
    if view.mode == BrowserMode.NAVIGATION and view.filter_text:
        status += f"  filter: {view.filter_text}"
    return status


def render_rows(view: BrowserView, root: Path) -> Text:
    if not view.rows:
        return Text("No videos match the filter. Press / to change it.", style=_EMPTY_STYLE)
    text = Text(no_wrap=True, overflow="ellipsis")
    for position, row in enumerate(view.rows):
        if position:
            text.append("\n")
        if row.is_cursor:
            text.append(display_path(root, row.path), style=_CURSOR_STYLE)
            continue
        parent, _, name = display_path(root, row.path).rpartition("/")
        if parent:
            text.append(f"{parent}/", style=_DIR_STYLE)
        text.append(name, style=_ROW_STYLE)
    return text


def display_path(root: Path, path: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
