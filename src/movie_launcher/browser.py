from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .scanner import filter_paths

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT_SIZE = 20
MIN_VIEWPORT_SIZE = 5
VIEWPORT_CHROME_ROWS = 5
FILTER_CHAR_LIMIT = 100


class BrowserMode(Enum):
    NAVIGATION = "navigation"
    FILTER_EDITING = "filter_editing"


class BrowserAction(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    JUMP_TOP = "jump_top"
    JUMP_BOTTOM = "jump_bottom"
    ENTER_FILTER_MODE = "enter_filter_mode"
    CONFIRM = "confirm"
    QUIT = "quit"
    EDIT_FILTER = "edit_filter"
    COMMIT = "commit"
    CANCEL = "cancel"


_NAVIGATION_ACTIONS = {
    BrowserAction.MOVE_UP,
    BrowserAction.MOVE_DOWN,
    BrowserAction.PAGE_UP,
    BrowserAction.PAGE_DOWN,
    BrowserAction.JUMP_TOP,
    BrowserAction.JUMP_BOTTOM,
    BrowserAction.ENTER_FILTER_MODE,
    BrowserAction.CONFIRM,
    BrowserAction.QUIT,
}

_TEXT_ACTIONS = {BrowserAction.EDIT_FILTER}


@dataclass(frozen=True)
class BrowserRow:
    index: int
    path: Path
    is_cursor: bool


@dataclass(frozen=True)
class BrowserView:
    mode: BrowserMode
    filter_text: str
    total: int
    first: int
    last: int
    rows: tuple[BrowserRow, ...]


class Browser:
    """List navigation and filtering over a fixed set of candidate videos.

    Each public operation handles one input event to completion. Operations
    that do not belong to the current mode are ignored, and nothing but
    ``resize`` has an effect once a selection was made or the user quit.
    """

    def __init__(
        self,
        candidates: Sequence[Path],
        viewport_size: int = DEFAULT_VIEWPORT_SIZE,
    ) -> None:
        if not candidates:
            raise ValueError("Browser needs at least one candidate")
        self._candidates: tuple[Path, ...] = tuple(candidates)
        self._filtered: tuple[Path, ...] = self._candidates
        self._cursor = 0
        self._viewport_top = 0
        self._viewport_size = max(viewport_size, 1)
        self._mode = BrowserMode.NAVIGATION
        self._filter_text = ""
        self._selection: Path | None = None
        self._finished = False

    @property
    def filtered(self) -> tuple[Path, ...]:
        return self._filtered

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def viewport_top(self) -> int:
        return self._viewport_top

    @property
    def viewport_size(self) -> int:
        return self._viewport_size

    @property
    def mode(self) -> BrowserMode:
        return self._mode

    @property
    def filter_text(self) -> str:
        return self._filter_text

    @property
    def selection(self) -> Path | None:
        return self._selection

    @property
    def finished(self) -> bool:
        return self._finished

    def handle(self, action: BrowserAction, text: str = "") -> bool:
        """Apply ``action``; returns False when the current mode ignores it."""
        if self._finished:
            return False
        if action in _NAVIGATION_ACTIONS:
            if self._mode is not BrowserMode.NAVIGATION:
                return False
        elif self._mode is not BrowserMode.FILTER_EDITING:
            return False
        handler = getattr(self, action.value)
        if action in _TEXT_ACTIONS:
            handler(text)
        else:
            handler()
        return True

    def resize(self, height: int) -> None:
        self._viewport_size = max(height - VIEWPORT_CHROME_ROWS, MIN_VIEWPORT_SIZE)

    # Navigation mode

    def move_up(self) -> None:
        if not self._can_navigate():
            return
        if self._cursor > 0:
            self._cursor -= 1
        self._follow_cursor()

    def move_down(self) -> None:
        if not self._can_navigate():
            return
        if self._cursor < len(self._filtered) - 1:
            self._cursor += 1
        self._follow_cursor()

    def page_up(self) -> None:
        if not self._can_navigate():
            return
        self._cursor = max(self._cursor - self._viewport_size, 0)
        self._viewport_top = self._cursor

    def page_down(self) -> None:
        if not self._can_navigate():
            return
        self._cursor = min(self._cursor + self._viewport_size, len(self._filtered) - 1)
        self._follow_cursor()

    def jump_top(self) -> None:
        if not self._can_navigate():
            return
        self._cursor = 0
        self._viewport_top = 0

    def jump_bottom(self) -> None:
        if not self._can_navigate():
            return
        self._cursor = len(self._filtered) - 1
        self._viewport_top = max(len(self._filtered) - self._viewport_size, 0)

    def enter_filter_mode(self) -> None:
        if self._finished or self._mode is not BrowserMode.NAVIGATION:
            return
        self._mode = BrowserMode.FILTER_EDITING

    def confirm(self) -> None:
        if not self._can_navigate():
            return
        self._selection = self._filtered[self._cursor]
        self._finished = True
        logger.info("selected %s", self._selection)

    def quit(self) -> None:
        if self._finished or self._mode is not BrowserMode.NAVIGATION:
            return
        self._finished = True
        logger.debug("quit without selection")

    # Filter editing mode

    def edit_filter(self, text: str) -> None:
        if not self._editing():
            return
        self._filter_text = text[:FILTER_CHAR_LIMIT]

    def commit(self) -> None:
        if not self._editing():
            return
        self._filtered = tuple(filter_paths(self._candidates, self._filter_text))
        self._cursor = 0
        self._viewport_top = 0
        self._mode = BrowserMode.NAVIGATION
        logger.debug(
            "filter %r kept %d of %d",
            self._filter_text,
            len(self._filtered),
            len(self._candidates),
        )

    def cancel(self) -> None:
        if not self._editing():
            return
        # Edits are discarded outright; the committed text is not restored.
        self._filter_text = ""
        self._mode = BrowserMode.NAVIGATION

    def snapshot(self) -> BrowserView:
        total = len(self._filtered)
        end = min(self._viewport_top + self._viewport_size, total)
        rows = tuple(
            BrowserRow(index=index, path=self._filtered[index], is_cursor=index == self._cursor)
            for index in range(self._viewport_top, end)
        )
        return BrowserView(
            mode=self._mode,
            filter_text=self._filter_text,
            total=total,
            first=self._viewport_top + 1 if total else 0,
            last=end,
            rows=rows,
        )

    def _can_navigate(self) -> bool:
        return (
            not self._finished
            and self._mode is BrowserMode.NAVIGATION
            and bool(self._filtered)
        )

    def _editing(self) -> bool:
        return not self._finished and self._mode is BrowserMode.FILTER_EDITING

    def _follow_cursor(self) -> None:
        if self._cursor < self._viewport_top:
            self._viewport_top = self._cursor
        elif self._cursor >= self._viewport_top + self._viewport_size:
            self._viewport_top = self._cursor - self._viewport_size + 1
