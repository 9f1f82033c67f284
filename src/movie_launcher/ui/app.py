from __future__ import annotations

from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.theme import Theme
from textual.widgets import Input, Label, Static

from ..browser import FILTER_CHAR_LIMIT, Browser, BrowserAction, BrowserMode
from .render import render_help, render_rows, render_status

TOKYO_NIGHT_THEME = Theme(
    name="tokyo-night",
    primary="#7aa2f7",
    secondary="#7dcfff",
    accent="#bb9af7",
    warning="#e0af68",
    error="#f7768e",
    success="#9ece6a",
    foreground="#c0caf5",
    background="#1a1b26",
    surface="#1f2335",
    panel="#24283b",
    boost="#2f334d",
    variables={
        "input-selection-background": "#7aa2f7 30%",
    },
)

_NAVIGATION_KEYS = {
    "up": BrowserAction.MOVE_UP,
    "k": BrowserAction.MOVE_UP,
    "down": BrowserAction.MOVE_DOWN,
    "j": BrowserAction.MOVE_DOWN,
    "pageup": BrowserAction.PAGE_UP,
    "pagedown": BrowserAction.PAGE_DOWN,
    "home": BrowserAction.JUMP_TOP,
    "g": BrowserAction.JUMP_TOP,
    "end": BrowserAction.JUMP_BOTTOM,
    "G": BrowserAction.JUMP_BOTTOM,
    "slash": BrowserAction.ENTER_FILTER_MODE,
    "/": BrowserAction.ENTER_FILTER_MODE,
    "enter": BrowserAction.CONFIRM,
    "q": BrowserAction.QUIT,
}


def navigation_action(key: str, character: str | None = None) -> BrowserAction | None:
    action = _NAVIGATION_KEYS.get(key)
    if action is None and character:
        action = _NAVIGATION_KEYS.get(character)
    return action


class VideoBrowserApp(App[Path | None]):
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", show=False, priority=True),
    ]

    CSS = """
    Screen {
        background: $background;
        color: $text;
    }

    #root {
        height: 100%;
        padding: 0 1;
    }

    #help_line {
        height: 1;
        color: $text-muted;
        text-style: italic;
    }

    #status_line {
        height: 1;
        text-style: bold;
        color: $secondary;
    }

    #filter_input {
        height: 1;
        width: 100%;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    #filter_input .input--cursor {
        background: $primary;
        color: $background;
    }

    #filter_input .input--placeholder {
        color: $text-muted;
    }

    #filter_spacer {
        height: 1;
    }

    #video_list {
        height: 1fr;
        background: $surface;
    }

    .hidden {
        display: none;
    }
    """

    def __init__(self, browser: Browser, root: Path) -> None:
        super().__init__()
        self.register_theme(TOKYO_NIGHT_THEME)
        self.theme = TOKYO_NIGHT_THEME.name
        self.browser = browser
        self.root = root
        self._help_line: Static | None = None
        self._status_line: Label | None = None
        self._filter_input: Input | None = None
        self._filter_spacer: Static | None = None
        self._video_list: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield Static("", id="help_line", markup=False)
            yield Label("", id="status_line", markup=False)
            yield Input(
                placeholder="filter...",
                id="filter_input",
                classes="hidden",
                max_length=FILTER_CHAR_LIMIT,
                compact=True,
                select_on_focus=False,
            )
            yield Static("", id="filter_spacer")
            yield Static("", id="video_list")

    def on_mount(self) -> None:
        self._help_line = self.query_one("#help_line", Static)
        self._status_line = self.query_one("#status_line", Label)
        self._filter_input = self.query_one("#filter_input", Input)
        self._filter_spacer = self.query_one("#filter_spacer", Static)
        self._video_list = self.query_one("#video_list", Static)
        self.browser.resize(self.size.height)
        self._refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        self.browser.resize(event.size.height)
        self._refresh_view()

    def on_key(self, event: events.Key) -> None:
        if self.browser.mode == BrowserMode.FILTER_EDITING:
            if event.key == "escape":
                self.browser.handle(BrowserAction.CANCEL)
                self._after_action()
                event.stop()
            return
        action = navigation_action(event.key, event.character)
        if action is None:
            return
        event.stop()
        self.browser.handle(action)
        self._after_action()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "filter_input":
            self.browser.handle(BrowserAction.EDIT_FILTER, event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "filter_input":
            self.browser.handle(BrowserAction.EDIT_FILTER, event.value)
            self.browser.handle(BrowserAction.COMMIT)
            self._after_action()

    def action_interrupt(self) -> None:
        if self.browser.mode == BrowserMode.FILTER_EDITING:
            self.browser.handle(BrowserAction.CANCEL)
        else:
            self.browser.handle(BrowserAction.QUIT)
        self._after_action()

    def _after_action(self) -> None:
        if self.browser.finished:
            self.exit(self.browser.selection)
            return
        self._sync_filter_input()
        self._refresh_view()

    def _sync_filter_input(self) -> None:
        if self._filter_input is None or self._filter_spacer is None:
            return
        editing = self.browser.mode == BrowserMode.FILTER_EDITING
        if editing and self._filter_input.has_class("hidden"):
            self._filter_input.value = self.browser.filter_text
            self._filter_input.remove_class("hidden")
            self._filter_spacer.add_class("hidden")
            self._filter_input.focus()
        elif not editing and not self._filter_input.has_class("hidden"):
            self._filter_input.value = self.browser.filter_text
            self._filter_input.add_class("hidden")
            self._filter_spacer.remove_class("hidden")
            self.set_focus(None)

    def _refresh_view(self) -> None:
        if self._video_list is None or self._status_line is None or self._help_line is None:
            return
        view = self.browser.snapshot()
        self._help_line.update(render_help(view))
        self._status_line.update(render_status(view))
        self._video_list.update(render_rows(view, self.root))
