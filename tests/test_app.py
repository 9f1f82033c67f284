from __future__ import annotations

import asyncio
from pathlib import Path

from movie_launcher.browser import Browser, BrowserAction, BrowserMode
from movie_launcher.ui.app import VideoBrowserApp, navigation_action

ROOT = Path("/media/videos")
VIDEOS = [
    ROOT / "a" / "alien.mp4",
    ROOT / "a" / "aliens.mkv",
    ROOT / "b" / "heat.avi",
]


def _run(app: VideoBrowserApp, *keys: str) -> None:
    async def drive() -> None:
        async with app.run_test(size=(100, 30)) as pilot:
            await pilot.press(*keys)
            if not app.browser.finished:
                await pilot.pause()

    asyncio.run(drive())


def test_navigation_action_keys() -> None:
    assert navigation_action("down") == BrowserAction.MOVE_DOWN
    assert navigation_action("j", "j") == BrowserAction.MOVE_DOWN
    assert navigation_action("G", "G") == BrowserAction.JUMP_BOTTOM
    assert navigation_action("shift+g", "G") == BrowserAction.JUMP_BOTTOM
    assert navigation_action("slash", "/") == BrowserAction.ENTER_FILTER_MODE
    assert navigation_action("x", "x") is None


def test_app_applies_terminal_height() -> None:
    app = VideoBrowserApp(Browser(VIDEOS), ROOT)
    _run(app)
    assert app.browser.viewport_size == 25


def test_app_returns_selected_video() -> None:
    app = VideoBrowserApp(Browser(VIDEOS), ROOT)
    _run(app, "down", "enter")
    assert app.return_value == VIDEOS[1]


def test_app_quit_returns_none() -> None:
    app = VideoBrowserApp(Browser(VIDEOS), ROOT)
    _run(app, "j", "q")
    assert app.browser.finished
    assert app.return_value is None


def test_app_filter_commit() -> None:
    app = VideoBrowserApp(Browser(VIDEOS), ROOT)
    _run(app, "slash", "h", "e", "a", "t", "enter")
    assert app.browser.mode == BrowserMode.NAVIGATION
    assert app.browser.filter_text == "heat"
    assert app.browser.filtered == (VIDEOS[2],)


def test_app_filter_cancel() -> None:
    app = VideoBrowserApp(Browser(VIDEOS), ROOT)
    _run(app, "slash", "h", "e", "escape")
    assert app.browser.mode == BrowserMode.NAVIGATION
    assert app.browser.filter_text == ""
    assert app.browser.filtered == tuple(VIDEOS)


def test_app_ctrl_c_cancels_filter() -> None:
    app = VideoBrowserApp(Browser(VIDEOS), ROOT)
    _run(app, "slash", "h", "e", "ctrl+c")
    assert not app.browser.finished
    assert app.browser.mode == BrowserMode.NAVIGATION
    assert app.browser.filter_text == ""
    assert app.browser.filtered == tuple(VIDEOS)


def test_app_ctrl_c_quits() -> None:
    app = VideoBrowserApp(Browser(VIDEOS), ROOT)
    _run(app, "down", "ctrl+c")
    assert app.browser.finished
    assert app.browser.selection is None
    assert app.return_value is None
