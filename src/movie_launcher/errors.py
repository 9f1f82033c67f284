from __future__ import annotations


class LauncherError(Exception):
    """Base class for failures that end the program with a non-zero status."""


class ConfigError(LauncherError):
    pass


class ScanError(LauncherError):
    pass


class UIError(LauncherError):
    pass


class PlaybackError(LauncherError):
    pass
