"""User-level directories for config and host state."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from .detection import is_windows

__all__ = [
    "home",
    "user_config_dir",
    "user_data_dir",
]

APP_NAME = "umm"


@lru_cache(maxsize=1)
def home() -> Path:
    """Get user's home directory.

    Uses USERPROFILE on Windows, HOME on Unix, then Path.home().
    """
    if is_windows():
        userprofile = os.environ.get("USERPROFILE")
        if userprofile:
            return Path(userprofile)
    else:
        home_env = os.environ.get("HOME")
        if home_env:
            return Path(home_env)

    return Path.home()


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    """Directory holding config.toml.

    Location: ~/.config/umm/ (Linux/macOS) or %APPDATA%/umm/ (Windows)
    """
    if is_windows():
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return home() / ".config" / APP_NAME


@lru_cache(maxsize=1)
def user_data_dir() -> Path:
    """Directory holding host state and default mod install roots.

    Location: ~/.local/share/umm/ (Linux/macOS) or %APPDATA%/umm/ (Windows)
    """
    if is_windows():
        return user_config_dir()

    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / APP_NAME
    return home() / ".local" / "share" / APP_NAME


def clear_caches() -> None:
    """Clear cached paths (tests change environment variables)."""
    home.cache_clear()
    user_config_dir.cache_clear()
    user_data_dir.cache_clear()
