"""Anchor file matching.

Every component that needs to recognise Unity Mod Manager goes through
is_anchor(): payload detection, install planning, tool-record lookup and
mod type classification. Paths may use either separator since archive
listings and Windows registry values are both accepted.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = [
    "UMM_EXE",
    "basename",
    "is_anchor",
    "find_anchor",
    "anchor_offset",
    "parent_dir",
    "join_path",
    "same_directory",
]

UMM_EXE = "UnityModManager.exe"

_SEPARATORS = re.compile(r"[\\/]")


def basename(path: str) -> str:
    """Final path segment; empty for paths ending in a separator."""
    return _SEPARATORS.split(path)[-1]


def is_anchor(path: str) -> bool:
    """Check whether path names the Unity Mod Manager executable.

    Case-insensitive, whole-segment match: "MyUnityModManager.exe" does not
    match.
    """
    return basename(path).lower() == UMM_EXE.lower()


def find_anchor(paths: Iterable[str]) -> str | None:
    """First path that is the anchor, or None."""
    return next((path for path in paths if is_anchor(path)), None)


def anchor_offset(path: str) -> int:
    """Index in path where its final segment starts."""
    return len(path) - len(basename(path))


def parent_dir(path: str) -> str:
    """Path without its final segment and trailing separator."""
    return path[: anchor_offset(path)].rstrip("\\/")


def join_path(directory: str, name: str) -> str:
    """Join using the separator style already present in directory."""
    if not directory:
        return name
    sep = "\\" if "\\" in directory and "/" not in directory else "/"
    return directory.rstrip("\\/") + sep + name


def _normalize_dir(path: str) -> str:
    return path.replace("\\", "/").rstrip("/")


def same_directory(a: str, b: str) -> bool:
    """Compare directories, ignoring separator style and trailing separators."""
    return _normalize_dir(a) == _normalize_dir(b)
