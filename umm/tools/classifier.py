"""Payload detection - is this archive a Unity Mod Manager distribution?"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from umm.tools.games import is_supported
from umm.tools.matcher import find_anchor

__all__ = ["SupportedResult", "is_umm_payload", "classify_payload"]


@dataclass(frozen=True, slots=True)
class SupportedResult:
    """Answer to the host's installer test hook.

    Attributes:
        supported: True if this installer should handle the payload
        required_files: Extra files the host must extract first (always empty)
    """

    supported: bool
    required_files: tuple[str, ...] = ()


def is_umm_payload(files: Sequence[str]) -> bool:
    """Check whether any payload path is the UMM executable."""
    return find_anchor(files) is not None


def classify_payload(files: Sequence[str], game_id: str) -> SupportedResult:
    """Decide whether the UMM installer handles this payload for game_id.

    Total: an empty payload or unknown game is simply unsupported.
    """
    return SupportedResult(supported=is_supported(game_id) and is_umm_payload(files))
