"""Games the Unity Mod Manager integration is active for.

Adding a game is a code change; the list is not read from UMM's own
configuration files.
"""

from __future__ import annotations

__all__ = ["SUPPORTED_GAMES", "is_supported"]

SUPPORTED_GAMES: frozenset[str] = frozenset(
    {
        "dawnofman",
        "gardenpaws",
        "pathfinderkingmaker",
        "oxygennotincluded",
    }
)


def is_supported(game_id: str) -> bool:
    return game_id in SUPPORTED_GAMES
