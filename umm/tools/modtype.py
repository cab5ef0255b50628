"""The "umm" mod type - mods that deploy Unity Mod Manager itself."""

from __future__ import annotations

from collections.abc import Iterable

from umm.tools.matcher import is_anchor
from umm.tools.plan import Instruction

__all__ = ["MOD_TYPE_ID", "MOD_TYPE_PRIORITY", "is_umm_mod"]

MOD_TYPE_ID = "umm"
MOD_TYPE_PRIORITY = 15


def is_umm_mod(instructions: Iterable[Instruction]) -> bool:
    """True if any copy instruction places the UMM executable."""
    return any(
        instruction.is_copy
        and instruction.destination is not None
        and is_anchor(instruction.destination)
        for instruction in instructions
    )
