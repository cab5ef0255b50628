"""Error presentation utilities.

Centralized error formatting and exit code mapping for the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from umm.core.errors import ErrorCode
from umm.output.console import Style
from umm.tools.probe import ProbeReason, ProbeUnavailable
from umm.tools.state import StoreError

if TYPE_CHECKING:
    from umm.core.config import ConfigError
    from umm.output.console import ConsoleProtocol

__all__ = [
    "print_config_error",
    "print_probe_unavailable",
    "print_store_error",
]


def print_probe_unavailable(error: ProbeUnavailable, console: ConsoleProtocol) -> None:
    """Explain why the registry probe found nothing."""
    match error:
        case ProbeUnavailable(reason=ProbeReason.UNSUPPORTED_GAME, game_id=game_id):
            console.print(f"{game_id}: Unity Mod Manager is not used for this game", Style.DIM)
        case ProbeUnavailable(reason=ProbeReason.KEY_MISSING, detail=detail):
            console.print(f"no install recorded in the registry ({detail})", Style.DIM)
        case ProbeUnavailable(reason=ProbeReason.ANCHOR_MISSING, detail=detail):
            console.print(f"recorded install is gone: {detail}", Style.DIM)
        case ProbeUnavailable(reason=ProbeReason.REGISTRY_ERROR, detail=detail):
            console.warning(f"registry not readable: {detail}")


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> int:
    """Print a config error; returns the exit code to use."""
    console.error(error.message)
    return int(ErrorCode.ENV_ERROR)


def print_store_error(error: StoreError | OSError, console: ConsoleProtocol) -> int:
    """Print a state store failure; returns the exit code to use."""
    match error:
        case StoreError(path=path) if path is not None:
            console.error(f"{error} ({path})")
        case _:
            console.error(f"state store: {error}")
    return int(ErrorCode.IO_ERROR)
