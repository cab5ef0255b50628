from __future__ import annotations

import typer

from umm.cli.commands._helpers import build_service, exit_with_code
from umm.cli.context import build_context
from umm.core.errors import ErrorCode
from umm.core.result import Err
from umm.output.errors import print_probe_unavailable, print_store_error
from umm.tools.state import StoreError


def probe(
    game: str = typer.Option(..., "--game", "-g", help="Game id."),
) -> None:
    """Look for a Unity Mod Manager installed outside the mod manager."""
    ctx = build_context()
    service = build_service(ctx)

    try:
        result = service.on_gamemode_activated(game)
    except (StoreError, OSError) as e:
        exit_with_code(print_store_error(e, ctx.console))

    if isinstance(result, Err):
        print_probe_unavailable(result.error, ctx.console)
        exit_with_code(ErrorCode.ENV_ERROR)
