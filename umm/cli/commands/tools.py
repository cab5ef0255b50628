from __future__ import annotations

import typer

from umm.cli.commands._helpers import build_service, exit_with_code
from umm.cli.context import build_context
from umm.output.console import Style
from umm.output.errors import print_store_error
from umm.tools.games import SUPPORTED_GAMES
from umm.tools.matcher import is_anchor
from umm.tools.state import StoreError


def tools(
    game: str = typer.Option(..., "--game", "-g", help="Game id."),
) -> None:
    """List tools registered for GAME."""
    ctx = build_context()
    service = build_service(ctx)

    try:
        records = service.registered_tools(game)
    except (StoreError, OSError) as e:
        exit_with_code(print_store_error(e, ctx.console))

    if not records:
        ctx.console.print(f"{game}: no tools registered", Style.DIM)
        return

    ctx.console.table(
        f"Tools for {game}",
        ["id", "name", "path", ""],
        [[r.id, r.name, r.path, "umm" if is_anchor(r.path) else ""] for r in records],
    )


def games() -> None:
    """List games the Unity Mod Manager integration supports."""
    for game_id in sorted(SUPPORTED_GAMES):
        typer.echo(game_id)
