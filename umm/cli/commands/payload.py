"""Payload commands - run the installer hooks on a pre-extracted file list."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from umm.cli.commands._helpers import build_service, exit_with_code, read_payload
from umm.cli.context import build_context
from umm.core.errors import ErrorCode
from umm.output.console import Style
from umm.output.errors import print_store_error
from umm.tools.games import SUPPORTED_GAMES
from umm.tools.state import StoreError

_FILES = typer.Argument(None, help="Payload file paths, as listed in the archive.")
_PAYLOAD_FILE = typer.Option(
    None,
    "--payload-file",
    help="Text file with one payload path per line.",
)


def test(
    game: str = typer.Option(..., "--game", "-g", help="Game id."),
    files: list[str] | None = _FILES,
    payload_file: Path | None = _PAYLOAD_FILE,
) -> None:
    """Check whether a payload is a Unity Mod Manager distribution for GAME."""
    ctx = build_context()
    service = build_service(ctx)

    result = service.test(read_payload(files, payload_file), game)
    if result.supported:
        ctx.console.success(f"{game}: Unity Mod Manager payload")
        return

    ctx.console.print(f"{game}: not handled by the UMM installer", Style.DIM)
    exit_with_code(ErrorCode.USER_ERROR)


def install(
    game: str = typer.Option(..., "--game", "-g", help="Game id."),
    destination: str = typer.Option(
        ...,
        "--destination",
        "-d",
        help="Staging directory the host installs into (may end in .installing).",
    ),
    files: list[str] | None = _FILES,
    payload_file: Path | None = _PAYLOAD_FILE,
    as_json: bool = typer.Option(False, "--json", help="Print instructions as JSON."),
) -> None:
    """Plan a Unity Mod Manager install and register the tool for GAME."""
    ctx = build_context()
    service = build_service(ctx)
    payload = read_payload(files, payload_file)

    if not service.test(payload, game).supported:
        if game not in SUPPORTED_GAMES:
            ctx.console.error(f"Unity Mod Manager is not used for game: {game}")
            ctx.console.print(f"Supported: {', '.join(sorted(SUPPORTED_GAMES))}", Style.DIM)
        else:
            ctx.console.error("payload does not contain UnityModManager.exe")
        exit_with_code(ErrorCode.USER_ERROR)

    try:
        plan = service.plan(payload, destination, game)
    except (StoreError, OSError) as e:
        exit_with_code(print_store_error(e, ctx.console))

    if as_json:
        typer.echo(json.dumps([i.to_dict() for i in plan.instructions], indent=2))
        return

    ctx.console.table(
        f"Install into {plan.install_dir}",
        ["source", "destination"],
        [[i.source or "", i.destination or ""] for i in plan.instructions],
    )
    if service.classify(plan.instructions):
        ctx.console.print("mod type: umm", Style.DIM)
