from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from umm.cli.context import CLIContext
from umm.core.errors import ErrorCode
from umm.services.integration import IntegrationService


def exit_with_code(code: ErrorCode | int) -> NoReturn:
    raise typer.Exit(code=int(code))


def build_service(ctx: CLIContext) -> IntegrationService:
    return IntegrationService(
        store=ctx.store,
        registry=ctx.registry,
        config=ctx.config,
        console=ctx.console,
    )


def read_payload(files: list[str] | None, payload_file: Path | None) -> list[str]:
    """Payload paths from arguments, then from a file with one path per line."""
    payload = list(files or [])
    if payload_file is not None:
        try:
            text = payload_file.read_text(encoding="utf-8")
        except OSError as e:
            typer.echo(f"error: cannot read payload file: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        payload.extend(line.strip() for line in text.splitlines() if line.strip())
    return payload
