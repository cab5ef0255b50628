from __future__ import annotations

import os
from pathlib import Path

import typer

from umm import __version__
from umm.cli.commands.payload import install, test
from umm.cli.commands.probe import probe
from umm.cli.commands.tools import games, tools
from umm.cli.context import CONFIG_ENV
from umm.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    invoke_without_command=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(games)
app.command()(test)
app.command()(install)
app.command()(probe)
app.command()(tools)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: <user config dir>/umm/config.toml)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if config is not None:
        path = config.expanduser()
        if path.exists() and not path.is_file():
            typer.echo(f"error: --config '{path}' is not a file", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        os.environ[CONFIG_ENV] = str(path)


def main() -> None:
    app()
