from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from umm.core.config import Config, load_config_or_default
from umm.core.errors import ErrorCode
from umm.core.result import Err
from umm.output.console import ConsoleProtocol, RichConsole
from umm.platform.paths import user_config_dir, user_data_dir
from umm.platform.registry import RegistryAccessor, default_registry
from umm.tools.state import ConfigStore, JsonConfigStore

CONFIG_ENV = "UMM_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    store: ConfigStore
    registry: RegistryAccessor
    console: ConsoleProtocol


def config_path() -> Path:
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env).expanduser()
    return user_config_dir() / "config.toml"


def store_path(config: Config) -> Path:
    if config.store.path:
        return Path(config.store.path).expanduser()
    return user_data_dir() / "state.json"


def build_context() -> CLIContext:
    path = config_path()
    config_result = load_config_or_default(path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    config = config_result.value
    return CLIContext(
        config=config,
        store=JsonConfigStore(store_path(config)),
        registry=default_registry(),
        console=RichConsole(),
    )
