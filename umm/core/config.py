"""Typed configuration loading and access.

This module provides dataclasses for the config.toml structure with
full type safety and validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "RegistryConfig",
    "StoreConfig",
    "load_config",
    "load_config_or_default",
    # Registry defaults
    "REGISTRY_HIVE",
    "REGISTRY_KEY",
    "REGISTRY_VALUE",
]

# -----------------------------------------------------------------------------
# Registry location written by Unity Mod Manager on first run
# -----------------------------------------------------------------------------

REGISTRY_HIVE = "HKEY_CURRENT_USER"
REGISTRY_KEY = "Software\\UnityModManager"
REGISTRY_VALUE = "Path"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Where to look for a self-installed Unity Mod Manager."""

    hive: str = REGISTRY_HIVE
    key: str = REGISTRY_KEY
    name: str = REGISTRY_VALUE


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Host state file location.

    None means the default location under the user data directory.
    """

    path: str | None = None


def _empty_install_paths() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    store: StoreConfig = field(default_factory=StoreConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    install_paths: dict[str, str] = field(default_factory=_empty_install_paths)

    def install_path_for(self, game_id: str) -> str | None:
        """Configured mod install root for a game, if any."""
        return self.install_paths.get(game_id)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        store: StrDict = get_table(data, "store") or {}
        registry: StrDict = get_table(data, "registry") or {}
        install_paths: StrDict = get_table(data, "install_paths") or {}

        paths: dict[str, str] = {}
        for game_id in install_paths:
            value = get_str(install_paths, game_id)
            if value is None:
                raise ValueError(f"install_paths.{game_id} must be a non-empty string")
            paths[game_id] = value

        return cls(
            store=StoreConfig(path=get_str(store, "path")),
            registry=RegistryConfig(
                hive=get_str(registry, "hive") or REGISTRY_HIVE,
                key=get_str(registry, "key") or REGISTRY_KEY,
                name=get_str(registry, "name") or REGISTRY_VALUE,
            ),
            install_paths=paths,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config, treating a missing file as the default config.

    Unlike load_config, only an absent file falls back; a file that exists
    but is malformed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
