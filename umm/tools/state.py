"""Host configuration store - registered tools and mod install paths.

The host owns this state; the integration only reads tool tables and
upserts single records. Layout of the persisted state:

    {
      "settings": {
        "gameMode": {"<gameId>": {"tools": {"<toolId>": {...record...}}}},
        "mods": {"installPath": {"<gameId>": "<dir>"}}
      }
    }

Write failures are not caught here: an OSError from the JSON store reaches
the caller unchanged.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from umm.core.structured import StrDict, as_str_dict, get_path, get_str
from umm.platform.files import atomic_write_text
from umm.tools.record import ToolRecord

__all__ = [
    "ConfigStore",
    "JsonConfigStore",
    "MemoryConfigStore",
    "StoreError",
    "StoreWrite",
]


class StoreError(Exception):
    """Persisted host state exists but cannot be used."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigStore(Protocol):
    """Read/upsert primitives over the host's persisted state."""

    def get_tools(self, game_id: str) -> dict[str, StrDict] | None:
        """Tools table for game_id, or None if the game has none yet."""
        ...

    def upsert_tool(self, game_id: str, tool_id: str, record: ToolRecord) -> None:
        """Insert or replace a single tool record."""
        ...

    def install_path(self, game_id: str) -> str | None:
        """Mod install root the host uses for game_id, if configured."""
        ...


def _tools_table(state: StrDict, game_id: str) -> dict[str, StrDict] | None:
    table = as_str_dict(get_path(state, ("settings", "gameMode", game_id, "tools")))
    if table is None:
        return None
    tools: dict[str, StrDict] = {}
    for tool_id, entry in table.items():
        entry_dict = as_str_dict(entry)
        if entry_dict is not None:
            tools[tool_id] = entry_dict
    return tools


def _install_path(state: StrDict, game_id: str) -> str | None:
    paths = as_str_dict(get_path(state, ("settings", "mods", "installPath")))
    if paths is None:
        return None
    return get_str(paths, game_id)


def _ensure_table(state: StrDict, keys: tuple[str, ...]) -> StrDict:
    """Walk nested tables along keys, creating missing or non-table levels."""
    node = state
    for key in keys:
        child = as_str_dict(node.get(key))
        if child is None:
            child = {}
            node[key] = child
        node = child
    return node


def _set_tool(state: StrDict, game_id: str, tool_id: str, record: ToolRecord) -> None:
    tools = _ensure_table(state, ("settings", "gameMode", game_id, "tools"))
    tools[tool_id] = record.to_dict()


@dataclass(frozen=True, slots=True)
class StoreWrite:
    """One upsert recorded by MemoryConfigStore."""

    game_id: str
    tool_id: str
    record: ToolRecord


def _empty_state() -> StrDict:
    return {}


def _empty_writes() -> list[StoreWrite]:
    return []


@dataclass
class MemoryConfigStore:
    """In-memory store that records every write.

    Use in tests to assert how many writes a reconciliation performed.
    Set write_error to make upserts fail like a broken disk would.
    """

    state: StrDict = field(default_factory=_empty_state)
    writes: list[StoreWrite] = field(default_factory=_empty_writes)
    write_error: OSError | None = None

    def get_tools(self, game_id: str) -> dict[str, StrDict] | None:
        tools = _tools_table(self.state, game_id)
        return copy.deepcopy(tools) if tools is not None else None

    def upsert_tool(self, game_id: str, tool_id: str, record: ToolRecord) -> None:
        if self.write_error is not None:
            raise self.write_error
        _set_tool(self.state, game_id, tool_id, record)
        self.writes.append(StoreWrite(game_id=game_id, tool_id=tool_id, record=record))

    def install_path(self, game_id: str) -> str | None:
        return _install_path(self.state, game_id)

    def set_install_path(self, game_id: str, path: str) -> None:
        _ensure_table(self.state, ("settings", "mods", "installPath"))[game_id] = path


class JsonConfigStore:
    """Host state persisted as a JSON file.

    Each operation re-reads the file, so concurrent writers for the same
    game resolve as last-writer-wins.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> StrDict:
        if not self._path.exists():
            return {}
        try:
            data: object = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StoreError(f"Corrupted state file: {e}", path=self._path) from e
        state = as_str_dict(data)
        if state is None:
            raise StoreError("State root must be a JSON object", path=self._path)
        return state

    def get_tools(self, game_id: str) -> dict[str, StrDict] | None:
        return _tools_table(self._load(), game_id)

    def upsert_tool(self, game_id: str, tool_id: str, record: ToolRecord) -> None:
        state = self._load()
        _set_tool(state, game_id, tool_id, record)
        atomic_write_text(self._path, json.dumps(state, indent=2) + "\n", encoding="utf-8")

    def install_path(self, game_id: str) -> str | None:
        return _install_path(self._load(), game_id)
