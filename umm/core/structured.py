"""Helpers for reading untyped structures (TOML tables, JSON state).

The host state file and config.toml are both user-editable, so every value
read from them is validated and narrowed here rather than trusted.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_bool(table: Mapping[str, object], key: str, default: bool = False) -> bool:
    value = table.get(key)
    if isinstance(value, bool):
        return value
    return default


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    return as_str_dict(table.get(key))


def get_path(table: Mapping[str, object], keys: tuple[str, ...]) -> object | None:
    """Walk nested tables along keys; None as soon as a level is missing."""
    current: object = table
    for key in keys:
        current_table = as_str_dict(current)
        if current_table is None or key not in current_table:
            return None
        current = current_table[key]
    return current


def get_str_list(table: Mapping[str, object], key: str) -> list[str]:
    """Get a list of strings, dropping non-string items."""
    value = table.get(key)
    if not isinstance(value, list):
        return []
    items = cast(list[object], value)
    return [item for item in items if isinstance(item, str)]
