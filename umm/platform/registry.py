"""Read-only access to the OS key-value registry.

On Windows this is the real registry via winreg. Elsewhere there is no
registry, so NullRegistry answers "absent" for every lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .detection import is_windows

__all__ = [
    "RegistryAccessor",
    "WindowsRegistry",
    "NullRegistry",
    "MockRegistry",
    "default_registry",
]


class RegistryAccessor(Protocol):
    """Protocol for registry lookups.

    get() returns the value as a string, or None when the key or value does
    not exist. Other OS failures surface as OSError.
    """

    def get(self, hive: str, key: str, name: str) -> str | None: ...


class WindowsRegistry:
    """Registry accessor backed by winreg."""

    def get(self, hive: str, key: str, name: str) -> str | None:
        import winreg

        hive_handle = getattr(winreg, hive, None)
        if not isinstance(hive_handle, int):
            raise OSError(f"Unknown registry hive: {hive}")

        try:
            with winreg.OpenKey(hive_handle, key) as handle:
                value, _kind = winreg.QueryValueEx(handle, name)
        except FileNotFoundError:
            return None

        if value is None:
            return None
        return str(value)


class NullRegistry:
    """Registry accessor for platforms without a registry."""

    def get(self, hive: str, key: str, name: str) -> str | None:
        return None


def _empty_values() -> dict[tuple[str, str, str], str]:
    return {}


@dataclass
class MockRegistry:
    """Dict-backed registry for tests.

    Keys are (hive, key, name) tuples. Set `error` to make every lookup
    raise it.
    """

    values: dict[tuple[str, str, str], str] = field(default_factory=_empty_values)
    error: OSError | None = None

    def set(self, hive: str, key: str, name: str, value: str) -> None:
        self.values[(hive, key, name)] = value

    def get(self, hive: str, key: str, name: str) -> str | None:
        if self.error is not None:
            raise self.error
        return self.values.get((hive, key, name))


def default_registry() -> RegistryAccessor:
    """Registry accessor for the current platform."""
    if is_windows():
        return WindowsRegistry()
    return NullRegistry()
