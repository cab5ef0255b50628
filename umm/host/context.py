"""Extension context - what the host hands an extension at load time.

Extensions register installers and mod types here and subscribe to
lifecycle events through `events`. Callbacks passed to once() run a single
time, after every extension has been initialized.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from umm.host.events import EventBus
from umm.tools.classifier import SupportedResult
from umm.tools.plan import Instruction

__all__ = [
    "ExtensionContext",
    "InstallOutput",
    "InstallerRegistration",
    "ModTypeRegistration",
]


@dataclass(frozen=True, slots=True)
class InstallOutput:
    """What an installer's install hook returns to the host."""

    instructions: tuple[Instruction, ...]

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {"instructions": [instruction.to_dict() for instruction in self.instructions]}


TestHook: TypeAlias = Callable[[Sequence[str], str], SupportedResult]
InstallHook: TypeAlias = Callable[[Sequence[str], str, str], InstallOutput]


@dataclass(frozen=True, slots=True)
class InstallerRegistration:
    """An installer: test() decides, install() produces instructions."""

    id: str
    priority: int
    test: TestHook
    install: InstallHook


@dataclass(frozen=True, slots=True)
class ModTypeRegistration:
    """A deployment category for mods."""

    id: str
    priority: int
    matches: Callable[[str], bool]
    get_path: Callable[[str], str | None]
    classify: Callable[[Sequence[Instruction]], bool]


def _empty_installers() -> list[InstallerRegistration]:
    return []


def _empty_mod_types() -> list[ModTypeRegistration]:
    return []


def _empty_callbacks() -> list[Callable[[], None]]:
    return []


@dataclass
class ExtensionContext:
    """Registration surface offered by the host."""

    events: EventBus = field(default_factory=EventBus)
    installers: list[InstallerRegistration] = field(default_factory=_empty_installers)
    mod_types: list[ModTypeRegistration] = field(default_factory=_empty_mod_types)
    _once: list[Callable[[], None]] = field(default_factory=_empty_callbacks)

    def register_installer(
        self,
        installer_id: str,
        priority: int,
        test: TestHook,
        install: InstallHook,
    ) -> None:
        self.installers.append(InstallerRegistration(installer_id, priority, test, install))

    def register_mod_type(
        self,
        mod_type_id: str,
        priority: int,
        matches: Callable[[str], bool],
        get_path: Callable[[str], str | None],
        classify: Callable[[Sequence[Instruction]], bool],
    ) -> None:
        self.mod_types.append(
            ModTypeRegistration(mod_type_id, priority, matches, get_path, classify)
        )

    def once(self, callback: Callable[[], None]) -> None:
        """Queue callback to run after all extensions are initialized."""
        self._once.append(callback)

    def run_once(self) -> int:
        """Run and clear queued once() callbacks. Returns how many ran."""
        callbacks, self._once = self._once, []
        for callback in callbacks:
            callback()
        return len(callbacks)

    def installer(self, installer_id: str) -> InstallerRegistration | None:
        return next((i for i in self.installers if i.id == installer_id), None)

    def mod_type(self, mod_type_id: str) -> ModTypeRegistration | None:
        return next((m for m in self.mod_types if m.id == mod_type_id), None)
