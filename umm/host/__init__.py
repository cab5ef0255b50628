"""Host-facing contracts: lifecycle events and extension registration."""

from umm.host.context import (
    ExtensionContext,
    InstallerRegistration,
    InstallOutput,
    ModTypeRegistration,
)
from umm.host.events import GAMEMODE_ACTIVATED, EventBus

__all__ = [
    "GAMEMODE_ACTIVATED",
    "EventBus",
    "ExtensionContext",
    "InstallOutput",
    "InstallerRegistration",
    "ModTypeRegistration",
]
