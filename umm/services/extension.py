"""Registers the Unity Mod Manager hooks with a host."""

from __future__ import annotations

from umm.host.context import ExtensionContext
from umm.host.events import GAMEMODE_ACTIVATED
from umm.services.integration import IntegrationService
from umm.tools.modtype import MOD_TYPE_ID, MOD_TYPE_PRIORITY

__all__ = ["INSTALLER_ID", "INSTALLER_PRIORITY", "init_extension"]

INSTALLER_ID = "umm-installer"
INSTALLER_PRIORITY = 15


def init_extension(context: ExtensionContext, service: IntegrationService) -> bool:
    """Register the installer, the mod type and the activation handler.

    UMM is portable and may have moved since the last session, so the
    registry probe runs on every game activation, not just the first.
    """
    context.register_installer(INSTALLER_ID, INSTALLER_PRIORITY, service.test, service.install)
    context.register_mod_type(
        MOD_TYPE_ID,
        MOD_TYPE_PRIORITY,
        service.matches,
        service.get_path,
        service.classify,
    )

    def on_activated(game_id: str) -> None:
        # ProbeUnavailable is an expected outcome; store errors still raise
        service.on_gamemode_activated(game_id)

    context.once(lambda: context.events.on(GAMEMODE_ACTIVATED, on_activated))
    return True
