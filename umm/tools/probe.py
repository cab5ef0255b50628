"""Recovery of UMM installations made outside the mod manager.

Unity Mod Manager records its location in the registry when it runs. The
probe reads that value, checks the executable is really there and only then
hands the directory to the tool registry. Every way of not finding UMM is an
expected outcome and comes back as ProbeUnavailable; store errors during
reconciliation are not caught.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from umm.core.config import RegistryConfig
from umm.core.result import Err, Ok, Result
from umm.platform.files import file_exists
from umm.platform.registry import RegistryAccessor
from umm.tools.games import is_supported
from umm.tools.matcher import UMM_EXE, join_path
from umm.tools.record import DEFAULT_TOOL_ID
from umm.tools.registry import Reconciliation, ToolRegistry

__all__ = ["ProbeReason", "ProbeUnavailable", "ExternalInstallProbe"]


class ProbeReason(Enum):
    UNSUPPORTED_GAME = "unsupported-game"
    KEY_MISSING = "key-missing"
    ANCHOR_MISSING = "anchor-missing"
    REGISTRY_ERROR = "registry-error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ProbeUnavailable:
    """UMM could not be located.

    Attributes:
        game_id: Game the probe ran for
        reason: Why nothing was found
        detail: Path checked or OS error text, when there is one
    """

    game_id: str
    reason: ProbeReason
    detail: str | None = None

    def __str__(self) -> str:
        if self.detail:
            return f"{self.reason} ({self.game_id}): {self.detail}"
        return f"{self.reason} ({self.game_id})"


class ExternalInstallProbe:
    """Finds a self-installed UMM through the OS registry."""

    def __init__(
        self,
        registry: RegistryAccessor,
        tools: ToolRegistry,
        *,
        location: RegistryConfig | None = None,
        exists: Callable[[str], bool] = file_exists,
    ) -> None:
        """Initialize the probe.

        Args:
            registry: OS registry accessor
            tools: Tool registry fed with validated directories
            location: Registry hive/key/value holding UMM's path
            exists: File existence check used to validate the path
        """
        self._registry = registry
        self._tools = tools
        self._location = location or RegistryConfig()
        self._exists = exists

    def locate(self, game_id: str) -> Result[str, ProbeUnavailable]:
        """Validated UMM directory for game_id, without touching the store."""
        if not is_supported(game_id):
            return Err(ProbeUnavailable(game_id, ProbeReason.UNSUPPORTED_GAME))

        loc = self._location
        try:
            value = self._registry.get(loc.hive, loc.key, loc.name)
        except OSError as e:
            return Err(ProbeUnavailable(game_id, ProbeReason.REGISTRY_ERROR, str(e)))

        directory = value.strip() if value else ""
        if not directory:
            return Err(
                ProbeUnavailable(game_id, ProbeReason.KEY_MISSING, f"{loc.hive}\\{loc.key}")
            )

        exe_path = join_path(directory, UMM_EXE)
        if not self._exists(exe_path):
            return Err(ProbeUnavailable(game_id, ProbeReason.ANCHOR_MISSING, exe_path))

        return Ok(directory)

    def run(self, game_id: str) -> Result[Reconciliation, ProbeUnavailable]:
        """Locate UMM and reconcile the tool record with what was found."""
        located = self.locate(game_id)
        if isinstance(located, Err):
            return located
        return Ok(self._tools.reconcile(located.value, game_id, DEFAULT_TOOL_ID))
