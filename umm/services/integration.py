from __future__ import annotations

from collections.abc import Callable, Sequence

from umm.core.config import Config
from umm.core.result import Ok, Result
from umm.host.context import InstallOutput
from umm.output.console import ConsoleProtocol, Style
from umm.platform.files import file_exists
from umm.platform.paths import user_data_dir
from umm.platform.registry import RegistryAccessor
from umm.tools.classifier import SupportedResult, classify_payload
from umm.tools.games import is_supported
from umm.tools.modtype import is_umm_mod
from umm.tools.plan import InstallPlan, InstallPlanBuilder, Instruction
from umm.tools.probe import ExternalInstallProbe, ProbeUnavailable
from umm.tools.record import ToolRecord
from umm.tools.registry import ReconcileOutcome, Reconciliation, ToolRegistry
from umm.tools.state import ConfigStore


class IntegrationService:
    """Unity Mod Manager hooks bound to their collaborators.

    Every collaborator is injected; nothing here reaches for process-wide
    state. Hook methods are safe to call for different games concurrently.
    """

    def __init__(
        self,
        *,
        store: ConfigStore,
        registry: RegistryAccessor,
        config: Config,
        console: ConsoleProtocol,
        exists: Callable[[str], bool] = file_exists,
    ) -> None:
        self._store = store
        self._config = config
        self._console = console

        self._tools = ToolRegistry(store)
        self._planner = InstallPlanBuilder(self._tools, self.install_root)
        self._probe = ExternalInstallProbe(
            registry,
            self._tools,
            location=config.registry,
            exists=exists,
        )

    @property
    def tools(self) -> ToolRegistry:
        return self._tools

    def install_root(self, game_id: str) -> str:
        """Mod install root: host state, then config.toml, then the default."""
        from_store = self._store.install_path(game_id)
        if from_store:
            return from_store
        from_config = self._config.install_path_for(game_id)
        if from_config:
            return from_config
        return str(user_data_dir() / game_id / "mods")

    # Installer hooks

    def test(self, files: Sequence[str], game_id: str) -> SupportedResult:
        return classify_payload(files, game_id)

    def plan(self, files: Sequence[str], destination_path: str, game_id: str) -> InstallPlan:
        plan = self._planner.build(files, destination_path, game_id)
        self._report(game_id, plan.reconciliation)
        return plan

    def install(self, files: Sequence[str], destination_path: str, game_id: str) -> InstallOutput:
        return InstallOutput(instructions=self.plan(files, destination_path, game_id).instructions)

    # Mod type hooks

    def matches(self, game_id: str) -> bool:
        return is_supported(game_id)

    def get_path(self, game_id: str) -> str | None:
        # The host's default deployment path is used
        return None

    def classify(self, instructions: Sequence[Instruction]) -> bool:
        return is_umm_mod(instructions)

    # Lifecycle

    def on_gamemode_activated(self, game_id: str) -> Result[Reconciliation, ProbeUnavailable]:
        """Pick up a UMM installed outside the mod manager.

        Not finding one is the normal case and produces no output.
        """
        result = self._probe.run(game_id)
        if isinstance(result, Ok):
            self._report(game_id, result.value)
        return result

    def registered_tools(self, game_id: str) -> list[ToolRecord]:
        return self._tools.records(game_id)

    def _report(self, game_id: str, reconciliation: Reconciliation) -> None:
        match reconciliation.outcome:
            case ReconcileOutcome.CREATED:
                self._console.success(
                    f"{game_id}: registered Unity Mod Manager at {reconciliation.directory}"
                )
            case ReconcileOutcome.UPDATED:
                self._console.info(
                    f"{game_id}: {reconciliation.tool_id} moved to {reconciliation.directory}"
                )
            case ReconcileOutcome.UNCHANGED:
                self._console.print(
                    f"{game_id}: {reconciliation.tool_id} already at {reconciliation.directory}",
                    Style.DIM,
                )
