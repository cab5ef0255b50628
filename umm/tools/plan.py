"""Install planning - rebase a UMM payload so the executable lands at the mod root.

Archives ship UMM nested at arbitrary depth ("Mods/UMM-0.22/UnityModManager.exe").
Every payload path is cut at the offset where the executable's name starts
in the anchor path, so the executable ends up directly under the install
root and its siblings keep their position relative to it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from umm.tools.matcher import anchor_offset, basename, find_anchor, join_path
from umm.tools.record import DEFAULT_TOOL_ID
from umm.tools.registry import Reconciliation, ToolRegistry

__all__ = [
    "INSTALLING_SUFFIX",
    "AnchorNotFoundError",
    "Instruction",
    "InstallPlan",
    "InstallPlanBuilder",
    "build_instructions",
    "expected_destination",
]

# Suffix the host appends to a mod directory while it is being installed
INSTALLING_SUFFIX = ".installing"


class AnchorNotFoundError(LookupError):
    """Install was requested for a payload without the UMM executable.

    The installer test hook should have rejected such a payload, so this
    signals a bug upstream rather than bad user input.
    """

    def __init__(self, files_count: int) -> None:
        super().__init__(f"UnityModManager.exe not found among {files_count} payload files")
        self.files_count = files_count


@dataclass(frozen=True, slots=True)
class Instruction:
    """A host install instruction.

    Attributes:
        type: Instruction kind ("copy" for everything this installer emits)
        source: Path inside the payload
        destination: Path relative to the mod install directory
    """

    type: str
    source: str | None = None
    destination: str | None = None

    @classmethod
    def copy(cls, source: str, destination: str) -> Instruction:
        return cls(type="copy", source=source, destination=destination)

    @property
    def is_copy(self) -> bool:
        return self.type == "copy"

    def to_dict(self) -> dict[str, str]:
        data = {"type": self.type}
        if self.source is not None:
            data["source"] = self.source
        if self.destination is not None:
            data["destination"] = self.destination
        return data


@dataclass(frozen=True, slots=True)
class InstallPlan:
    """Result of planning a UMM install.

    Attributes:
        instructions: One copy instruction per payload path, in payload order
        install_dir: Directory UMM will live in once the host finishes
        reconciliation: What happened to the tool record
    """

    instructions: tuple[Instruction, ...]
    install_dir: str
    reconciliation: Reconciliation


def build_instructions(files: Sequence[str]) -> list[Instruction]:
    """Copy instructions rebasing every file on the UMM executable.

    Raises:
        AnchorNotFoundError: No path in files is the UMM executable
    """
    anchor = find_anchor(files)
    if anchor is None:
        raise AnchorNotFoundError(len(files))

    offset = anchor_offset(anchor)
    return [Instruction.copy(source=file, destination=file[offset:]) for file in files]


def expected_destination(install_root: str, destination_path: str) -> str:
    """Final mod directory for a host staging path.

    The host stages into "<name>.installing" and renames it to "<name>"
    under the game's install root once all instructions succeed.
    """
    name = basename(destination_path.rstrip("\\/")).removesuffix(INSTALLING_SUFFIX)
    return join_path(install_root, name)


class InstallPlanBuilder:
    """Builds install plans and keeps the UMM tool record in step with them."""

    def __init__(
        self,
        registry: ToolRegistry,
        install_root: Callable[[str], str],
    ) -> None:
        """Initialize the builder.

        Args:
            registry: Tool registry to reconcile after planning
            install_root: Maps a game id to its mod install root
        """
        self._registry = registry
        self._install_root = install_root

    def build(self, files: Sequence[str], destination_path: str, game_id: str) -> InstallPlan:
        """Plan the install and record UMM's final directory.

        The tool record is reconciled before the plan is returned: the
        install is not complete until the record is consistent.

        Raises:
            AnchorNotFoundError: No path in files is the UMM executable
        """
        instructions = build_instructions(files)
        install_dir = expected_destination(self._install_root(game_id), destination_path)
        reconciliation = self._registry.reconcile(install_dir, game_id, DEFAULT_TOOL_ID)
        return InstallPlan(
            instructions=tuple(instructions),
            install_dir=install_dir,
            reconciliation=reconciliation,
        )
