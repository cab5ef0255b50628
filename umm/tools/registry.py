"""Tool registry reconciliation.

Keeps the game's Unity Mod Manager tool record pointing at the directory
UMM was most recently resolved to:

- no tools table, or no record whose path is the UMM executable:
  create a record under the preferred id
- a record exists in the same directory: nothing is written
- a record exists elsewhere: rewrite it under its existing id, so settings
  the user attached to that id survive

Read-then-write is not atomic. Two reconciliations racing for the same game
end with the last writer's directory; the next lifecycle signal corrects a
stale one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from umm.tools.matcher import is_anchor, same_directory
from umm.tools.record import DEFAULT_TOOL_ID, ToolRecord
from umm.tools.state import ConfigStore

__all__ = ["ReconcileOutcome", "Reconciliation", "ToolRegistry"]


class ReconcileOutcome(Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Reconciliation:
    """What a reconcile() call did.

    Attributes:
        outcome: Whether a record was created, updated or left alone
        tool_id: Id of the record now describing UMM
        directory: Resolved UMM directory
    """

    outcome: ReconcileOutcome
    tool_id: str
    directory: str

    @property
    def wrote(self) -> bool:
        return self.outcome is not ReconcileOutcome.UNCHANGED


class ToolRegistry:
    """Reads and upserts UMM tool records through a ConfigStore."""

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    @property
    def store(self) -> ConfigStore:
        return self._store

    def records(self, game_id: str) -> list[ToolRecord]:
        """All tool records for game_id that carry a path."""
        tools = self._store.get_tools(game_id)
        if tools is None:
            return []
        parsed = (ToolRecord.from_dict(tool_id, entry) for tool_id, entry in tools.items())
        return [record for record in parsed if record is not None]

    def find_umm(self, game_id: str) -> tuple[str, ToolRecord] | None:
        """Table key and record of the UMM tool for game_id, if registered."""
        tools = self._store.get_tools(game_id)
        if tools is None:
            return None
        for tool_id, entry in tools.items():
            record = ToolRecord.from_dict(tool_id, entry)
            if record is not None and is_anchor(record.path):
                return tool_id, record
        return None

    def reconcile(
        self,
        resolved_directory: str,
        game_id: str,
        preferred_id: str = DEFAULT_TOOL_ID,
    ) -> Reconciliation:
        """Make the stored UMM record point at resolved_directory.

        Performs at most one store write. Store errors propagate unchanged.
        """
        existing = self.find_umm(game_id)
        if existing is None:
            self._store.upsert_tool(
                game_id, preferred_id, ToolRecord.for_directory(resolved_directory, preferred_id)
            )
            return Reconciliation(ReconcileOutcome.CREATED, preferred_id, resolved_directory)

        tool_id, record = existing
        if same_directory(record.install_directory, resolved_directory):
            return Reconciliation(ReconcileOutcome.UNCHANGED, tool_id, resolved_directory)

        self._store.upsert_tool(
            game_id, tool_id, ToolRecord.for_directory(resolved_directory, tool_id)
        )
        return Reconciliation(ReconcileOutcome.UPDATED, tool_id, resolved_directory)
