"""Unity Mod Manager detection, install planning and tool registration.

- Anchor matching (matcher.py) and supported games (games.py)
- Payload detection (classifier.py)
- Install planning (plan.py)
- Tool records, host state store and reconciliation (record.py, state.py, registry.py)
- Registry probe for self-installed UMM (probe.py)
- Mod type classification (modtype.py)
"""

from umm.tools.classifier import SupportedResult, classify_payload, is_umm_payload
from umm.tools.games import SUPPORTED_GAMES, is_supported
from umm.tools.matcher import UMM_EXE, find_anchor, is_anchor
from umm.tools.modtype import MOD_TYPE_ID, is_umm_mod
from umm.tools.plan import (
    AnchorNotFoundError,
    InstallPlan,
    InstallPlanBuilder,
    Instruction,
    build_instructions,
    expected_destination,
)
from umm.tools.probe import ExternalInstallProbe, ProbeReason, ProbeUnavailable
from umm.tools.record import DEFAULT_TOOL_ID, ToolRecord
from umm.tools.registry import ReconcileOutcome, Reconciliation, ToolRegistry
from umm.tools.state import ConfigStore, JsonConfigStore, MemoryConfigStore, StoreError

__all__ = [
    # Matching
    "UMM_EXE",
    "is_anchor",
    "find_anchor",
    "SUPPORTED_GAMES",
    "is_supported",
    # Detection
    "SupportedResult",
    "classify_payload",
    "is_umm_payload",
    # Planning
    "AnchorNotFoundError",
    "Instruction",
    "InstallPlan",
    "InstallPlanBuilder",
    "build_instructions",
    "expected_destination",
    # Records and state
    "DEFAULT_TOOL_ID",
    "ToolRecord",
    "ConfigStore",
    "JsonConfigStore",
    "MemoryConfigStore",
    "StoreError",
    "ReconcileOutcome",
    "Reconciliation",
    "ToolRegistry",
    # Probe
    "ExternalInstallProbe",
    "ProbeReason",
    "ProbeUnavailable",
    # Mod type
    "MOD_TYPE_ID",
    "is_umm_mod",
]
