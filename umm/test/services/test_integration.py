"""Tests for umm.services.integration - hooks end to end."""

from __future__ import annotations

from pathlib import Path

import pytest

from umm.core.config import REGISTRY_HIVE, REGISTRY_KEY, REGISTRY_VALUE, Config
from umm.core.result import Err, Ok
from umm.output.console import MockConsole, Style
from umm.platform.registry import MockRegistry
from umm.services.integration import IntegrationService
from umm.tools.plan import AnchorNotFoundError
from umm.tools.probe import ProbeReason
from umm.tools.registry import ReconcileOutcome
from umm.tools.state import MemoryConfigStore

PAYLOAD = ["Mods/Foo/UnityModManager.exe", "Mods/Foo/data.bin"]


def _service(
    *,
    store: MemoryConfigStore | None = None,
    registry_value: str | None = None,
    existing: set[str] | None = None,
    config: Config | None = None,
) -> tuple[IntegrationService, MemoryConfigStore, MockConsole]:
    store = store or MemoryConfigStore()
    registry = MockRegistry()
    if registry_value is not None:
        registry.set(REGISTRY_HIVE, REGISTRY_KEY, REGISTRY_VALUE, registry_value)
    console = MockConsole()
    known = existing or set()
    service = IntegrationService(
        store=store,
        registry=registry,
        config=config or Config(),
        console=console,
        exists=lambda path: path in known,
    )
    return service, store, console


class TestInstallerScenarios:
    """Detection and install through the installer hooks."""

    def test_supported_payload(self) -> None:
        service, store, console = _service()
        store.set_install_path("dawnofman", "/mods/dawnofman")

        assert service.test(PAYLOAD, "dawnofman").supported is True

        output = service.install(PAYLOAD, "/mods/dawnofman/UMM.installing", "dawnofman")
        assert [i.destination for i in output.instructions] == ["UnityModManager.exe", "data.bin"]
        assert service.classify(output.instructions) is True

        records = service.registered_tools("dawnofman")
        assert [r.path for r in records] == ["/mods/dawnofman/UMM/UnityModManager.exe"]
        assert any(o.style == Style.SUCCESS for o in console.outputs)

    def test_unsupported_game(self) -> None:
        service, store, _console = _service()

        result = service.test(PAYLOAD, "unsupported_game")

        assert result.supported is False
        assert result.required_files == ()
        assert store.writes == []

    def test_install_without_anchor_raises(self) -> None:
        service, store, _console = _service()
        with pytest.raises(AnchorNotFoundError):
            service.install(["Mods/Foo/data.bin"], "/x.installing", "dawnofman")
        assert store.writes == []

    def test_reinstall_elsewhere_moves_record(self) -> None:
        service, store, console = _service()
        store.set_install_path("dawnofman", "/mods")

        service.install(PAYLOAD, "/mods/UMM-1.installing", "dawnofman")
        service.install(PAYLOAD, "/mods/UMM-2.installing", "dawnofman")

        assert len(store.writes) == 2
        assert {w.tool_id for w in store.writes} == {"UnityModManager"}
        assert store.writes[-1].record.working_directory == "/mods/UMM-2"
        assert "info: dawnofman: UnityModManager moved to /mods/UMM-2" in console.messages


class TestInstallRoot:
    """Resolution order of the mod install root."""

    def test_store_wins(self) -> None:
        config = Config(install_paths={"dawnofman": "/from-config"})
        service, store, _console = _service(config=config)
        store.set_install_path("dawnofman", "/from-store")
        assert service.install_root("dawnofman") == "/from-store"

    def test_config_second(self) -> None:
        config = Config(install_paths={"dawnofman": "/from-config"})
        service, _store, _console = _service(config=config)
        assert service.install_root("dawnofman") == "/from-config"

    def test_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        import umm.services.integration as integration_mod

        monkeypatch.setattr(integration_mod, "user_data_dir", lambda: tmp_path)
        service, _store, _console = _service()
        assert service.install_root("gardenpaws") == str(tmp_path / "gardenpaws" / "mods")


class TestModTypeHooks:
    def test_matches(self) -> None:
        service, _store, _console = _service()
        assert service.matches("oxygennotincluded")
        assert not service.matches("skyrim")

    def test_get_path(self) -> None:
        service, _store, _console = _service()
        assert service.get_path("dawnofman") is None


class TestActivationScenarios:
    """Registry probe on game activation."""

    def test_probe_creates_record(self) -> None:
        service, store, _console = _service(
            registry_value="C:\\Tools\\UMM",
            existing={"C:\\Tools\\UMM\\UnityModManager.exe"},
        )

        result = service.on_gamemode_activated("dawnofman")

        assert isinstance(result, Ok)
        assert result.value.outcome is ReconcileOutcome.CREATED
        assert len(store.writes) == 1
        assert store.writes[0].tool_id == "UnityModManager"
        assert store.writes[0].record.install_directory == "C:\\Tools\\UMM"

    def test_probe_anchor_missing_no_write(self) -> None:
        service, store, console = _service(registry_value="C:\\Tools\\UMM")

        result = service.on_gamemode_activated("dawnofman")

        assert isinstance(result, Err)
        assert result.error.reason is ProbeReason.ANCHOR_MISSING
        assert store.writes == []
        assert console.outputs == []

    def test_probe_unsupported_game(self) -> None:
        service, store, _console = _service(
            registry_value="C:\\Tools\\UMM",
            existing={"C:\\Tools\\UMM\\UnityModManager.exe"},
        )
        result = service.on_gamemode_activated("skyrim")
        assert isinstance(result, Err)
        assert store.writes == []

    def test_probe_after_install_in_same_place(self) -> None:
        service, store, console = _service(
            registry_value="/mods/UMM",
            existing={"/mods/UMM/UnityModManager.exe"},
        )
        store.set_install_path("dawnofman", "/mods")
        service.install(PAYLOAD, "/mods/UMM.installing", "dawnofman")

        result = service.on_gamemode_activated("dawnofman")

        assert isinstance(result, Ok)
        assert result.value.outcome is ReconcileOutcome.UNCHANGED
        assert len(store.writes) == 1
        assert console.outputs[-1].style == Style.DIM

    def test_store_failure_is_not_swallowed(self) -> None:
        service, _store, _console = _service(
            store=MemoryConfigStore(write_error=OSError("read-only state")),
            registry_value="/umm",
            existing={"/umm/UnityModManager.exe"},
        )
        with pytest.raises(OSError, match="read-only state"):
            service.on_gamemode_activated("dawnofman")
