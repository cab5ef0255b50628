"""Tests for tools/plan.py - Install planning."""

import pytest

from umm.tools.plan import (
    AnchorNotFoundError,
    Instruction,
    InstallPlanBuilder,
    build_instructions,
    expected_destination,
)
from umm.tools.registry import ReconcileOutcome, ToolRegistry
from umm.tools.state import MemoryConfigStore


class TestBuildInstructions:
    """Tests for build_instructions()."""

    def test_rebases_on_anchor(self) -> None:
        files = ["Mods/Foo/UnityModManager.exe", "Mods/Foo/data.bin"]
        instructions = build_instructions(files)

        assert [i.destination for i in instructions] == ["UnityModManager.exe", "data.bin"]
        assert [i.source for i in instructions] == files
        assert all(i.type == "copy" for i in instructions)

    def test_preserves_sibling_directories(self) -> None:
        files = [
            "UMM-0.22/Tools/UnityModManager.exe",
            "UMM-0.22/Tools/UnityModManager.exe.config",
            "UMM-0.22/Tools/Games/dawnofman/config.xml",
            "UMM-0.22/Tools/Libs/dnlib.dll",
        ]
        destinations = [i.destination for i in build_instructions(files)]
        assert destinations == [
            "UnityModManager.exe",
            "UnityModManager.exe.config",
            "Games/dawnofman/config.xml",
            "Libs/dnlib.dll",
        ]

    def test_anchor_at_root(self) -> None:
        files = ["UnityModManager.exe", "readme.txt"]
        assert [i.destination for i in build_instructions(files)] == files

    def test_windows_separators(self) -> None:
        files = ["UMM\\UnityModManager.exe", "UMM\\Libs\\a.dll"]
        destinations = [i.destination for i in build_instructions(files)]
        assert destinations == ["UnityModManager.exe", "Libs\\a.dll"]

    def test_anchor_case_differs(self) -> None:
        files = ["umm/unitymodmanager.exe", "umm/data.bin"]
        destinations = [i.destination for i in build_instructions(files)]
        assert destinations == ["unitymodmanager.exe", "data.bin"]

    def test_one_instruction_per_file_and_prefix_roundtrip(self) -> None:
        files = [
            "pack/v1/readme.md",
            "pack/v1/UnityModManager.exe",
            "pack/v1/Libs/0Harmony.dll",
        ]
        instructions = build_instructions(files)
        assert len(instructions) == len(files)

        prefix = "pack/v1/"
        for instruction in instructions:
            assert instruction.source is not None
            assert instruction.destination is not None
            assert instruction.source.endswith(instruction.destination)
            assert prefix + instruction.destination == instruction.source

    def test_first_anchor_defines_offset(self) -> None:
        files = ["a/UnityModManager.exe", "a/b/UnityModManager.exe"]
        destinations = [i.destination for i in build_instructions(files)]
        assert destinations == ["UnityModManager.exe", "b/UnityModManager.exe"]

    def test_no_anchor_raises(self) -> None:
        with pytest.raises(AnchorNotFoundError) as exc:
            build_instructions(["Mods/Foo/data.bin"])
        assert exc.value.files_count == 1

    def test_empty_payload_raises(self) -> None:
        with pytest.raises(AnchorNotFoundError):
            build_instructions([])


class TestExpectedDestination:
    """Tests for expected_destination()."""

    def test_strips_installing_suffix(self) -> None:
        result = expected_destination("/mods/dawnofman", "/staging/UMM-0.22.installing")
        assert result == "/mods/dawnofman/UMM-0.22"

    def test_without_suffix(self) -> None:
        assert expected_destination("/mods", "/staging/UMM") == "/mods/UMM"

    def test_windows_paths(self) -> None:
        result = expected_destination("C:\\Mods\\dawnofman", "C:\\Mods\\dawnofman\\UMM.installing")
        assert result == "C:\\Mods\\dawnofman\\UMM"

    def test_trailing_separator(self) -> None:
        assert expected_destination("/mods", "/staging/UMM.installing/") == "/mods/UMM"


class TestInstruction:
    """Tests for Instruction."""

    def test_copy(self) -> None:
        instruction = Instruction.copy("a/b.txt", "b.txt")
        assert instruction.is_copy
        assert instruction.to_dict() == {
            "type": "copy",
            "source": "a/b.txt",
            "destination": "b.txt",
        }

    def test_non_copy_to_dict(self) -> None:
        instruction = Instruction(type="setmodtype")
        assert not instruction.is_copy
        assert instruction.to_dict() == {"type": "setmodtype"}


class TestInstallPlanBuilder:
    """Tests for InstallPlanBuilder."""

    def test_build_registers_tool(self) -> None:
        store = MemoryConfigStore()
        builder = InstallPlanBuilder(ToolRegistry(store), lambda game_id: f"/mods/{game_id}")

        plan = builder.build(
            ["Mods/Foo/UnityModManager.exe", "Mods/Foo/data.bin"],
            "/staging/UMM.installing",
            "dawnofman",
        )

        assert plan.install_dir == "/mods/dawnofman/UMM"
        assert [i.destination for i in plan.instructions] == ["UnityModManager.exe", "data.bin"]
        assert plan.reconciliation.outcome is ReconcileOutcome.CREATED
        assert len(store.writes) == 1
        assert store.writes[0].record.path == "/mods/dawnofman/UMM/UnityModManager.exe"

    def test_reinstall_same_place_no_write(self) -> None:
        store = MemoryConfigStore()
        builder = InstallPlanBuilder(ToolRegistry(store), lambda _game_id: "/mods")
        files = ["UnityModManager.exe"]

        builder.build(files, "/staging/UMM.installing", "dawnofman")
        plan = builder.build(files, "/staging/UMM.installing", "dawnofman")

        assert plan.reconciliation.outcome is ReconcileOutcome.UNCHANGED
        assert len(store.writes) == 1

    def test_no_anchor_does_not_touch_store(self) -> None:
        store = MemoryConfigStore()
        builder = InstallPlanBuilder(ToolRegistry(store), lambda _game_id: "/mods")

        with pytest.raises(AnchorNotFoundError):
            builder.build(["readme.txt"], "/staging/x.installing", "dawnofman")
        assert store.writes == []
