"""Tests for umm.host.context module."""

from umm.host.context import ExtensionContext, InstallOutput
from umm.tools.classifier import SupportedResult
from umm.tools.plan import Instruction


def test_register_installer() -> None:
    context = ExtensionContext()
    context.register_installer(
        "my-installer",
        20,
        lambda files, game_id: SupportedResult(supported=True),
        lambda files, destination, game_id: InstallOutput(instructions=()),
    )

    installer = context.installer("my-installer")
    assert installer is not None
    assert installer.priority == 20
    assert installer.test([], "x").supported
    assert context.installer("other") is None


def test_register_mod_type() -> None:
    context = ExtensionContext()
    context.register_mod_type("t", 5, lambda g: g == "a", lambda g: None, lambda i: False)

    mod_type = context.mod_type("t")
    assert mod_type is not None
    assert mod_type.matches("a")
    assert mod_type.get_path("a") is None


def test_once_runs_a_single_time() -> None:
    context = ExtensionContext()
    calls: list[int] = []
    context.once(lambda: calls.append(1))

    assert calls == []
    assert context.run_once() == 1
    assert context.run_once() == 0
    assert calls == [1]


def test_install_output_to_dict() -> None:
    instruction = Instruction.copy("a/UnityModManager.exe", "UnityModManager.exe")
    output = InstallOutput(instructions=(instruction,))
    assert output.to_dict() == {
        "instructions": [
            {
                "type": "copy",
                "source": "a/UnityModManager.exe",
                "destination": "UnityModManager.exe",
            }
        ]
    }
