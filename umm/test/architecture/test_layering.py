from __future__ import annotations

import ast
import os
from pathlib import Path

import pytest


def _require_arch_checks_enabled() -> None:
    if os.getenv("UMM_ARCH_CHECKS") != "1":
        pytest.skip("architecture checks are advisory; set UMM_ARCH_CHECKS=1 to enable")


def _umm_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _python_files(base: Path) -> list[Path]:
    return [p for p in sorted(base.rglob("*.py")) if "__pycache__" not in p.parts]


def _imports(path: Path) -> list[tuple[str, int]]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    found: list[tuple[str, int]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend((alias.name, node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            found.append((node.module, node.lineno))
    return found


def _matches(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


@pytest.mark.parametrize(
    ("package", "forbidden"),
    [
        ("tools", ("umm.services", "umm.cli", "umm.host", "umm.output")),
        ("host", ("umm.services", "umm.cli")),
        ("services", ("umm.cli",)),
        ("core", ("umm.tools", "umm.services", "umm.cli", "umm.host", "umm.platform")),
    ],
)
def test_layer_does_not_import_upward(package: str, forbidden: tuple[str, ...]) -> None:
    _require_arch_checks_enabled()

    root = _umm_root()
    offenders: list[str] = []
    for file_path in _python_files(root / package):
        for module, line in _imports(file_path):
            if any(_matches(module, prefix) for prefix in forbidden):
                offenders.append(f"{file_path.relative_to(root)}:{line}: '{module}'")

    assert not offenders, "layering violations:\n" + "\n".join(offenders)


def test_direct_rich_imports_are_limited_to_console() -> None:
    _require_arch_checks_enabled()

    root = _umm_root()
    offenders: list[str] = []
    for file_path in _python_files(root):
        rel = file_path.relative_to(root)
        if rel.parts[0] == "test" or rel.as_posix() == "output/console.py":
            continue
        for module, line in _imports(file_path):
            if _matches(module, "rich"):
                offenders.append(f"{rel}:{line}: direct rich import '{module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)
