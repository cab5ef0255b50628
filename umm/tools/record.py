"""Tool records as stored in the host's per-game tools table."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from umm.core.structured import get_bool, get_str, get_str_list
from umm.tools.matcher import UMM_EXE, join_path, parent_dir

__all__ = ["DEFAULT_TOOL_ID", "TOOL_NAME", "TOOL_LOGO", "ToolRecord"]

DEFAULT_TOOL_ID = "UnityModManager"
TOOL_NAME = "Unity Mod Manager"
TOOL_LOGO = "umm.png"


@dataclass(frozen=True, slots=True)
class ToolRecord:
    """A registered tool.

    Attributes:
        id: Key in the game's tools table
        name: Display name
        executable: Executable file name
        path: Full path to the executable
        working_directory: Directory the tool runs from
        required_files: Files that must exist for the tool to be valid
        logo: Logo image file name
        hidden: Hidden from the tool dashboard
        custom: Added by the user rather than discovered
    """

    id: str
    name: str
    executable: str
    path: str
    working_directory: str
    required_files: tuple[str, ...] = ()
    logo: str | None = None
    hidden: bool = False
    custom: bool = False

    @property
    def install_directory(self) -> str:
        """Directory containing the executable."""
        return parent_dir(self.path)

    @classmethod
    def for_directory(cls, directory: str, tool_id: str = DEFAULT_TOOL_ID) -> ToolRecord:
        """UMM record for an installation in directory.

        UMM is portable, so the working directory is the install directory.
        """
        return cls(
            id=tool_id,
            name=TOOL_NAME,
            executable=UMM_EXE,
            path=join_path(directory, UMM_EXE),
            working_directory=directory,
            required_files=(UMM_EXE,),
            logo=TOOL_LOGO,
        )

    @classmethod
    def from_dict(cls, tool_id: str, data: Mapping[str, object]) -> ToolRecord | None:
        """Parse a stored record; None if it has no usable path."""
        path = get_str(data, "path")
        if path is None:
            return None
        return cls(
            id=get_str(data, "id") or tool_id,
            name=get_str(data, "name") or tool_id,
            executable=get_str(data, "executable") or "",
            path=path,
            working_directory=get_str(data, "workingDirectory") or parent_dir(path),
            required_files=tuple(get_str_list(data, "requiredFiles")),
            logo=get_str(data, "logo"),
            hidden=get_bool(data, "hidden"),
            custom=get_bool(data, "custom"),
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize with the host's camelCase keys."""
        data: dict[str, object] = {
            "id": self.id,
            "name": self.name,
            "executable": self.executable,
            "requiredFiles": list(self.required_files),
            "path": self.path,
            "workingDirectory": self.working_directory,
            "hidden": self.hidden,
            "custom": self.custom,
        }
        if self.logo is not None:
            data["logo"] = self.logo
        return data
