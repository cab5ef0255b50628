"""Platform abstraction layer."""

from .detection import Platform, detect_platform, is_windows
from .files import atomic_write_text, file_exists
from .paths import home, user_config_dir, user_data_dir
from .registry import (
    MockRegistry,
    NullRegistry,
    RegistryAccessor,
    WindowsRegistry,
    default_registry,
)

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    "is_windows",
    # files
    "atomic_write_text",
    "file_exists",
    # paths
    "home",
    "user_config_dir",
    "user_data_dir",
    # registry
    "RegistryAccessor",
    "WindowsRegistry",
    "NullRegistry",
    "MockRegistry",
    "default_registry",
]
