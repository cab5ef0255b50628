"""Exit codes for CLI commands."""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    Values are part of the CLI contract and should remain stable:
    - 0: Success
    - 1: User error (unsupported game, empty payload, bad arguments)
    - 2: Environment error (config file unreadable or invalid)
    - 5: I/O error (state store could not be read or written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
