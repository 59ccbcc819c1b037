"""Exit codes for the check command.

The numeric values are the process exit status seen by the pipeline
orchestrator and should remain stable:
- 0: Success (including "no new versions")
- 1: User error (malformed request, invalid filter or constraint)
- 4: Network error (release listing failed)
- 5: I/O error (stdin/stdout unusable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    NETWORK_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
