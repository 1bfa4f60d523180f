"""Process exit codes for relbook commands.

The values are part of the CLI contract (workflow steps branch on them) and
must stay stable:
- 0: Success
- 1: User error (malformed version, unknown bump kind, missing argument, bad config)
- 2: Environment error (git missing, not a repository, git command failed)
- 5: I/O error (output file could not be written)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
