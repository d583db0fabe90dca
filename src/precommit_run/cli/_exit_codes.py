"""Exit codes for pre-commit-run commands.

Codes 1 and 2 mirror pre-commit's own convention for modified files and
failures.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standard exit codes for pre-commit-run commands."""

    SUCCESS = 0
    """Hooks passed, modified files without failing, or the run was skipped."""

    MODIFIED = 1
    """A hook modified files and modifications are configured to fail."""

    HOOK_FAILED = 2
    """A hook failed, timed out, or could not be started."""

    NOT_FOUND = 3
    """pre-commit, its config file, or a requested hook was not found."""

    CONFIG_ERROR = 4
    """The run configuration could not be loaded or is invalid."""
