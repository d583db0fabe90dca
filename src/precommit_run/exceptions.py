"""pre-commit-run exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from precommit_run.utils import RunResult


class PreCommitRunError(Exception):
    """Base exception for pre-commit-run errors."""


class ConfigError(PreCommitRunError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Hook Run Exceptions
# =============================================================================


class HookRunError(PreCommitRunError):
    """Base exception for failures that should fail the enclosing build."""


class PreCommitNotInstalledError(HookRunError):
    """The pre-commit executable is missing or its version probe failed."""

    def __init__(self, message: str, *, executable: str) -> None:
        super().__init__(message)
        self.executable: str = executable


class ConfigFileNotFoundError(HookRunError):
    """The pre-commit configuration file does not exist."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path: Path = path


class HookNotConfiguredError(HookRunError):
    """A requested hook is not declared in the pre-commit configuration."""

    def __init__(self, message: str, *, hook_id: str) -> None:
        super().__init__(message)
        self.hook_id: str = hook_id


class HookResultError(HookRunError):
    """Base exception for hooks that ran but did not pass."""

    def __init__(self, message: str, *, hook_id: str, result: RunResult) -> None:
        """Initialize with error message, hook ID, and the subprocess result."""
        super().__init__(message)
        self.hook_id: str = hook_id
        self.result: RunResult = result


class HookModifiedFilesError(HookResultError):
    """A hook modified files while modifications are configured to fail."""


class HookFailedError(HookResultError):
    """A hook exited with a failure code."""
