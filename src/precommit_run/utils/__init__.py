"""Utilities for running pre-commit: subprocess execution, globbing, logging."""

from ._exec import (
    DEFAULT_INSTALL_CHECK_TIMEOUT,
    DEFAULT_TIMEOUT,
    EXIT_EXECUTION_ERROR,
    HookOutcome,
    ProcessRunner,
    RunResult,
    build_command,
)
from ._glob import GLOB_CHARACTERS, GlobMatcher, compile_pattern
from ._logging import LogFormatType, create_logger

__all__ = [
    "DEFAULT_INSTALL_CHECK_TIMEOUT",
    "DEFAULT_TIMEOUT",
    "EXIT_EXECUTION_ERROR",
    "GLOB_CHARACTERS",
    "GlobMatcher",
    "HookOutcome",
    "LogFormatType",
    "ProcessRunner",
    "RunResult",
    "build_command",
    "compile_pattern",
    "create_logger",
]
