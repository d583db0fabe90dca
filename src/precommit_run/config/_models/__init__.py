"""Configuration models.

This module provides Pydantic models for pre-commit-run configuration.
"""

from precommit_run.config._models._common import LogFormat, LogLevel
from precommit_run.config._models._run import LoggingConfig, RunConfig

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RunConfig",
]
