"""Hook run configuration model.

This module provides the RunConfig Pydantic model describing which hooks to
run, on which files, and how failures are handled.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from precommit_run.config._models._common import LogFormat, LogLevel
from precommit_run.config._precommit import PRE_COMMIT_CONFIG_FILE
from precommit_run.utils import DEFAULT_INSTALL_CHECK_TIMEOUT, DEFAULT_TIMEOUT


class LoggingConfig(BaseModel):
    """Where and how a run reports its progress.

    Hook output is logged at info level, so `warning` or `error` keeps only
    problems.

    Attributes:
        level: Log level threshold.
        format: `text` for people, `json` for log collectors.
        file: Log file path, appended to. Empty logs to stderr.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.TEXT
    file: str = ""


def _split_names(value: object) -> object:
    """Accept a comma-separated string where a list of names is expected."""
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class RunConfig(BaseModel):
    """Configuration for a pre-commit hook run.

    Attributes:
        hooks: Hook IDs or aliases to run, in order.
        files: Literal paths or glob patterns relative to the project root.
            Empty runs the hooks on all files.
        skip: Skip hook execution entirely.
        skip_if_not_installed: Skip instead of failing when the executable
            is unavailable.
        skip_if_config_not_found: Skip instead of failing when the pre-commit
            config file is missing.
        skip_if_hook_not_found: Skip instead of failing when a hook is not
            declared in the pre-commit config.
        fail_on_modification: Fail when a hook modifies files.
        executable: The pre-commit executable name or path.
        environment: Environment variables added to the pre-commit process.
        config_file: Path of the pre-commit config, relative to the project root.
        timeout: Seconds a hook may run before it is killed.
        install_check_timeout: Seconds the availability probe may run.
        logging: Logging configuration.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    hooks: tuple[str, ...] = Field(min_length=1)
    files: tuple[str, ...] = ()
    skip: bool = False
    skip_if_not_installed: bool = True
    skip_if_config_not_found: bool = True
    skip_if_hook_not_found: bool = True
    fail_on_modification: bool = False
    executable: str = Field(default="pre-commit", min_length=1)
    environment: dict[str, str] = Field(default_factory=dict)
    config_file: str = PRE_COMMIT_CONFIG_FILE
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    install_check_timeout: float = Field(default=DEFAULT_INSTALL_CHECK_TIMEOUT, gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("hooks", "files", mode="before")
    @classmethod
    def _split_comma_separated(cls, value: object) -> object:
        return _split_names(value)

    @field_validator("hooks")
    @classmethod
    def _reject_empty_hook_ids(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not hook.strip() for hook in value):
            msg = "hook IDs must not be empty"
            raise ValueError(msg)
        return value
