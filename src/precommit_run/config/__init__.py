"""pre-commit-run configuration.

This module provides the run configuration (loaded from pyproject.toml,
environment variables and CLI overrides) and lookups in the pre-commit
configuration file.

Example:
    >>> from precommit_run.config import load_run_config
    >>> config = load_run_config(overrides={"hooks": ["check-json"]})
    >>> config.executable
    'pre-commit'
"""

from precommit_run.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._load import PYPROJECT_FILE, TOOL_SECTION, load_run_config, read_project_settings
from ._loader import (
    ENV_PREFIX,
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import LogFormat, LoggingConfig, LogLevel, RunConfig
from ._precommit import (
    HOOK_NAME_KEYS,
    PRE_COMMIT_CONFIG_FILE,
    ConfigSource,
    HookConfigLookup,
    iter_hook_entries,
)

__all__ = [
    "ENV_PREFIX",
    "HOOK_NAME_KEYS",
    "PRE_COMMIT_CONFIG_FILE",
    "PYPROJECT_FILE",
    "TOOL_SECTION",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigValidationError",
    "HookConfigLookup",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RunConfig",
    "deep_merge",
    "iter_hook_entries",
    "load_run_config",
    "parse_env_vars",
    "parse_string_value",
    "read_project_settings",
    "read_toml_file",
    "set_nested_key",
]
