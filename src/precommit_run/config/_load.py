# pyright: reportAny=false, reportExplicitAny=false
"""Run configuration loading from pyproject.toml, environment, and overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from precommit_run.config._loader import deep_merge, parse_env_vars, read_toml_file
from precommit_run.config._models import RunConfig
from precommit_run.exceptions import ConfigValidationError

PYPROJECT_FILE: str = "pyproject.toml"
TOOL_SECTION: str = "pre-commit-run"


def read_project_settings(project_root: Path) -> dict[str, Any]:
    """Read the `[tool.pre-commit-run]` table of a project's pyproject.toml.

    Args:
        project_root: Project root directory.

    Returns:
        The table contents, or an empty dict if the file or table is missing.

    Raises:
        ConfigLoadError: If pyproject.toml cannot be parsed.
    """
    pyproject = project_root / PYPROJECT_FILE
    if not pyproject.is_file():
        return {}

    data = read_toml_file(pyproject)
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        return {}
    section = tool.get(TOOL_SECTION, {})
    return section if isinstance(section, dict) else {}


def _to_validation_error(error: ValidationError, *, source: str) -> ConfigValidationError:
    first = error.errors()[0]
    key = ".".join(str(part) for part in first["loc"]) or "<root>"
    msg = f"Invalid configuration value for '{key}': {first['msg']}"
    return ConfigValidationError(
        msg,
        key=key,
        value=first.get("input"),
        expected=first["type"],
        source=source,
    )


def load_run_config(
    project_root: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
    include_env: bool = True,
    environ: dict[str, str] | None = None,
) -> RunConfig:
    """Load the run configuration for a project.

    Sources are merged in precedence order (lowest to highest): built-in
    defaults, `[tool.pre-commit-run]` in pyproject.toml, `PRECOMMIT_RUN_*`
    environment variables, and explicit overrides.

    Args:
        project_root: Project root directory (defaults to the current directory).
        overrides: Highest-precedence values, typically from the CLI.
        include_env: Include environment variables as a source.
        environ: Environment to read instead of `os.environ`.

    Returns:
        The validated run configuration.

    Raises:
        ConfigLoadError: If pyproject.toml cannot be parsed.
        ConfigValidationError: If the merged configuration is invalid.
    """
    root = project_root if project_root is not None else Path.cwd()

    merged = read_project_settings(root)
    if include_env:
        merged = deep_merge(merged, parse_env_vars(environ=environ))
    if overrides:
        merged = deep_merge(merged, overrides)

    try:
        return RunConfig.model_validate(merged)
    except ValidationError as e:
        raise _to_validation_error(e, source=str(root / PYPROJECT_FILE)) from e
