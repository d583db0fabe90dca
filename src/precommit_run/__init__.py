"""Run pre-commit hooks from a build.

The core pieces are usable on their own:

- `ProcessRunner` runs the pre-commit executable with timeouts
- `GlobMatcher` expands file patterns against a project root
- `HookConfigLookup` checks hooks against `.pre-commit-config.yaml`

`HookOrchestrator` ties them together for a `RunConfig`.
"""

from precommit_run.config import HookConfigLookup, RunConfig, load_run_config
from precommit_run.exceptions import (
    ConfigError,
    HookFailedError,
    HookRunError,
    PreCommitRunError,
)
from precommit_run.hooks import HookOrchestrator, RunReport
from precommit_run.utils import GlobMatcher, HookOutcome, ProcessRunner, RunResult

__all__ = [
    "ConfigError",
    "GlobMatcher",
    "HookConfigLookup",
    "HookFailedError",
    "HookOrchestrator",
    "HookOutcome",
    "HookRunError",
    "PreCommitRunError",
    "ProcessRunner",
    "RunConfig",
    "RunReport",
    "RunResult",
    "load_run_config",
]
