"""Sequential execution of configured pre-commit hooks.

The orchestrator checks that pre-commit is installed, that the pre-commit
config declares every requested hook, resolves the file list, and then runs
the hooks one after the other. Missing prerequisites either skip the run or
raise, depending on the `skip_if_*` settings. The first hook that fails
stops the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from precommit_run.config import HookConfigLookup
from precommit_run.exceptions import (
    ConfigFileNotFoundError,
    HookFailedError,
    HookModifiedFilesError,
    HookNotConfiguredError,
    PreCommitNotInstalledError,
)
from precommit_run.utils import GlobMatcher, ProcessRunner

if TYPE_CHECKING:
    import threading

    from structlog.typing import FilteringBoundLogger

    from precommit_run.config import RunConfig
    from precommit_run.utils import RunResult


@dataclass(frozen=True, slots=True)
class HookExecution:
    """A hook that was run, with its result.

    Attributes:
        hook_id: The hook ID or alias that was run.
        result: The result of the pre-commit invocation.
    """

    hook_id: str
    result: RunResult


@dataclass(frozen=True, slots=True)
class RunReport:
    """Outcome of an orchestrated hook run.

    Attributes:
        executions: Hooks that were run, in order.
        skipped_reason: Why the run was skipped, or None if hooks ran.
    """

    executions: tuple[HookExecution, ...] = ()
    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None

    @property
    def modified(self) -> bool:
        """Whether any hook modified files."""
        return any(execution.result.modified for execution in self.executions)


@dataclass(frozen=True, slots=True)
class ResolvedFiles:
    """Files resolved from the configured paths and patterns.

    Attributes:
        existing: Files that exist, in configuration order, without duplicates.
        missing: Literal paths that do not exist.
    """

    existing: tuple[Path, ...]
    missing: tuple[Path, ...]


def _hook_label(hook_id: str) -> str:
    return f"Hook '{hook_id}'"


@dataclass(frozen=True, slots=True)
class HookOrchestrator:
    """Runs the hooks of a RunConfig against a project.

    Attributes:
        config: The run configuration.
        project_root: Directory containing the pre-commit config, used as the
            working directory and as the base for relative file paths.
        logger: Logger for progress messages and hook output.
        runner: Runs pre-commit processes.
        lookup: Checks hooks against the pre-commit config.
        matcher: Expands glob patterns in the file list.
        cancel: Optional cancellation token forwarded to the runner.
    """

    config: RunConfig
    project_root: Path
    logger: FilteringBoundLogger
    runner: ProcessRunner
    lookup: HookConfigLookup
    matcher: GlobMatcher
    cancel: threading.Event | None = None

    @classmethod
    def from_config(
        cls,
        config: RunConfig,
        project_root: Path,
        logger: FilteringBoundLogger,
        *,
        cancel: threading.Event | None = None,
    ) -> HookOrchestrator:
        """Create an orchestrator with components built from the config."""
        return cls(
            config=config,
            project_root=project_root,
            logger=logger,
            runner=ProcessRunner(
                timeout=config.timeout,
                install_check_timeout=config.install_check_timeout,
            ),
            lookup=HookConfigLookup(logger=logger),
            matcher=GlobMatcher(logger=logger),
            cancel=cancel,
        )

    @property
    def config_path(self) -> Path:
        return self.project_root / self.config.config_file

    def execute(self) -> RunReport:
        """Run every configured hook.

        Returns:
            RunReport listing the hooks that ran, or the reason they were
            skipped.

        Raises:
            PreCommitNotInstalledError: If pre-commit is unavailable and
                `skip_if_not_installed` is off.
            ConfigFileNotFoundError: If the pre-commit config is missing and
                `skip_if_config_not_found` is off.
            HookNotConfiguredError: If a hook is not declared and
                `skip_if_hook_not_found` is off.
            HookModifiedFilesError: If a hook modified files and
                `fail_on_modification` is on.
            HookFailedError: If a hook failed.
        """
        if self.config.skip:
            return self._skip("Skipping pre-commit hook execution")

        skipped_reason = (
            self._check_installed()
            or self._check_config_file()
            or self._check_hooks_configured()
        )
        if skipped_reason is not None:
            return RunReport(skipped_reason=skipped_reason)

        files: tuple[Path, ...] = ()
        if self.config.files:
            resolved = self.resolve_files()
            if resolved.missing:
                self.logger.warning(
                    "Files not found: "
                    + ", ".join(str(path) for path in resolved.missing)
                )
            if not resolved.existing:
                return self._skip(
                    "No files matched the configured paths, skipping execution",
                    warn=True,
                )
            files = resolved.existing

        executions: list[HookExecution] = []
        for hook_id in self.config.hooks:
            result = self._run_hook(hook_id, files)
            executions.append(HookExecution(hook_id=hook_id, result=result))
            self._handle_result(hook_id, result)

        return RunReport(executions=tuple(executions))

    def _skip(self, reason: str, *, warn: bool = False) -> RunReport:
        if warn:
            self.logger.warning(reason)
        else:
            self.logger.info(reason)
        return RunReport(skipped_reason=reason)

    def _check_installed(self) -> str | None:
        executable = self.config.executable
        if self.runner.check_available(executable, cancel=self.cancel):
            return None
        if self.config.skip_if_not_installed:
            reason = "pre-commit is not installed or not in PATH, skipping execution"
            self.logger.warning(reason, executable=executable)
            return reason
        msg = "pre-commit is not installed or not in PATH"
        raise PreCommitNotInstalledError(msg, executable=executable)

    def _check_config_file(self) -> str | None:
        config_path = self.config_path
        if config_path.exists():
            return None
        if self.config.skip_if_config_not_found:
            reason = f"No {self.config.config_file} found, skipping execution"
            self.logger.info(reason)
            return reason
        msg = f"{self.config.config_file} not found in {self.project_root}"
        raise ConfigFileNotFoundError(msg, path=config_path)

    def _check_hooks_configured(self) -> str | None:
        for hook_id in self.config.hooks:
            if self.lookup.is_hook_configured(self.config_path, hook_id):
                continue
            if self.config.skip_if_hook_not_found:
                reason = (
                    f"{_hook_label(hook_id)} not found in "
                    f"{self.config.config_file}, skipping execution"
                )
                self.logger.info(reason)
                return reason
            msg = f"{_hook_label(hook_id)} not found in {self.config.config_file}"
            raise HookNotConfiguredError(msg, hook_id=hook_id)
        return None

    def resolve_files(self) -> ResolvedFiles:
        """Resolve the configured files and glob patterns.

        Glob patterns are expanded against the project root; literal paths
        are joined to it.

        Returns:
            ResolvedFiles with existing files and missing literal paths.
        """
        existing: dict[Path, None] = {}
        missing: list[Path] = []

        for entry in self.config.files:
            if self.matcher.is_pattern(entry):
                matches = self.matcher.expand(entry, self.project_root)
                if not matches:
                    self.logger.warning("Glob pattern matched no files", pattern=entry)
                existing.update(dict.fromkeys(matches))
                continue

            path = (self.project_root / entry).absolute()
            if path.exists():
                existing[path] = None
            else:
                missing.append(path)

        return ResolvedFiles(existing=tuple(existing), missing=tuple(missing))

    def _run_hook(self, hook_id: str, files: tuple[Path, ...]) -> RunResult:
        if files:
            self.logger.info(
                f"Running pre-commit hook '{hook_id}' on {len(files)} file(s)"
            )
        else:
            self.logger.info(f"Running pre-commit hook '{hook_id}' on all files")

        result = self.runner.run_hook(
            self.config.executable,
            hook_id,
            files,
            self.project_root,
            self.config.environment,
            cancel=self.cancel,
        )

        for line in result.output.splitlines():
            self.logger.info(line, hook=hook_id)
        return result

    def _handle_result(self, hook_id: str, result: RunResult) -> None:
        label = _hook_label(hook_id)
        if result.passed:
            self.logger.info(f"{label} passed (no changes needed)")
            return
        if result.modified:
            if self.config.fail_on_modification:
                msg = (
                    f"{label} modified files. Review the changes and commit "
                    "them, or set fail_on_modification=false"
                )
                raise HookModifiedFilesError(msg, hook_id=hook_id, result=result)
            self.logger.info(f"{label} modified files")
            return
        msg = f"{label} failed with exit code {result.exit_code}"
        raise HookFailedError(msg, hook_id=hook_id, result=result)
