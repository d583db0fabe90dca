# pyright: reportUnusedFunction=false
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""The command-line interface for pre-commit-run."""

from pathlib import Path
from typing import Annotated, Never

from cyclopts import App, Parameter
from rich.console import Console
from rich.markup import escape

from precommit_run.config import (
    PRE_COMMIT_CONFIG_FILE,
    HookConfigLookup,
    load_run_config,
)
from precommit_run.exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    HookModifiedFilesError,
    HookNotConfiguredError,
    HookResultError,
    PreCommitNotInstalledError,
)
from precommit_run.hooks import HookOrchestrator
from precommit_run.utils import (
    DEFAULT_INSTALL_CHECK_TIMEOUT,
    ProcessRunner,
    create_logger,
)

from ._exit_codes import ExitCode

_HELP = "Run pre-commit hooks from a build."


def _exit_with_error(message: str, code: ExitCode, *, console: Console) -> Never:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)


def _parse_env_pairs(pairs: list[str], *, console: Console) -> dict[str, str]:
    env: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            _exit_with_error(
                f"Invalid --env value '{pair}', expected KEY=VALUE",
                ExitCode.CONFIG_ERROR,
                console=console,
            )
        env[key] = value
    return env


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the pre-commit-run CLI application.

    Args:
        console: Console for regular output.
        error_console: Console for error output.
        exit_on_error: Whether cyclopts exits on parse errors.

    Returns:
        The configured cyclopts App.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)

    app = App(
        name="pre-commit-run",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.command(name="run")
    def _run(
        *hooks: Annotated[str, Parameter(help="Hook IDs or aliases to run, in order")],
        files: Annotated[
            list[str] | None,
            Parameter(
                name=["--files", "-f"],
                help="File or glob pattern relative to the project root (repeatable)",
            ),
        ] = None,
        project_root: Annotated[
            Path | None,
            Parameter(name="--project-root", help="Path to project root"),
        ] = None,
        executable: Annotated[
            str | None,
            Parameter(help="pre-commit executable name or path"),
        ] = None,
        env: Annotated[
            list[str] | None,
            Parameter(help="Environment variable for pre-commit as KEY=VALUE"),
        ] = None,
        timeout: Annotated[
            float | None,
            Parameter(help="Seconds a hook may run before it is killed"),
        ] = None,
        fail_on_modification: Annotated[
            bool,
            Parameter(
                name="--fail-on-modification",
                help="Fail when a hook modifies files",
            ),
        ] = False,
        strict: Annotated[
            bool,
            Parameter(
                help="Fail instead of skipping when pre-commit, its config, "
                "or a hook is missing",
            ),
        ] = False,
    ) -> None:
        """Run pre-commit hooks on files

        Hooks run in the given order and the run stops at the first failing
        hook. Without --files, hooks run on all files.
        """
        root = project_root if project_root is not None else Path.cwd()

        overrides: dict[str, object] = {}
        if hooks:
            overrides["hooks"] = list(hooks)
        if files:
            overrides["files"] = files
        if executable is not None:
            overrides["executable"] = executable
        if env:
            overrides["environment"] = _parse_env_pairs(env, console=error_console)
        if timeout is not None:
            overrides["timeout"] = timeout
        if fail_on_modification:
            overrides["fail_on_modification"] = True
        if strict:
            overrides["skip_if_not_installed"] = False
            overrides["skip_if_config_not_found"] = False
            overrides["skip_if_hook_not_found"] = False

        try:
            config = load_run_config(root, overrides=overrides)
        except ConfigError as e:
            _exit_with_error(str(e), ExitCode.CONFIG_ERROR, console=error_console)

        logger = create_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,  # type: ignore[arg-type]
            log_file=config.logging.file,
        )
        orchestrator = HookOrchestrator.from_config(config, root, logger)

        try:
            report = orchestrator.execute()
        except (
            PreCommitNotInstalledError,
            ConfigFileNotFoundError,
            HookNotConfiguredError,
        ) as e:
            _exit_with_error(str(e), ExitCode.NOT_FOUND, console=error_console)
        except HookModifiedFilesError as e:
            _exit_with_error(str(e), ExitCode.MODIFIED, console=error_console)
        except HookResultError as e:
            if e.result.output and e.result.exit_code < 0:
                error_console.print(e.result.output, markup=False, highlight=False)
            _exit_with_error(str(e), ExitCode.HOOK_FAILED, console=error_console)

        if report.skipped_reason is not None:
            console.print(f"[yellow]Skipped:[/yellow] {escape(report.skipped_reason)}")
            return

        for execution in report.executions:
            console.print(
                f"{execution.hook_id}: {execution.result.outcome.value}",
                markup=False,
                highlight=False,
            )

    @app.command(name="hooks")
    def _hooks(
        *,
        project_root: Annotated[
            Path | None,
            Parameter(name="--project-root", help="Path to project root"),
        ] = None,
        config_file: Annotated[
            str,
            Parameter(name=["--config", "-c"], help="pre-commit config file"),
        ] = PRE_COMMIT_CONFIG_FILE,
    ) -> None:
        """List hook IDs and aliases declared in the pre-commit config"""
        root = project_root if project_root is not None else Path.cwd()
        config_path = root / config_file
        if not config_path.exists():
            _exit_with_error(
                f"{config_file} not found in {root}",
                ExitCode.NOT_FOUND,
                console=error_console,
            )

        for name in sorted(HookConfigLookup().configured_hook_names(config_path)):
            console.print(name, markup=False, highlight=False)

    @app.command(name="check")
    def _check(
        *,
        executable: Annotated[
            str,
            Parameter(help="pre-commit executable name or path"),
        ] = "pre-commit",
        timeout: Annotated[
            float,
            Parameter(help="Seconds the version probe may run"),
        ] = DEFAULT_INSTALL_CHECK_TIMEOUT,
    ) -> None:
        """Check that the pre-commit executable is available"""
        if timeout <= 0:
            _exit_with_error(
                "--timeout must be positive", ExitCode.CONFIG_ERROR, console=error_console
            )
        runner = ProcessRunner(install_check_timeout=timeout)
        if not runner.check_available(executable):
            _exit_with_error(
                f"{executable} is not installed or not in PATH",
                ExitCode.NOT_FOUND,
                console=error_console,
            )
        console.print(f"{executable} is available", markup=False, highlight=False)

    return app


def main() -> None:
    """Default entrypoint for the `pre-commit-run` CLI."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
