"""Subprocess execution for the pre-commit executable.

This module runs `pre-commit` (or any compatible executable) with a bounded
time budget. Output is drained on a dedicated reader thread so a full pipe
buffer can never block the child while the caller waits for it to exit.

Expected operational failures (missing executable, timeout, cancellation)
never raise; they are reported through the returned value instead.
"""

from __future__ import annotations

import contextlib
import os
import signal
import subprocess
import threading
import time
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

# Default hook execution timeout in seconds
DEFAULT_TIMEOUT: float = 300.0

# Default timeout for the `--version` availability probe in seconds
DEFAULT_INSTALL_CHECK_TIMEOUT: float = 10.0

# Exit code reserved for local execution errors (launch, timeout, interrupt)
EXIT_EXECUTION_ERROR: int = -1

# Bounded waits for the output reader after the process has exited
_READER_JOIN_TIMEOUT: float = 5.0
_DRAIN_JOIN_TIMEOUT: float = 1.0

# How often the cancellation token is polled while waiting
_CANCEL_POLL_INTERVAL: float = 0.05


class HookOutcome(StrEnum):
    """Classification of a pre-commit exit code."""

    PASSED = "passed"
    MODIFIED = "modified"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RunResult:
    """Result from a single pre-commit invocation.

    Exit codes follow pre-commit's conventions: 0 means the hook passed
    without changes, 1 means it modified files, anything greater than 1 is a
    failure. -1 is reserved for local errors (launch failure, timeout,
    interruption), in which case `output` describes the error.

    Attributes:
        exit_code: Process exit code, or -1 for local execution errors.
        output: Combined stdout and stderr of the process.
    """

    exit_code: int
    output: str = ""

    @property
    def passed(self) -> bool:
        """Whether the hook passed without modifications (exit code 0)."""
        return self.exit_code == 0

    @property
    def modified(self) -> bool:
        """Whether the hook modified files (exit code 1)."""
        return self.exit_code == 1

    @property
    def failed(self) -> bool:
        """Whether the hook failed (exit code > 1 or < 0)."""
        return self.exit_code > 1 or self.exit_code < 0

    @property
    def outcome(self) -> HookOutcome:
        """The outcome this exit code is classified as."""
        if self.passed:
            return HookOutcome.PASSED
        if self.modified:
            return HookOutcome.MODIFIED
        return HookOutcome.FAILED


def build_command(
    executable: str,
    hook_id: str,
    files: Sequence[str | os.PathLike[str]] | None = None,
) -> list[str]:
    """Build the `pre-commit run` command line for a hook.

    `--files` is only added when files are given. pre-commit treats a missing
    `--files` as "run on all files", which is not the same as an empty list.

    Args:
        executable: The pre-commit executable name or path.
        hook_id: The hook ID or alias to run.
        files: Files to run the hook on, in order.

    Returns:
        The command as an argument list.
    """
    command = [executable, "run", hook_id]
    if files:
        command.append("--files")
        command.extend(str(Path(f).absolute()) for f in files)
    return command


def _format_seconds(seconds: float) -> str:
    return f"{seconds:g}"


def _drain_stream(stream: IO[bytes]) -> None:
    """Read and discard everything from a stream until EOF."""
    # The process may have been killed under us
    with contextlib.suppress(OSError, ValueError):
        while stream.read(8192):
            pass


def _read_lines(stream: IO[str], lines: list[str]) -> None:
    """Collect every line from a text stream, without line terminators."""
    try:
        for line in stream:
            lines.append(line.rstrip("\r\n"))
    except (OSError, ValueError) as e:
        lines.append(f"Error reading output: {e}")


def _kill(process: subprocess.Popen[str] | subprocess.Popen[bytes]) -> None:
    """Forcibly terminate a process with its whole process group and reap it.

    Children are started in their own session, so the group holds every
    process the child spawned (pre-commit runs hooks as grandchildren).
    """
    with contextlib.suppress(OSError):
        if hasattr(os, "killpg"):
            os.killpg(process.pid, signal.SIGKILL)
        else:  # pragma: no cover - Windows has no process groups
            process.kill()
    with contextlib.suppress(OSError, subprocess.TimeoutExpired):
        _ = process.wait(timeout=_READER_JOIN_TIMEOUT)


def _finish_reader(
    thread: threading.Thread, stream: IO[str] | IO[bytes], timeout: float
) -> None:
    """Join an output reader and close its stream once the reader has stopped.

    A background process left behind by the child may still hold the pipe
    open. The daemon reader is then left to end at EOF, and the stream stays
    open while it holds the buffer lock.
    """
    thread.join(timeout)
    if not thread.is_alive():
        stream.close()


class _Interrupted(Exception):  # noqa: N818
    """Internal signal that the cancellation token was set while waiting."""


def _wait(
    process: subprocess.Popen[str] | subprocess.Popen[bytes],
    timeout: float,
    cancel: threading.Event | None,
) -> bool:
    """Wait for a process to exit.

    Args:
        process: The running process.
        timeout: Maximum number of seconds to wait.
        cancel: Optional cancellation token, polled while waiting.

    Returns:
        True if the process exited within the timeout, False otherwise.

    Raises:
        _Interrupted: If the cancellation token is set while waiting.
    """
    if cancel is None:
        try:
            _ = process.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            return False
        return True

    deadline = time.monotonic() + timeout
    while True:
        if cancel.is_set():
            raise _Interrupted
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return False
        try:
            _ = process.wait(timeout=min(remaining, _CANCEL_POLL_INTERVAL))
        except subprocess.TimeoutExpired:
            continue
        return True


@dataclass(frozen=True, slots=True)
class ProcessRunner:
    """Runs the pre-commit executable with timeouts.

    Instances hold only their immutable timeouts, so a single runner can be
    shared between threads. Every call owns its own process, output buffer
    and reader thread.

    Cancellation uses a `threading.Event` passed by the caller. When the event
    is set while a call is waiting, the child is killed and the call returns
    its "interrupted" value. The event is left set for the caller to observe.

    Attributes:
        timeout: Seconds a hook may run before it is killed.
        install_check_timeout: Seconds the `--version` probe may run.
    """

    timeout: float = DEFAULT_TIMEOUT
    install_check_timeout: float = DEFAULT_INSTALL_CHECK_TIMEOUT

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            msg = f"timeout must be positive, got {self.timeout}"
            raise ValueError(msg)
        if self.install_check_timeout <= 0:
            msg = (
                "install_check_timeout must be positive, "
                f"got {self.install_check_timeout}"
            )
            raise ValueError(msg)

    def check_available(
        self,
        executable: str,
        *,
        cancel: threading.Event | None = None,
    ) -> bool:
        """Check whether an executable is installed and working.

        Runs `<executable> --version` and discards its output.

        Args:
            executable: The executable name or path.
            cancel: Optional cancellation token.

        Returns:
            True if the probe exited with code 0 within the install check
            timeout, False otherwise (including when it cannot be started).
        """
        try:
            process = subprocess.Popen(  # noqa: S603
                [executable, "--version"],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                start_new_session=True,
            )
        except OSError:
            return False

        stdout = process.stdout
        if stdout is None:  # pragma: no cover - PIPE always sets stdout
            _kill(process)
            return False
        drain = threading.Thread(target=_drain_stream, args=(stdout,), daemon=True)
        drain.start()

        try:
            finished = _wait(process, self.install_check_timeout, cancel)
        except _Interrupted:
            finished = False

        if not finished:
            _kill(process)
        _finish_reader(drain, stdout, _DRAIN_JOIN_TIMEOUT)
        return finished and process.returncode == 0

    def run_hook(
        self,
        executable: str,
        hook_id: str,
        files: Sequence[str | os.PathLike[str]] | None = None,
        working_dir: str | os.PathLike[str] | None = None,
        env: Mapping[str, str] | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> RunResult:
        """Run a single pre-commit hook.

        The child runs in its own session. On timeout or cancellation its
        whole process group is killed, including the hook processes that
        pre-commit spawned.

        Args:
            executable: The pre-commit executable name or path.
            hook_id: The hook ID or alias to run.
            files: Files to run the hook on. Empty or None runs on all files.
            working_dir: Working directory for the process.
            env: Environment variables merged over the inherited environment.
            cancel: Optional cancellation token.

        Returns:
            RunResult with the process exit code and combined output, or
            exit code -1 and an error description for local failures.
        """
        command = build_command(executable, hook_id, files)
        process_env = {**os.environ, **env} if env else None
        cwd = os.fspath(working_dir) if working_dir is not None else None

        try:
            process = subprocess.Popen(  # noqa: S603
                command,
                cwd=cwd,
                env=process_env,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                start_new_session=True,
            )
        except OSError as e:
            return RunResult(
                EXIT_EXECUTION_ERROR, f"Failed to execute {executable}: {e}"
            )

        lines: list[str] = []
        stdout = process.stdout
        if stdout is None:  # pragma: no cover - PIPE always sets stdout
            _kill(process)
            return RunResult(EXIT_EXECUTION_ERROR, "Process output unavailable")
        reader = threading.Thread(target=_read_lines, args=(stdout, lines), daemon=True)
        reader.start()

        try:
            finished = _wait(process, self.timeout, cancel)
        except _Interrupted:
            _kill(process)
            _finish_reader(reader, stdout, _READER_JOIN_TIMEOUT)
            return RunResult(EXIT_EXECUTION_ERROR, "Execution interrupted")

        if not finished:
            _kill(process)
            _finish_reader(reader, stdout, _READER_JOIN_TIMEOUT)
            return RunResult(
                EXIT_EXECUTION_ERROR,
                f"Process timed out after {_format_seconds(self.timeout)} seconds",
            )

        _finish_reader(reader, stdout, _READER_JOIN_TIMEOUT)
        # Copied, since an abandoned reader may still be appending
        return RunResult(process.returncode, "\n".join(list(lines)))
