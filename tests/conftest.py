"""Shared test fixtures for pre-commit-run tests."""

import os
import stat
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console

ScriptFactory = Callable[..., Path]

SAMPLE_CONFIG = """\
repos:
  - repo: https://github.com/pre-commit/pre-commit-hooks
    rev: v4.5.0
    hooks:
      - id: trailing-whitespace
      - id: end-of-file-fixer
      - id: pretty-format-json
        alias: pretty-format-openapi-json
  - repo: local
    hooks:
      - id: always-fails
        name: always fails
        entry: "false"
        language: system
"""

# A stand-in for the pre-commit executable.
#
# `--version` prints a version and exits 0. `run <hook> [--files ...]`
# appends its arguments as one line to $FAKE_PRE_COMMIT_LOG (when set), echoes
# them, and exits with the code given for the hook in $FAKE_PRE_COMMIT_EXIT_<HOOK>
# (hook name upper-cased, dashes replaced with underscores), defaulting to 0.
FAKE_PRE_COMMIT = """\
import os
import sys

args = sys.argv[1:]
if args == ["--version"]:
    print("pre-commit 3.7.1")
    sys.exit(0)

if len(args) < 2 or args[0] != "run":
    print("usage: pre-commit run HOOK [--files FILE ...]", file=sys.stderr)
    sys.exit(2)

hook = args[1]
log = os.environ.get("FAKE_PRE_COMMIT_LOG")
if log:
    with open(log, "a", encoding="utf-8") as f:
        f.write(" ".join(args) + "\\n")

print("cwd=" + os.getcwd())
print("args=" + " ".join(args))
print(hook + " output", file=sys.stderr)
sys.exit(int(os.environ.get("FAKE_PRE_COMMIT_EXIT_" + hook.upper().replace("-", "_"), "0")))
"""


def write_script(path: Path, body: str) -> Path:
    """Write an executable Python script run by the current interpreter.

    Args:
        path: Where to write the script.
        body: Python source of the script.

    Returns:
        The script path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!{sys.executable}\n{body}", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_script(tmp_path: Path) -> ScriptFactory:
    """Return a factory creating executable Python scripts under tmp_path."""
    counter = iter(range(1_000_000))

    def _make(body: str, *, name: str | None = None) -> Path:
        script_name = name or f"script_{next(counter)}"
        return write_script(tmp_path / "bin" / script_name, body)

    return _make


@dataclass(frozen=True, slots=True)
class PreCommitProject:
    """Paths for a project with a pre-commit config and a fake executable."""

    root: Path
    config_file: Path
    executable: Path
    invocation_log: Path

    def invocations(self) -> list[str]:
        """Return the recorded `run` invocations, one string per call."""
        if not self.invocation_log.exists():
            return []
        return self.invocation_log.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def precommit_project(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> PreCommitProject:
    """Create a project with a pre-commit config and a fake pre-commit.

    Structure:
        tmp_path/
            bin/pre-commit              # fake executable
            project/
                .pre-commit-config.yaml
                docs/openapi.json
                docs/readme.md
                src/main/App.java
    """
    root = tmp_path / "project"
    (root / "docs").mkdir(parents=True)
    (root / "src" / "main").mkdir(parents=True)
    (root / "docs" / "openapi.json").write_text("{}\n")
    (root / "docs" / "readme.md").write_text("# docs\n")
    (root / "src" / "main" / "App.java").write_text("class App {}\n")

    config_file = root / ".pre-commit-config.yaml"
    config_file.write_text(SAMPLE_CONFIG)

    executable = write_script(tmp_path / "bin" / "pre-commit", FAKE_PRE_COMMIT)
    invocation_log = tmp_path / "invocations.log"
    monkeypatch.setenv("FAKE_PRE_COMMIT_LOG", str(invocation_log))

    # Keep the developer's environment out of config loading
    for key in list(os.environ):
        if key.startswith("PRECOMMIT_RUN_"):
            monkeypatch.delenv(key)

    return PreCommitProject(
        root=root,
        config_file=config_file,
        executable=executable,
        invocation_log=invocation_log,
    )


@pytest.fixture
def console() -> Console:
    return Console(
        width=200,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
