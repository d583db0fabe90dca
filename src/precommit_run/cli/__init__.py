"""The pre-commit-run command-line interface."""

from ._app import create_app, main
from ._exit_codes import ExitCode

__all__ = ["ExitCode", "create_app", "main"]
