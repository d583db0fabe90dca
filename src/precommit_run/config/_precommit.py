# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Hook lookup in `.pre-commit-config.yaml` files.

The document is expected to look like::

    repos:
      - repo: https://github.com/pre-commit/pre-commit-hooks
        hooks:
          - id: trailing-whitespace
          - id: pretty-format-json
            alias: pretty-format-openapi-json

Anything that does not fit this shape is ignored rather than reported as an
error: a repo that is not a mapping, a `hooks` value that is not a list, and
so on simply contribute no hooks.
"""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from collections.abc import Iterator

    from structlog.typing import FilteringBoundLogger

PRE_COMMIT_CONFIG_FILE: str = ".pre-commit-config.yaml"
"""Default name of the pre-commit configuration file."""

HOOK_NAME_KEYS: tuple[str, ...] = ("id", "alias")
"""Hook entry keys a hook can be referenced by."""

type ConfigSource = str | os.PathLike[str] | bytes | IO[bytes] | IO[str]


def iter_hook_entries(
    document: object,
) -> Iterator[dict[str, Any]]:  # pyright: ignore[reportExplicitAny]
    """Yield every well-formed hook entry of a parsed pre-commit config.

    Args:
        document: The parsed YAML document.

    Yields:
        Hook entry mappings, in document order.
    """
    if not isinstance(document, dict):
        return

    repos = document.get("repos")
    if not isinstance(repos, list):
        return

    for repo in repos:
        if not isinstance(repo, dict):
            continue
        hooks = repo.get("hooks")
        if not isinstance(hooks, list):
            continue
        for hook in hooks:
            if isinstance(hook, dict):
                yield hook


@dataclass(frozen=True, slots=True)
class HookConfigLookup:
    """Answers whether hooks are declared in a pre-commit configuration.

    The source is read and parsed again on every call; nothing is cached.

    Attributes:
        logger: Optional logger receiving warnings for unreadable or invalid
            configuration sources.
    """

    logger: FilteringBoundLogger | None = None

    def _warn(self, event: str, **kwargs: object) -> None:
        if self.logger is not None:
            self.logger.warning(event, **kwargs)

    def _load(self, source: ConfigSource) -> tuple[bool, object]:
        """Read and parse a configuration source.

        Returns:
            Tuple of (loaded, document). `loaded` is False if the source could
            not be read or parsed.
        """
        if isinstance(source, bytes):
            stream: IO[bytes] | IO[str] = io.BytesIO(source)
        elif isinstance(source, (str, os.PathLike)):
            path = Path(source)
            if not path.exists():
                return False, None
            try:
                with path.open("rb") as f:
                    return self._parse(f, source=str(path))
            except OSError as e:
                self._warn(
                    "Failed to read pre-commit config file",
                    path=str(path),
                    error=str(e),
                )
                return False, None
        else:
            stream = source

        return self._parse(stream, source="<stream>")

    def _parse(self, stream: IO[bytes] | IO[str], *, source: str) -> tuple[bool, object]:
        try:
            return True, yaml.safe_load(stream)
        except yaml.YAMLError as e:
            self._warn(
                "Failed to parse pre-commit config YAML",
                source=source,
                error=str(e),
            )
        except OSError as e:
            self._warn(
                "Failed to read pre-commit config",
                source=source,
                error=str(e),
            )
        return False, None

    def is_hook_configured(self, source: ConfigSource, hook_name: str) -> bool:
        """Check if a hook is declared in a pre-commit configuration.

        Args:
            source: Path to the config file, raw YAML bytes, or a stream.
            hook_name: The hook ID or alias to look for.

        Returns:
            True if some hook's `id` or `alias` equals `hook_name`.
        """
        if not hook_name:
            return False

        loaded, document = self._load(source)
        if not loaded:
            return False

        return any(
            hook.get(key) == hook_name
            for hook in iter_hook_entries(document)
            for key in HOOK_NAME_KEYS
        )

    def configured_hook_names(self, source: ConfigSource) -> set[str]:
        """Collect every hook ID and alias declared in a configuration.

        Args:
            source: Path to the config file, raw YAML bytes, or a stream.

        Returns:
            The set of names hooks can be run by. Empty if the source cannot
            be read or parsed.
        """
        _, document = self._load(source)
        return {
            value
            for hook in iter_hook_entries(document)
            for key in HOOK_NAME_KEYS
            if isinstance(value := hook.get(key), str) and value
        }
