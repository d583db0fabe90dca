"""Glob pattern expansion for hook file lists.

Patterns use gitignore wildcard syntax, matched with pathspec against paths
relative to a base directory (always with forward slashes). Every pattern is
anchored at the base directory:

- `*` matches any run of characters within one path segment
- `**` as a whole segment matches any number of directories, and a trailing
  `**` matches everything below
- `?` matches exactly one character other than `/`
- `[...]` matches one character in the set (`[!...]` or `[^...]` negates)
- `\\` escapes the next character
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec.patterns.gitignore.basic import GitIgnoreBasicPattern

if TYPE_CHECKING:
    import os
    from collections.abc import Callable

    from structlog.typing import FilteringBoundLogger

GLOB_CHARACTERS: frozenset[str] = frozenset("*?[")
"""Characters that mark a path as a glob pattern rather than a literal path."""


def compile_pattern(pattern: str) -> Callable[[str], bool]:
    """Compile a glob pattern into a predicate over relative file paths.

    A gitignore pattern that matches a directory also matches everything
    below it. Here a file only matches when the pattern covers its whole
    path, unless the pattern ends in `**` or `/`.

    Args:
        pattern: The glob pattern, relative to the base directory.

    Returns:
        A predicate taking a POSIX-style path relative to the base directory.

    Raises:
        ValueError: If pathspec rejects the pattern, such as a trailing
            unescaped backslash.
        re.error: If a bracket expression is invalid, such as a reversed
            range.
    """
    if not pattern.strip():
        return lambda _path: False

    compiled = GitIgnoreBasicPattern("/" + pattern)
    regex = compiled.regex
    if regex is None:  # pragma: no cover - anchored patterns are never no-ops
        return lambda _path: False
    if pattern.endswith(("**", "/")):
        return lambda path: compiled.match_file(path) is not None
    return lambda path: regex.fullmatch(path) is not None


@dataclass(frozen=True, slots=True)
class GlobMatcher:
    """Expands glob patterns to files under a base directory.

    Attributes:
        logger: Optional logger receiving a warning when a pattern is invalid
            or a directory tree cannot be walked.
    """

    logger: FilteringBoundLogger | None = None

    @staticmethod
    def is_pattern(path: str) -> bool:
        """Check if the given path contains glob pattern characters.

        Args:
            path: The path to check.

        Returns:
            True if the path contains `*`, `?`, or `[`.
        """
        return any(char in GLOB_CHARACTERS for char in path)

    def expand(self, pattern: str, base_dir: str | os.PathLike[str]) -> list[Path]:
        """Expand a glob pattern to the matching files.

        Every file under `base_dir` is visited recursively. Directories that
        cannot be read are skipped. The order of the result follows the
        directory traversal and is not guaranteed.

        Args:
            pattern: The glob pattern, relative to `base_dir`.
            base_dir: The directory to search in.

        Returns:
            Absolute paths of the matching files. Empty if nothing matches,
            the pattern is invalid, or `base_dir` cannot be walked.
        """
        start = Path(base_dir).absolute()
        try:
            matches = compile_pattern(pattern)
        except (ValueError, re.error) as e:
            if self.logger is not None:
                self.logger.warning(
                    "Invalid glob pattern", pattern=pattern, error=str(e)
                )
            return []

        matched: list[Path] = []
        root_errors: list[OSError] = []

        def _on_error(error: OSError) -> None:
            if error.filename is not None and Path(error.filename) == start:
                root_errors.append(error)

        for dirpath, _dirnames, filenames in start.walk(on_error=_on_error):
            for name in filenames:
                file = dirpath / name
                if matches(file.relative_to(start).as_posix()):
                    matched.append(file)

        if root_errors:
            if self.logger is not None:
                self.logger.warning(
                    "Failed to expand glob pattern",
                    pattern=pattern,
                    base_dir=str(start),
                    error=root_errors[0].strerror or str(root_errors[0]),
                )
            return []

        return matched
