"""Ignore-rule resolution for every directory scan.

Merges the built-in exclusions with the project's .gitignore and matches
paths with gitignore semantics through the pathspec library.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pathspec

from superagents.logging import get_logger
from superagents.paths import IGNORE_FILE

logger = get_logger("analyzer.ignore")

# Always excluded, ahead of any project rules
DEFAULT_IGNORES: tuple[str, ...] = (
    ".git/",
    "node_modules/",
    ".next/",
    ".nuxt/",
    ".svelte-kit/",
    "dist/",
    "build/",
    "out/",
    "coverage/",
)


def read_ignore_file(project_root: Path) -> list[str]:
    """Read the project's ignore file, one pattern per line.

    Blank lines and ``#`` comments are skipped. Negated (``!``) patterns are
    not supported and are dropped. A missing or unreadable file yields an
    empty list.
    """
    ignore_path = project_root / IGNORE_FILE
    try:
        content = ignore_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []

    patterns: list[str] = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("!"):
            logger.debug("Ignoring unsupported negated pattern %r", line)
            continue
        patterns.append(line)
    return patterns


def resolve_ignore_rules(
    project_root: Path, extra: Sequence[str] | None = None
) -> list[str]:
    """Return the effective exclusion patterns, built-ins first.

    Args:
        project_root: Root directory of the project.
        extra: Additional patterns appended after the ignore file's rules.
    """
    return list(DEFAULT_IGNORES) + read_ignore_file(project_root) + list(extra or [])


class IgnoreRules:
    """Gitignore-style matcher over a resolved pattern list."""

    def __init__(self, patterns: Sequence[str]) -> None:
        self.patterns: tuple[str, ...] = tuple(patterns)
        self._spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    @classmethod
    def for_project(
        cls, project_root: Path, extra: Sequence[str] | None = None
    ) -> IgnoreRules:
        return cls(resolve_ignore_rules(project_root, extra))

    def matches_dir(self, rel_dir: str) -> bool:
        """Check whether a root-relative directory is excluded."""
        return self._spec.match_file(rel_dir.rstrip("/") + "/")

    def is_excluded(self, rel_path: str | Path) -> bool:
        """Check whether a root-relative file is excluded.

        The file itself and each of its parent directories are checked, so a
        directory rule such as ``vendor/`` also excludes ``vendor/a/b.ts``.
        """
        path_str = Path(rel_path).as_posix()
        if self._spec.match_file(path_str):
            return True

        parts = path_str.split("/")[:-1]
        for i in range(1, len(parts) + 1):
            if self.matches_dir("/".join(parts[:i])):
                return True
        return False
