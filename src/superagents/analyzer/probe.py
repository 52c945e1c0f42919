"""Best-effort probing helpers shared by every analyzer scan.

All filesystem probes in the analyzer go through ``run_probe`` so that a
missing file, a permission error or a malformed document turns into an
empty result instead of aborting the analysis.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, TypeVar

import pathspec

from superagents.analyzer.ignore import IgnoreRules
from superagents.logging import get_logger

T = TypeVar("T")

logger = get_logger("analyzer.probe")


def run_probe(label: str, func: Callable[..., T], *args, default: T, **kwargs) -> T:
    """Call ``func`` and return ``default`` if it raises.

    Args:
        label: Short description used in the debug log.
        func: The probe to run.
        default: Value returned when the probe fails.

    Returns:
        The probe result, or ``default`` on any exception.
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        logger.debug("Probe %s failed: %s", label, e)
        return default


def walk_files(root: Path, ignore: IgnoreRules) -> list[str]:
    """List project files as root-relative POSIX paths in scan order.

    Scan order is a top-down walk with directories and files visited in
    sorted name order, files of a directory before its subdirectories.
    Ignored directories are pruned without being entered.
    """
    files: list[str] = []

    def _on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory %s: %s", error.filename, error)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else f"{rel_dir}/"

        # Prune in place so os.walk never descends into ignored trees
        dirnames[:] = sorted(
            d for d in dirnames if not ignore.matches_dir(f"{prefix}{d}")
        )

        for filename in sorted(filenames):
            rel_path = f"{prefix}{filename}"
            if not ignore.is_excluded(rel_path):
                files.append(rel_path)

    return files


def match_files(paths: list[str], globs: list[str]) -> list[str]:
    """Keep the walked ``paths`` matching any of ``globs`` (gitignore-style), in order."""
    spec = pathspec.GitIgnoreSpec.from_lines(globs)
    return [path for path in paths if spec.match_file(path)]
