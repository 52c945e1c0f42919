"""Manifest (package.json) reading.

A malformed manifest is treated exactly like a missing one: every caller
sees ``None`` and falls back to its default.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from superagents.analyzer.probe import run_probe
from superagents.paths import MANIFEST_FILE


def _load_json_object(path: Path) -> dict[str, Any] | None:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data if isinstance(data, dict) else None


def read_json_file(path: Path) -> dict[str, Any] | None:
    """Read a JSON object from ``path``, or None if absent or malformed."""
    if not path.is_file():
        return None
    return run_probe(f"read {path.name}", _load_json_object, path, default=None)


def read_manifest(project_root: Path) -> dict[str, Any] | None:
    """Read the project's package.json."""
    return read_json_file(project_root / MANIFEST_FILE)


def declared_dependencies(manifest: dict[str, Any], field_name: str) -> dict[str, str]:
    """Return one dependency table, dropping entries that are not name -> version."""
    table = manifest.get(field_name)
    if not isinstance(table, dict):
        return {}
    return {
        str(name): str(version)
        for name, version in table.items()
        if isinstance(version, (str, int, float))
    }


def merged_dependencies(manifest: dict[str, Any] | None) -> dict[str, str]:
    """Runtime and dev dependencies in one table (dev wins on clashes)."""
    if manifest is None:
        return {}
    return {
        **declared_dependencies(manifest, "dependencies"),
        **declared_dependencies(manifest, "devDependencies"),
    }


@dataclass(frozen=True)
class StringListWorkspaces:
    """``"workspaces": ["packages/*", ...]``"""

    globs: tuple[str, ...]


@dataclass(frozen=True)
class PackagesObjectWorkspaces:
    """``"workspaces": {"packages": ["packages/*", ...]}``"""

    packages: tuple[str, ...]


WorkspaceDecl = Union[StringListWorkspaces, PackagesObjectWorkspaces]


def _string_items(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def parse_workspaces(manifest: dict[str, Any] | None) -> WorkspaceDecl | None:
    """Resolve the manifest's ``workspaces`` field into a tagged value."""
    if manifest is None:
        return None

    match manifest.get("workspaces"):
        case list() as globs:
            return StringListWorkspaces(_string_items(globs))
        case {"packages": packages}:
            return PackagesObjectWorkspaces(_string_items(packages))
        case dict():
            return PackagesObjectWorkspaces(())
        case _:
            return None


def workspace_globs(decl: WorkspaceDecl) -> tuple[str, ...]:
    match decl:
        case StringListWorkspaces(globs=globs):
            return globs
        case PackagesObjectWorkspaces(packages=packages):
            return packages
    return ()
