"""Monorepo (multi-package workspace) detection.

Tools are checked in a fixed order and a later marker overrides the tool
name. Only npm/yarn, pnpm and lerna declare workspace globs; turborepo and
nx markers change the tool but keep the globs found so far.
"""

from __future__ import annotations

import re
from pathlib import Path

from superagents.analyzer.manifest import (
    parse_workspaces,
    read_json_file,
    read_manifest,
    workspace_globs,
)
from superagents.analyzer.probe import run_probe
from superagents.models.codebase import MonorepoInfo, MonorepoPackage, MonorepoTool
from superagents.paths import MANIFEST_FILE

YARN_LOCK = "yarn.lock"
PNPM_WORKSPACE = "pnpm-workspace.yaml"
LERNA_CONFIG = "lerna.json"
TURBO_CONFIG = "turbo.json"
NX_CONFIG = "nx.json"

LERNA_DEFAULT_GLOBS = ("packages/*",)

# Workspace globs name package locations, so only the dependency cache is skipped
WORKSPACE_EXCLUDED_DIR = "node_modules"

_PNPM_PACKAGES_BLOCK = re.compile(r"packages:[ \t]*\n(.*?)(?=\n\w|\n$|\Z)", re.DOTALL)
_LIST_ITEM_PREFIX = re.compile(r"^-\s*['\"]?")
_QUOTE_SUFFIX = re.compile(r"['\"]?$")


def parse_pnpm_workspace(content: str) -> list[str]:
    """Extract the ``packages:`` list from pnpm-workspace.yaml.

    This is a light-touch parse of the block following ``packages:``; list
    punctuation and quotes are stripped, comments and blank lines dropped.
    """
    match = _PNPM_PACKAGES_BLOCK.search(content)
    if not match:
        return []

    globs: list[str] = []
    for line in match.group(1).splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        item = _QUOTE_SUFFIX.sub("", _LIST_ITEM_PREFIX.sub("", line))
        if item:
            globs.append(item)
    return globs


def _read_pnpm_globs(path: Path) -> list[str]:
    return parse_pnpm_workspace(path.read_text(encoding="utf-8"))


def _read_lerna_globs(path: Path) -> tuple[str, ...]:
    config = read_json_file(path) or {}
    packages = config.get("packages")
    if isinstance(packages, list):
        globs = tuple(p for p in packages if isinstance(p, str) and p)
        if globs:
            return globs
    return LERNA_DEFAULT_GLOBS


def _glob_directories(project_root: Path, workspace_glob: str) -> list[Path]:
    pattern = workspace_glob.strip().removeprefix("./").rstrip("/")
    if not pattern or pattern.startswith("!"):
        return []

    matches: list[Path] = []
    for candidate in sorted(project_root.glob(pattern)):
        if not candidate.is_dir():
            continue
        if WORKSPACE_EXCLUDED_DIR in candidate.relative_to(project_root).parts:
            continue
        matches.append(candidate)
    return matches


def _package_name(package_dir: Path) -> tuple[str, bool]:
    """Declared package name (or directory name) and whether a manifest exists."""
    manifest_path = package_dir / MANIFEST_FILE
    has_manifest = manifest_path.is_file()
    name = package_dir.name
    if has_manifest:
        declared = (read_json_file(manifest_path) or {}).get("name")
        if isinstance(declared, str) and declared:
            name = declared
    return name, has_manifest


def resolve_packages(
    project_root: Path, globs: tuple[str, ...]
) -> list[MonorepoPackage]:
    """Resolve workspace globs to packages, in glob order then path order."""
    packages: list[MonorepoPackage] = []
    seen: set[Path] = set()

    for workspace_glob in globs:
        directories = run_probe(
            f"workspace glob {workspace_glob}",
            _glob_directories,
            project_root,
            workspace_glob,
            default=[],
        )
        for package_dir in directories:
            if package_dir in seen:
                continue
            seen.add(package_dir)
            name, has_manifest = _package_name(package_dir)
            packages.append(
                MonorepoPackage(
                    name=name,
                    path=package_dir,
                    relative_path=package_dir.relative_to(project_root).as_posix(),
                    has_manifest=has_manifest,
                )
            )

    return packages


def detect_monorepo(project_root: Path) -> MonorepoInfo | None:
    """Detect a workspace tool and its packages, or None if not a monorepo."""
    tool: MonorepoTool | None = None
    globs: tuple[str, ...] = ()

    manifest = read_manifest(project_root)
    decl = parse_workspaces(manifest)
    if decl is not None:
        globs = workspace_globs(decl)
        tool = MonorepoTool.NPM
        if (project_root / YARN_LOCK).exists():
            tool = MonorepoTool.YARN

    pnpm_path = project_root / PNPM_WORKSPACE
    if pnpm_path.is_file():
        tool = MonorepoTool.PNPM
        pnpm_globs = run_probe(
            "read pnpm workspace", _read_pnpm_globs, pnpm_path, default=[]
        )
        if pnpm_globs:
            globs = tuple(pnpm_globs)

    lerna_path = project_root / LERNA_CONFIG
    if lerna_path.is_file():
        tool = MonorepoTool.LERNA
        globs = _read_lerna_globs(lerna_path)

    if (project_root / TURBO_CONFIG).exists():
        tool = MonorepoTool.TURBOREPO

    if (project_root / NX_CONFIG).exists():
        tool = MonorepoTool.NX

    if tool is None or not globs:
        return None

    packages = resolve_packages(project_root, globs)
    if not packages:
        return None

    manifest_path = project_root / MANIFEST_FILE
    return MonorepoInfo(
        is_monorepo=True,
        tool=tool,
        root_manifest_path=manifest_path if manifest is not None else None,
        packages=tuple(packages),
        workspace_globs=globs,
    )
