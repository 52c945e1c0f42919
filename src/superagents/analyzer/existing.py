"""Probe for assistant configuration generated by an earlier run."""

from pathlib import Path

from superagents.analyzer.probe import run_probe
from superagents.models.codebase import ExistingConfig
from superagents.paths import (
    AGENTS_DIR,
    HOOKS_DIR,
    SKILLS_DIR,
    get_claude_dir,
    get_claude_md_path,
)


def _list_names(directory: Path, suffix: str | None = ".md") -> tuple[str, ...]:
    if not directory.is_dir():
        return ()
    names = []
    for entry in sorted(directory.iterdir()):
        if not entry.is_file():
            continue
        if suffix is None:
            names.append(entry.name)
        elif entry.suffix == suffix:
            names.append(entry.stem)
    return tuple(names)


def detect_existing_config(project_root: Path) -> ExistingConfig | None:
    """Summarize an existing .claude/ directory and CLAUDE.md, if any."""
    claude_dir = get_claude_dir(project_root)
    has_claude_dir = claude_dir.is_dir()
    has_claude_md = get_claude_md_path(project_root).is_file()

    if not has_claude_dir and not has_claude_md:
        return None

    return ExistingConfig(
        has_claude_dir=has_claude_dir,
        has_claude_md=has_claude_md,
        agents=run_probe("list agents", _list_names, claude_dir / AGENTS_DIR, default=()),
        skills=run_probe("list skills", _list_names, claude_dir / SKILLS_DIR, default=()),
        hooks=run_probe(
            "list hooks", _list_names, claude_dir / HOOKS_DIR, None, default=()
        ),
    )
