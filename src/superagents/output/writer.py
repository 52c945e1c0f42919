"""Writers for generated assistant configuration."""

from __future__ import annotations

import shutil
from pathlib import Path

from superagents.models.generation import GeneratedOutputs, WriteSummary
from superagents.output.format_adapter import (
    get_agent_globs,
    get_skill_globs,
    to_cursor_format,
)
from superagents.paths import (
    AGENTS_DIR,
    SKILLS_DIR,
    ensure_dir,
    get_claude_dir,
    get_claude_md_path,
    get_cursor_rules_dir,
)

TARGETS = ("claude", "cursor")


def _write(path: Path, content: str) -> None:
    path.write_text(content if content.endswith("\n") else content + "\n", encoding="utf-8")


def write_claude(
    outputs: GeneratedOutputs, project_path: Path, overwrite: bool = False
) -> WriteSummary:
    """Write ``.claude/agents``, ``.claude/skills`` and ``CLAUDE.md``.

    Existing agents and skills folders are replaced; hooks and any other
    content of ``.claude/`` are left alone.

    Raises:
        FileExistsError: If ``.claude/`` or ``CLAUDE.md`` exists and
            ``overwrite`` is False
    """
    claude_dir = get_claude_dir(project_path)
    claude_md = get_claude_md_path(project_path)
    if not overwrite:
        for existing in (claude_dir, claude_md):
            if existing.exists():
                raise FileExistsError(f"{existing} already exists")
    if claude_dir.exists():
        for sub in (AGENTS_DIR, SKILLS_DIR):
            shutil.rmtree(claude_dir / sub, ignore_errors=True)

    agents_dir = ensure_dir(claude_dir / AGENTS_DIR)
    skills_dir = ensure_dir(claude_dir / SKILLS_DIR)

    for agent in outputs.agents:
        _write(agents_dir / agent.filename, agent.content)
    for skill in outputs.skills:
        _write(skills_dir / skill.filename, skill.content)
    _write(claude_md, outputs.claude_md)

    return WriteSummary(
        total_files=len(outputs.agents) + len(outputs.skills) + 1,
        agents=tuple(a.name for a in outputs.agents),
        skills=tuple(s.name for s in outputs.skills),
        output_dir=claude_dir,
    )


def write_cursor(
    outputs: GeneratedOutputs, project_path: Path, overwrite: bool = False
) -> WriteSummary:
    """Write ``.cursor/rules`` with a project rule plus agent and skill rules.

    Raises:
        FileExistsError: If ``.cursor/rules`` exists and ``overwrite`` is False
    """
    rules_dir = get_cursor_rules_dir(project_path)
    if rules_dir.exists():
        if not overwrite:
            raise FileExistsError(f"{rules_dir} already exists")
        shutil.rmtree(rules_dir)

    agents_dir = ensure_dir(rules_dir / AGENTS_DIR)
    skills_dir = ensure_dir(rules_dir / SKILLS_DIR)

    _write(
        rules_dir / "project.mdc",
        to_cursor_format(
            outputs.claude_md,
            name="Project Context",
            description="Main project guidelines and context",
        ),
    )
    for agent in outputs.agents:
        _write(
            agents_dir / f"{agent.name}.mdc",
            to_cursor_format(
                agent.content,
                name=agent.name,
                description=f"{agent.name} agent rules",
                globs=get_agent_globs(agent.name),
            ),
        )
    for skill in outputs.skills:
        _write(
            skills_dir / f"{skill.name}.mdc",
            to_cursor_format(
                skill.content,
                name=skill.name,
                description=f"{skill.name} knowledge",
                globs=get_skill_globs(skill.name),
            ),
        )

    return WriteSummary(
        total_files=len(outputs.agents) + len(outputs.skills) + 1,
        agents=tuple(a.name for a in outputs.agents),
        skills=tuple(s.name for s in outputs.skills),
        output_dir=rules_dir,
    )


def write_outputs(
    outputs: GeneratedOutputs,
    project_path: Path,
    target: str = "claude",
    overwrite: bool = False,
) -> WriteSummary:
    """Write outputs in the layout of the chosen assistant."""
    if target == "claude":
        return write_claude(outputs, project_path, overwrite)
    if target == "cursor":
        return write_cursor(outputs, project_path, overwrite)
    raise ValueError(f"Unknown target: {target!r} (expected one of {', '.join(TARGETS)})")


def output_exists(project_path: Path, target: str) -> bool:
    """True when writing ``target`` would replace existing configuration."""
    if target == "cursor":
        return get_cursor_rules_dir(project_path).exists()
    return get_claude_dir(project_path).exists() or get_claude_md_path(project_path).exists()
