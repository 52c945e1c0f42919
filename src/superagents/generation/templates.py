"""User-provided agent and skill templates.

Templates live in ``~/.superagents/templates/{agents,skills}/<name>.md`` and
may contain ``{{placeholder}}`` variables filled from the generation context.
"""

from __future__ import annotations

import re
from pathlib import Path

from superagents.models.generation import GenerationContext
from superagents.paths import AGENTS_DIR, SKILLS_DIR, get_templates_dir

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

TEMPLATE_KINDS = {"agent": AGENTS_DIR, "skill": SKILLS_DIR}


def _kind_dir(kind: str, templates_dir: Path | None) -> Path:
    if kind not in TEMPLATE_KINDS:
        raise ValueError(f"Unknown template kind: {kind!r}")
    return (templates_dir or get_templates_dir()) / TEMPLATE_KINDS[kind]


def template_path(kind: str, name: str, templates_dir: Path | None = None) -> Path:
    return _kind_dir(kind, templates_dir) / f"{name.lower()}.md"


def init_templates_dir(templates_dir: Path | None = None) -> Path:
    """Create the agents/ and skills/ template folders."""
    root = templates_dir or get_templates_dir()
    for sub in TEMPLATE_KINDS.values():
        (root / sub).mkdir(parents=True, exist_ok=True)
    return root


def template_variables(context: GenerationContext) -> dict[str, str]:
    codebase = context.codebase
    return {
        "projectName": " ".join(context.goal.description.split()[:3]),
        "goal": context.goal.description,
        "category": context.goal.category.value,
        "framework": codebase.framework.value if codebase.framework else "none",
        "language": codebase.language or "javascript",
        "dependencies": ", ".join(d.name for d in codebase.dependencies[:10]),
        "patterns": "\n".join(
            f"{p.type.value}: {p.description}" for p in codebase.detected_patterns
        ),
        "skills": ", ".join(context.selected_skills),
        "agents": ", ".join(context.selected_agents),
        "model": context.model,
        "generatedAt": context.generated_at.strftime("%Y-%m-%d %H:%M"),
    }


def render_template(template: str, context: GenerationContext) -> str:
    """Substitute known ``{{variables}}``; unknown ones are left as written."""
    variables = template_variables(context)
    return _PLACEHOLDER.sub(
        lambda m: variables.get(m.group(1), m.group(0)), template
    )


def load_custom_template(
    kind: str,
    name: str,
    context: GenerationContext,
    templates_dir: Path | None = None,
) -> str | None:
    """Render the user's template for ``name``, or None if there is none."""
    path = template_path(kind, name, templates_dir)
    if not path.is_file():
        return None
    return render_template(path.read_text(encoding="utf-8"), context)


def list_custom_templates(templates_dir: Path | None = None) -> dict[str, list[str]]:
    """Names of the user's agent and skill templates."""
    listing: dict[str, list[str]] = {}
    for kind in TEMPLATE_KINDS:
        directory = _kind_dir(kind, templates_dir)
        listing[kind] = (
            sorted(p.stem for p in directory.glob("*.md")) if directory.is_dir() else []
        )
    return listing
