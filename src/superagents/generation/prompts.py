"""Prompt templates for AI generation.

Prompts are kept compact: the codebase is described by a short context
section and file samples are reduced to their structure before being sent.
"""

import json
import re

from superagents.models.generation import GenerationContext

MAX_IMPORTS = 10
MAX_EXPORTS = 15
MAX_SIGNATURES = 10
FALLBACK_CHARS = 500

CONTEXT7_TOOLS = "mcp__context7__resolve-library-id, mcp__context7__query-docs"

_BODY_START = re.compile(r"\{.*$")
_ARROW_ASSIGNMENT = re.compile(r"^(const|let)\s+\w+\s*=\s*(async\s*)?\(")


def _signature(line: str) -> str:
    """Cut a declaration line at its opening brace."""
    return _BODY_START.sub("{ ... }", line)


def _summarize_json(content: str, filename: str) -> str:
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return content[:FALLBACK_CHARS]

    if filename.endswith("package.json") and isinstance(data, dict):
        return json.dumps(
            {
                "name": data.get("name"),
                "scripts": list(data.get("scripts") or {}),
                "dependencies": list(data.get("dependencies") or {}),
                "devDependencies": list(data.get("devDependencies") or {}),
            },
            indent=2,
        )
    return json.dumps(data, indent=2)[:FALLBACK_CHARS]


def summarize_file(content: str, filename: str) -> str:
    """Reduce a file to its imports, exports and signatures.

    JSON files keep only their key fields; ``package.json`` is reduced to
    its name, script names and dependency names.
    """
    if filename.endswith(".json"):
        return _summarize_json(content, filename)

    lines = content.splitlines()
    summary: list[str] = []

    imports = [
        line for line in lines if line.strip().startswith(("import ", "from "))
    ]
    if imports:
        summary.append("// Imports:")
        summary.extend(imports[:MAX_IMPORTS])
        if len(imports) > MAX_IMPORTS:
            summary.append(f"// ... {len(imports) - MAX_IMPORTS} more imports")

    exports = [line for line in lines if line.strip().startswith("export ")]
    if exports:
        summary.extend(["", "// Exports:"])
        summary.extend(_signature(line) for line in exports[:MAX_EXPORTS])
        if len(exports) > MAX_EXPORTS:
            summary.append(f"// ... {len(exports) - MAX_EXPORTS} more exports")

    signatures = []
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("export"):
            continue
        if stripped.startswith(("function ", "async function ", "class ")) or (
            _ARROW_ASSIGNMENT.match(stripped)
        ):
            signatures.append(line)
    if signatures:
        summary.extend(["", "// Functions/Classes:"])
        summary.extend(_signature(line) for line in signatures[:MAX_SIGNATURES])

    return "\n".join(summary) if summary else content[:FALLBACK_CHARS]


def build_context_section(context: GenerationContext) -> str:
    """Compact description of the goal and the analyzed stack."""
    codebase = context.codebase
    deps = ", ".join(dep.name for dep in codebase.dependencies[:8])
    patterns = ", ".join(
        f"{p.type.value}({len(p.paths)})" for p in codebase.detected_patterns
    )
    framework = codebase.framework.value if codebase.framework else "none"

    return f"""## Context
Goal: {context.goal.description}
Category: {context.goal.category.value}
Stack: {codebase.language or "unknown"}/{framework}
Deps: {deps or "none"}
Patterns: {patterns or "none"}"""


def build_samples_section(context: GenerationContext, max_files: int = 3) -> str:
    """Summaries of the first sampled files."""
    if not context.sampled_files:
        return ""

    samples = [
        f"**{f.path}**:\n```\n{summarize_file(f.content, f.path)}\n```"
        for f in context.sampled_files[:max_files]
    ]
    return "## Code Samples\n" + "\n\n".join(samples)


def build_agent_prompt(agent_name: str, context: GenerationContext) -> str:
    """Prompt for one agent definition."""
    skills = ", ".join(context.selected_skills)
    category = context.goal.category.value

    return f"""Generate a Claude Code agent config for "{agent_name}".

{build_context_section(context)}

Skills: {skills}
{build_samples_section(context, 2)}

## Output Format

```yaml
---
name: {agent_name}
description: [2-3 lines: what this agent does for {category} projects]
tools: Read, Edit, Write, Glob, Grep, Bash, {CONTEXT7_TOOLS}
model: {context.model}
skills: {skills}
---
```

# {agent_name}

Senior {agent_name} for: **{context.goal.description}**

## Project Context
[What we're building, current state]

## Tech Stack
[Technologies from this codebase]

## Key Locations
```
[Actual file structure]
```

## Patterns & Conventions
[Detected patterns with code examples]

## Rules
1. [Must-follow rules for this stack]
2. [Framework-specific practices]
3. [Goal-specific requirements]

## Context7
Use mcp__context7__resolve-library-id then mcp__context7__query-docs for docs.

---
Be SPECIFIC and PROJECT-FOCUSED. No generic advice."""


def build_skill_prompt(skill_name: str, context: GenerationContext) -> str:
    """Prompt for one skill document, with files that mention the skill."""
    needle = skill_name.lower()
    relevant = [
        f
        for f in context.sampled_files
        if needle in f.content.lower() or needle in f.path.lower()
    ][:2]

    examples = ""
    if relevant:
        examples = "## Examples\n" + "\n\n".join(
            f"**{f.path}**:\n```\n{summarize_file(f.content, f.path)}\n```"
            for f in relevant
        )

    fence = "typescript" if context.codebase.language == "typescript" else "javascript"
    category = context.goal.category.value

    return f"""Generate a skill file for "{skill_name}".

{build_context_section(context)}
{examples}

## Output

# {skill_name} Skill

> [Brief description]

## When to Use
[When relevant for {category} projects]

## Key Concepts
| Concept | Description | Use Case |
|---------|-------------|----------|
| [concept] | [what] | [when] |

## Patterns
[How {skill_name} is used in THIS codebase]

## Examples
```{fence}
// [Matching project style]
```

## Pitfalls
- [Stack-specific pitfalls]

## Context7
`mcp__context7__query-docs` for {skill_name} docs.

---
Be SPECIFIC. Include REAL examples."""


def build_claude_md_prompt(context: GenerationContext) -> str:
    """Prompt for the root CLAUDE.md guidance document."""
    codebase = context.codebase
    deps = ", ".join(f"{d.name}@{d.version}" for d in codebase.dependencies[:10])
    patterns = "\n".join(
        f"{p.type.value}: {len(p.paths)} files" for p in codebase.detected_patterns
    )
    files = "\n".join(f.path for f in codebase.sampled_files)
    framework = codebase.framework.value if codebase.framework else "none"
    status = "Enhancing" if codebase.sampled_files else "New project"
    agent_lines = "\n".join(f"- **{n}** - [when to use]" for n in context.selected_agents)
    skill_lines = "\n".join(
        f"- **{n}** - [what it provides]" for n in context.selected_skills
    )

    return f"""Generate CLAUDE.md for this project.

## Goal
{context.goal.description}
Category: {context.goal.category.value}

## Codebase
Type: {codebase.project_type.value}
Lang: {codebase.language or "unknown"}
Framework: {framework}
Deps: {deps}

Patterns:
{patterns or "none"}

Files:
{files}

## Config
Agents: {", ".join(context.selected_agents)}
Skills: {", ".join(context.selected_skills)}

## Output

# {context.goal.description}

## Vision
[Project goal and vision]

**Type:** {context.goal.category.value}
**Status:** {status}
**Generated:** {context.generated_at.strftime("%Y-%m-%d %H:%M")}

## Building
[What we're building, objectives]

## Tech Stack
[Detected technologies as table]

## Structure
[File structure from patterns]

## Agents
Use `/agent <name>`:
{agent_lines}

## Skills
Use `Skill(name)`:
{skill_lines}

## Quick Start
1. Switch agent: `/agent <name>`
2. Load skill: `Skill(name)`
3. Use Context7 for docs

---
Generated by SuperAgents"""
