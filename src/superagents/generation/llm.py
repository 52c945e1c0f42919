"""Non-interactive generation through an LLM command-line tool."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

from superagents.generation.prompts import (
    build_agent_prompt,
    build_claude_md_prompt,
    build_skill_prompt,
)
from superagents.generation.templates import load_custom_template
from superagents.logging import get_logger
from superagents.models.generation import (
    GeneratedFile,
    GeneratedOutputs,
    GenerationContext,
)

logger = get_logger("generation")

# Whitelist of allowed LLM CLI tools for security
ALLOWED_LLM_TOOLS = {"claude", "opencode", "kimi"}

DEFAULT_TIMEOUT = 300

Generate = Callable[[str], str]


def validate_llm_tool(llm_tool: str) -> None:
    """Validate the LLM tool name for security.

    Raises:
        ValueError: If the tool is not in the whitelist or contains path separators
    """
    if "/" in llm_tool or "\\" in llm_tool:
        raise ValueError("LLM tool name cannot contain path separators")
    if llm_tool not in ALLOWED_LLM_TOOLS:
        raise ValueError(
            f"Unsupported LLM tool: '{llm_tool}'. "
            f"Allowed tools: {', '.join(sorted(ALLOWED_LLM_TOOLS))}"
        )


def build_llm_command(llm_tool: str, prompt: str) -> list[str]:
    """Build the one-shot command line for an LLM tool."""
    if llm_tool == "claude":
        # --print runs non-interactively and writes the answer to stdout
        return ["claude", "--print", prompt]
    elif llm_tool == "opencode":
        return ["opencode", "run", prompt]
    elif llm_tool == "kimi":
        return ["kimi", "--print", "-p", prompt]
    return [llm_tool, prompt]


def generate(
    prompt: str,
    llm_tool: str = "claude",
    cwd: Path | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """Send one prompt to the LLM tool and return the generated markdown.

    Raises:
        ValueError: If the tool is not allowed
        RuntimeError: If the tool is missing, fails or times out
    """
    validate_llm_tool(llm_tool)

    if not shutil.which(llm_tool):
        raise RuntimeError(
            f"LLM CLI tool '{llm_tool}' not found in PATH. "
            f"Please install it or specify a different tool with --llm."
        )

    cmd = build_llm_command(llm_tool, prompt)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            cwd=cwd,
        )
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(f"LLM timed out after {timeout}s") from e

    if result.returncode != 0:
        raise RuntimeError(f"LLM exited with {result.returncode}: {result.stderr.strip()}")
    return strip_code_fence(result.stdout)


def strip_code_fence(text: str) -> str:
    """Remove a single markdown fence wrapped around the whole answer."""
    stripped = text.strip()
    if stripped.startswith("```") and stripped.endswith("```"):
        lines = stripped.splitlines()
        if len(lines) >= 2:
            return "\n".join(lines[1:-1]).strip() + "\n"
    return stripped + "\n"


def generate_outputs(
    context: GenerationContext,
    generate_fn: Generate,
    templates_dir: Path | None = None,
    on_progress: Callable[[str], None] | None = None,
) -> GeneratedOutputs:
    """Generate the root document, every agent and every skill.

    A user custom template, when present, is rendered instead of calling
    the LLM for that agent or skill.
    """

    def _produce(kind: str, name: str, build_prompt: Callable[[], str]) -> str:
        if on_progress:
            on_progress(f"{kind} {name}")
        custom = load_custom_template(kind, name, context, templates_dir)
        if custom is not None:
            logger.debug("Using custom %s template for %s", kind, name)
            return custom
        return generate_fn(build_prompt())

    agents = tuple(
        GeneratedFile(
            name=name,
            content=_produce("agent", name, lambda n=name: build_agent_prompt(n, context)),
        )
        for name in context.selected_agents
    )
    skills = tuple(
        GeneratedFile(
            name=name,
            content=_produce("skill", name, lambda n=name: build_skill_prompt(n, context)),
        )
        for name in context.selected_skills
    )

    if on_progress:
        on_progress("CLAUDE.md")
    claude_md = generate_fn(build_claude_md_prompt(context))

    return GeneratedOutputs(claude_md=claude_md, agents=agents, skills=skills)
