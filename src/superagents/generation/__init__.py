"""Prompt building and LLM generation."""

from superagents.generation.llm import generate, generate_outputs
from superagents.generation.prompts import (
    build_agent_prompt,
    build_claude_md_prompt,
    build_skill_prompt,
    summarize_file,
)

__all__ = [
    "build_agent_prompt",
    "build_claude_md_prompt",
    "build_skill_prompt",
    "generate",
    "generate_outputs",
    "summarize_file",
]
