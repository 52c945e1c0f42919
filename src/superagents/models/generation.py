"""Data models for prompt building, generation and writing."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from superagents.models.codebase import CodebaseAnalysis
from superagents.models.goal import ProjectGoal


@dataclass(frozen=True)
class GenerationContext:
    """Everything a prompt builder needs to know about one run."""

    goal: ProjectGoal
    codebase: CodebaseAnalysis
    selected_agents: tuple[str, ...]
    selected_skills: tuple[str, ...]
    model: str = "sonnet"
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def sampled_files(self):
        return self.codebase.sampled_files


@dataclass(frozen=True)
class GeneratedFile:
    name: str
    content: str

    @property
    def filename(self) -> str:
        return f"{self.name}.md"


@dataclass(frozen=True)
class GeneratedOutputs:
    claude_md: str
    agents: tuple[GeneratedFile, ...] = ()
    skills: tuple[GeneratedFile, ...] = ()


@dataclass(frozen=True)
class WriteSummary:
    total_files: int
    agents: tuple[str, ...]
    skills: tuple[str, ...]
    output_dir: Path
