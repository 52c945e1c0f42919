"""Data models for codebase analysis."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ProjectType(Enum):
    """Coarse project classification, exactly one per analysis."""

    NEXTJS = "nextjs"
    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"
    SVELTE = "svelte"
    NODE = "node"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"
    JAVA = "java"
    CSHARP = "csharp"
    PHP = "php"
    RUBY = "ruby"
    UNKNOWN = "unknown"


class Framework(Enum):
    """Framework declared in the manifest. Absence is modelled as None."""

    NEXTJS = "nextjs"
    NUXTJS = "nuxtjs"
    VUE = "vue"
    ANGULAR = "angular"
    SVELTE = "svelte"
    EXPRESS = "express"
    FASTIFY = "fastify"
    NESTJS = "nestjs"


class DependencyCategory(Enum):
    FRAMEWORK = "framework"
    UI = "ui"
    DATABASE = "database"
    ORM = "orm"
    AUTH = "auth"
    PAYMENTS = "payments"
    TESTING = "testing"
    BUILD = "build"
    OTHER = "other"


class PatternType(Enum):
    API_ROUTES = "api-routes"
    SERVER_ACTIONS = "server-actions"
    COMPONENTS = "components"
    SERVICES = "services"
    MODELS = "models"
    CONTROLLERS = "controllers"
    MIDDLEWARE = "middleware"
    HOOKS = "hooks"
    UTILS = "utils"
    TESTS = "tests"


class MonorepoTool(Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    LERNA = "lerna"
    TURBOREPO = "turborepo"
    NX = "nx"


@dataclass(frozen=True)
class Dependency:
    """A declared manifest dependency and its category."""

    name: str
    version: str
    category: DependencyCategory

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "version": self.version,
            "category": self.category.value,
        }


@dataclass(frozen=True)
class Pattern:
    """A structural convention found in the project tree.

    ``paths`` keeps the directory scan order; the file sampler relies on it
    when it picks the first few examples of each pattern.
    """

    type: PatternType
    paths: tuple[str, ...]
    confidence: float  # 0.0 - 1.0
    description: str

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "paths": list(self.paths),
            "confidence": self.confidence,
            "description": self.description,
        }


@dataclass(frozen=True)
class SampledFile:
    """A file read for AI generation context."""

    path: str
    content: str
    purpose: str

    def to_dict(self) -> dict:
        return {"path": self.path, "content": self.content, "purpose": self.purpose}


@dataclass(frozen=True)
class MonorepoPackage:
    name: str
    path: Path
    relative_path: str
    has_manifest: bool

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": str(self.path),
            "relative_path": self.relative_path,
            "has_manifest": self.has_manifest,
        }


@dataclass(frozen=True)
class MonorepoInfo:
    is_monorepo: bool
    tool: MonorepoTool | None
    root_manifest_path: Path | None
    packages: tuple[MonorepoPackage, ...]
    workspace_globs: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "is_monorepo": self.is_monorepo,
            "tool": self.tool.value if self.tool else None,
            "root_manifest_path": (
                str(self.root_manifest_path) if self.root_manifest_path else None
            ),
            "packages": [pkg.to_dict() for pkg in self.packages],
            "workspace_globs": list(self.workspace_globs),
        }


@dataclass(frozen=True)
class Recommendation:
    """A suggested agent or skill with the signals that triggered it."""

    name: str
    reasons: tuple[str, ...]
    score: float

    def to_dict(self) -> dict:
        return {"name": self.name, "reasons": list(self.reasons), "score": self.score}


@dataclass(frozen=True)
class Recommendations:
    agents: tuple[Recommendation, ...] = ()
    skills: tuple[Recommendation, ...] = ()

    @property
    def agent_names(self) -> list[str]:
        return [agent.name for agent in self.agents]

    @property
    def skill_names(self) -> list[str]:
        return [skill.name for skill in self.skills]


@dataclass(frozen=True)
class ExistingConfig:
    """Previously generated assistant configuration found in the project."""

    has_claude_dir: bool
    has_claude_md: bool
    agents: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    hooks: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "has_claude_dir": self.has_claude_dir,
            "has_claude_md": self.has_claude_md,
            "agents": list(self.agents),
            "skills": list(self.skills),
            "hooks": list(self.hooks),
        }


@dataclass(frozen=True)
class CodebaseAnalysis:
    """Complete result of one ``analyze()`` run."""

    project_root: Path
    project_type: ProjectType
    language: str | None
    framework: Framework | None
    dependencies: tuple[Dependency, ...] = ()
    dev_dependencies: tuple[Dependency, ...] = ()
    detected_patterns: tuple[Pattern, ...] = ()
    recommendations: Recommendations = field(default_factory=Recommendations)
    sampled_files: tuple[SampledFile, ...] = ()
    monorepo: MonorepoInfo | None = None
    existing_config: ExistingConfig | None = None
    ignore_rules: tuple[str, ...] = ()
    analyzed_at: str = ""
    analysis_time_ms: int = 0

    @property
    def suggested_agents(self) -> list[str]:
        return self.recommendations.agent_names

    @property
    def suggested_skills(self) -> list[str]:
        return self.recommendations.skill_names

    def to_dict(self) -> dict:
        return {
            "project_root": str(self.project_root),
            "project_type": self.project_type.value,
            "language": self.language,
            "framework": self.framework.value if self.framework else None,
            "dependencies": [dep.to_dict() for dep in self.dependencies],
            "dev_dependencies": [dep.to_dict() for dep in self.dev_dependencies],
            "detected_patterns": [p.to_dict() for p in self.detected_patterns],
            "suggested_agents": [a.to_dict() for a in self.recommendations.agents],
            "suggested_skills": [s.to_dict() for s in self.recommendations.skills],
            "sampled_files": [f.to_dict() for f in self.sampled_files],
            "monorepo": self.monorepo.to_dict() if self.monorepo else None,
            "existing_config": (
                self.existing_config.to_dict() if self.existing_config else None
            ),
            "ignore_rules": list(self.ignore_rules),
            "analyzed_at": self.analyzed_at,
            "analysis_time_ms": self.analysis_time_ms,
        }
