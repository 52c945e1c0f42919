"""Data models for SuperAgents."""

from superagents.models.codebase import (
    CodebaseAnalysis,
    Dependency,
    DependencyCategory,
    ExistingConfig,
    Framework,
    MonorepoInfo,
    MonorepoPackage,
    MonorepoTool,
    Pattern,
    PatternType,
    ProjectType,
    Recommendation,
    Recommendations,
    SampledFile,
)
from superagents.models.generation import (
    GeneratedFile,
    GeneratedOutputs,
    GenerationContext,
    WriteSummary,
)
from superagents.models.goal import GoalCategory, ProjectGoal, categorize_goal

__all__ = [
    # Codebase models
    "CodebaseAnalysis",
    "Dependency",
    "DependencyCategory",
    "ExistingConfig",
    "Framework",
    "MonorepoInfo",
    "MonorepoPackage",
    "MonorepoTool",
    "Pattern",
    "PatternType",
    "ProjectType",
    "Recommendation",
    "Recommendations",
    "SampledFile",
    # Generation models
    "GeneratedFile",
    "GeneratedOutputs",
    "GenerationContext",
    "WriteSummary",
    # Goal models
    "GoalCategory",
    "ProjectGoal",
    "categorize_goal",
]
