"""Agent and skill recommendations.

Each recommendation accumulates a score and a list of human-readable
reasons from independent signals (project type, detected patterns,
declared dependencies). A name triggered by several rules appears once,
with all of its reasons.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from superagents.models.codebase import (
    Dependency,
    DependencyCategory,
    Framework,
    Pattern,
    PatternType,
    ProjectType,
    Recommendation,
    Recommendations,
)

# Signal weights
ALWAYS_WEIGHT = 1.0
FRAMEWORK_WEIGHT = 1.0
PROJECT_TYPE_WEIGHT = 0.8
DEPENDENCY_WEIGHT = 0.6

ALWAYS_AGENTS: tuple[tuple[str, str], ...] = (
    ("code-reviewer", "General-purpose reviewer, useful for every project"),
    ("debugger", "Debugging specialist, useful for every project"),
)

BACKEND_AGENT = "backend-engineer"
UI_PROJECT_TYPES = (ProjectType.NEXTJS, ProjectType.REACT, ProjectType.VUE)
BACKEND_PATTERNS = (PatternType.COMPONENTS, PatternType.API_ROUTES)

# (agent, dependency categories, pattern types)
SPECIALIST_AGENTS: tuple[tuple[str, tuple[DependencyCategory, ...], tuple[PatternType, ...]], ...] = (
    ("testing-specialist", (DependencyCategory.TESTING,), (PatternType.TESTS,)),
    ("database-specialist", (DependencyCategory.ORM, DependencyCategory.DATABASE), ()),
    ("security-analyst", (DependencyCategory.AUTH, DependencyCategory.PAYMENTS), ()),
)

EXACT = "exact"
PREFIX = "prefix"

# (match mode, dependency name, skill), every matching rule contributes
SKILL_RULES: tuple[tuple[str, str, str], ...] = (
    (EXACT, "typescript", "typescript"),
    (EXACT, "tailwindcss", "tailwind"),
    (EXACT, "@supabase/supabase-js", "supabase"),
    (EXACT, "stripe", "stripe"),
    (PREFIX, "prisma", "prisma"),
    (PREFIX, "@prisma/", "prisma"),
    (EXACT, "drizzle-orm", "drizzle"),
    (EXACT, "vitest", "vitest"),
    (EXACT, "graphql", "graphql"),
)


@dataclass
class _Candidate:
    name: str
    order: int
    score: float = 0.0
    reasons: list[str] = field(default_factory=list)


class RecommendationSet:
    """Name-keyed accumulator; insertion order breaks score ties."""

    def __init__(self) -> None:
        self._candidates: dict[str, _Candidate] = {}

    def add(self, name: str, reason: str, weight: float) -> None:
        candidate = self._candidates.get(name)
        if candidate is None:
            candidate = _Candidate(name=name, order=len(self._candidates))
            self._candidates[name] = candidate
        if reason not in candidate.reasons:
            candidate.reasons.append(reason)
            candidate.score += weight

    def __contains__(self, name: str) -> bool:
        return name in self._candidates

    def ranked(self) -> tuple[Recommendation, ...]:
        ordered = sorted(
            self._candidates.values(), key=lambda c: (-c.score, c.order)
        )
        return tuple(
            Recommendation(name=c.name, reasons=tuple(c.reasons), score=round(c.score, 2))
            for c in ordered
        )


def _skill_rule_matches(mode: str, rule_name: str, dep_name: str) -> bool:
    if mode == EXACT:
        return dep_name == rule_name
    return dep_name.startswith(rule_name)


def infer_agents(
    project_type: ProjectType,
    patterns: Sequence[Pattern],
    dependencies: Iterable[Dependency] = (),
) -> tuple[Recommendation, ...]:
    """Rank agents for the project."""
    agents = RecommendationSet()

    for name, reason in ALWAYS_AGENTS:
        agents.add(name, reason, ALWAYS_WEIGHT)

    if project_type in UI_PROJECT_TYPES:
        agents.add(
            BACKEND_AGENT,
            f"Project type '{project_type.value}' needs a server side",
            PROJECT_TYPE_WEIGHT,
        )

    for pattern in patterns:
        if pattern.type in BACKEND_PATTERNS:
            agents.add(
                BACKEND_AGENT,
                f"Detected {pattern.type.value} pattern ({len(pattern.paths)} files)",
                pattern.confidence,
            )

    dependencies = list(dependencies)
    for name, categories, pattern_types in SPECIALIST_AGENTS:
        for pattern in patterns:
            if pattern.type in pattern_types:
                agents.add(
                    name,
                    f"Detected {pattern.type.value} pattern ({len(pattern.paths)} files)",
                    pattern.confidence,
                )
        for dep in dependencies:
            if dep.category in categories:
                agents.add(
                    name,
                    f"Dependency '{dep.name}' ({dep.category.value})",
                    DEPENDENCY_WEIGHT,
                )

    return agents.ranked()


def infer_skills(
    framework: Framework | None, dependencies: Iterable[Dependency]
) -> tuple[Recommendation, ...]:
    """Rank skills for the project."""
    skills = RecommendationSet()

    if framework is not None:
        skills.add(
            framework.value, f"Framework '{framework.value}' detected", FRAMEWORK_WEIGHT
        )

    for dep in dependencies:
        for mode, rule_name, skill in SKILL_RULES:
            if _skill_rule_matches(mode, rule_name, dep.name):
                skills.add(skill, f"Dependency '{dep.name}'", DEPENDENCY_WEIGHT)

    return skills.ranked()


def recommend(
    project_type: ProjectType,
    framework: Framework | None,
    patterns: Sequence[Pattern],
    dependencies: Sequence[Dependency],
) -> Recommendations:
    """Combine classifier, pattern and dependency output into recommendations."""
    return Recommendations(
        agents=infer_agents(project_type, patterns, dependencies),
        skills=infer_skills(framework, dependencies),
    )
