"""Tests for agent and skill recommendations."""

from superagents.analyzer.recommend import infer_agents, infer_skills, recommend
from superagents.models import (
    Dependency,
    DependencyCategory,
    Framework,
    Pattern,
    PatternType,
    ProjectType,
)


def dep(name: str, category: DependencyCategory = DependencyCategory.OTHER) -> Dependency:
    return Dependency(name=name, version="1.0.0", category=category)


def pattern(type: PatternType, confidence: float = 1.0) -> Pattern:
    return Pattern(type=type, paths=("a.ts",), confidence=confidence, description="")


class TestInferAgents:
    """Tests for agent recommendations."""

    def test_always_included_agents(self) -> None:
        """Every project gets a reviewer and a debugger."""
        agents = infer_agents(ProjectType.UNKNOWN, [])

        assert [a.name for a in agents] == ["code-reviewer", "debugger"]

    def test_backend_agent_listed_once(self) -> None:
        """Several triggers for the same agent merge into one entry."""
        patterns = [pattern(PatternType.COMPONENTS), pattern(PatternType.API_ROUTES)]

        agents = infer_agents(ProjectType.NEXTJS, patterns)

        backend = [a for a in agents if a.name == "backend-engineer"]
        assert len(backend) == 1
        assert len(backend[0].reasons) == 3

    def test_backend_agent_from_pattern_alone(self) -> None:
        """An api-routes pattern is enough for a non-UI project type."""
        agents = infer_agents(ProjectType.NODE, [pattern(PatternType.API_ROUTES)])

        assert "backend-engineer" in [a.name for a in agents]

    def test_no_backend_agent_without_signal(self) -> None:
        """Node projects without UI patterns get no backend agent."""
        agents = infer_agents(ProjectType.NODE, [pattern(PatternType.SERVICES, 0.9)])

        assert "backend-engineer" not in [a.name for a in agents]

    def test_specialists_from_dependencies(self) -> None:
        """Testing, database and security specialists follow dependency categories."""
        deps = [
            dep("vitest", DependencyCategory.TESTING),
            dep("prisma", DependencyCategory.ORM),
            dep("stripe", DependencyCategory.PAYMENTS),
        ]

        names = [a.name for a in infer_agents(ProjectType.UNKNOWN, [], deps)]

        assert {"testing-specialist", "database-specialist", "security-analyst"} <= set(names)

    def test_ranked_by_score_then_insertion(self) -> None:
        """Higher scores first; ties keep the order agents were added."""
        agents = infer_agents(ProjectType.NEXTJS, [pattern(PatternType.COMPONENTS)])

        assert [a.name for a in agents] == ["backend-engineer", "code-reviewer", "debugger"]
        assert agents[0].score == 1.8


class TestInferSkills:
    """Tests for skill recommendations."""

    def test_framework_skill_first(self) -> None:
        """The detected framework becomes a skill."""
        skills = infer_skills(Framework.NEXTJS, [dep("typescript")])

        assert [s.name for s in skills] == ["nextjs", "typescript"]
        assert skills[0].reasons == ("Framework 'nextjs' detected",)

    def test_prefix_rules_merge(self) -> None:
        """prisma and @prisma/ packages share one skill with both reasons."""
        skills = infer_skills(None, [dep("prisma"), dep("@prisma/client")])

        assert [s.name for s in skills] == ["prisma"]
        assert skills[0].reasons == ("Dependency 'prisma'", "Dependency '@prisma/client'")

    def test_exact_rules_do_not_match_substrings(self) -> None:
        """stripe-js is not the stripe skill."""
        assert infer_skills(None, [dep("@stripe/stripe-js")]) == ()

    def test_no_framework_no_dependencies(self) -> None:
        """Nothing to go on yields no skills."""
        assert infer_skills(None, []) == ()


class TestRecommend:
    """Tests for the combined engine."""

    def test_reasons_explain_each_item(self) -> None:
        """Every recommendation carries at least one reason."""
        result = recommend(
            ProjectType.REACT,
            Framework.VUE,
            [pattern(PatternType.TESTS, 0.9)],
            [dep("tailwindcss", DependencyCategory.UI)],
        )

        assert result.agent_names == [
            "code-reviewer",
            "debugger",
            "testing-specialist",
            "backend-engineer",
        ]
        assert result.skill_names == ["vue", "tailwind"]
        for item in result.agents + result.skills:
            assert item.reasons
