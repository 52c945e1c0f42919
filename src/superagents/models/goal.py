"""Data models for the user's project goal."""

from dataclasses import dataclass
from enum import Enum


class GoalCategory(Enum):
    """What kind of project the user says they are building."""

    SAAS_DASHBOARD = "saas-dashboard"
    ECOMMERCE = "ecommerce"
    CONTENT_PLATFORM = "content-platform"
    API_SERVICE = "api-service"
    MOBILE_APP = "mobile-app"
    CLI_TOOL = "cli-tool"
    DATA_PIPELINE = "data-pipeline"
    AUTH_SERVICE = "auth-service"
    CUSTOM = "custom"


# Checked in order, first keyword hit wins
CATEGORY_KEYWORDS: list[tuple[GoalCategory, tuple[str, ...]]] = [
    (GoalCategory.AUTH_SERVICE, ("auth", "login", "sso", "identity")),
    (GoalCategory.ECOMMERCE, ("shop", "store", "ecommerce", "e-commerce", "cart", "marketplace")),
    (GoalCategory.SAAS_DASHBOARD, ("dashboard", "saas", "analytics", "admin panel", "metrics")),
    (GoalCategory.CONTENT_PLATFORM, ("blog", "cms", "content", "publishing")),
    (GoalCategory.API_SERVICE, ("api", "rest", "graphql", "microservice", "backend")),
    (GoalCategory.MOBILE_APP, ("mobile", "ios", "android", "react native")),
    (GoalCategory.CLI_TOOL, ("cli", "command-line", "command line", "terminal")),
    (GoalCategory.DATA_PIPELINE, ("pipeline", "etl", "ingest", "data processing")),
]


def categorize_goal(description: str) -> GoalCategory:
    """Guess a goal category from a free-text description."""
    text = description.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return GoalCategory.CUSTOM


@dataclass(frozen=True)
class ProjectGoal:
    description: str
    category: GoalCategory = GoalCategory.CUSTOM

    def to_dict(self) -> dict:
        return {"description": self.description, "category": self.category.value}
