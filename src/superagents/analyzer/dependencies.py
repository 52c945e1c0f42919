"""Dependency cataloging.

Each category is matched either by exact name or by substring, and that
choice is per category: ``database`` and ``auth`` catch driver and adapter
packages by substring, ``orm`` and ``testing`` only accept exact names.
"""

from typing import Any

from superagents.analyzer.manifest import declared_dependencies
from superagents.models.codebase import Dependency, DependencyCategory

EXACT = "exact"
CONTAINS = "contains"

# (match mode, names, category), first matching rule wins
CATEGORY_RULES: list[tuple[str, tuple[str, ...], DependencyCategory]] = [
    (EXACT, ("react", "vue", "@angular/core", "svelte"), DependencyCategory.FRAMEWORK),
    (
        EXACT,
        ("tailwindcss", "@shadcn/ui", "styled-components", "@mui/material", "@chakra-ui/react"),
        DependencyCategory.UI,
    ),
    (CONTAINS, ("postgres", "mysql", "mongodb", "redis", "sqlite"), DependencyCategory.DATABASE),
    (
        EXACT,
        ("prisma", "@prisma/client", "drizzle-orm", "typeorm", "sequelize", "mongoose"),
        DependencyCategory.ORM,
    ),
    (CONTAINS, ("next-auth", "@clerk/nextjs", "@supabase/auth", "passport"), DependencyCategory.AUTH),
    (CONTAINS, ("stripe", "@stripe/stripe-js", "paypal"), DependencyCategory.PAYMENTS),
    (
        EXACT,
        ("vitest", "jest", "playwright", "@playwright/test", "cypress"),
        DependencyCategory.TESTING,
    ),
    (EXACT, ("vite", "webpack", "esbuild", "turbo", "rollup", "tsup"), DependencyCategory.BUILD),
]


def _rule_matches(mode: str, names: tuple[str, ...], dep_name: str) -> bool:
    if mode == EXACT:
        return dep_name in names
    return any(name in dep_name for name in names)


def categorize(name: str) -> DependencyCategory:
    """Assign a category to a dependency name."""
    for mode, names, category in CATEGORY_RULES:
        if _rule_matches(mode, names, name):
            return category
    return DependencyCategory.OTHER


def catalog_dependencies(
    manifest: dict[str, Any] | None, field_name: str = "dependencies"
) -> list[Dependency]:
    """Catalog one dependency table of the manifest, in declaration order."""
    if manifest is None:
        return []
    return [
        Dependency(name=name, version=version, category=categorize(name))
        for name, version in declared_dependencies(manifest, field_name).items()
    ]
