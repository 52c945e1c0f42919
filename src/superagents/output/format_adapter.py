"""Conversion of generated markdown to Cursor ``.mdc`` rule files."""

SKILL_GLOBS: dict[str, list[str]] = {
    "typescript": ["**/*.ts", "**/*.tsx"],
    "javascript": ["**/*.js", "**/*.jsx"],
    "nodejs": ["**/*.js", "**/*.ts", "package.json"],
    "react": ["**/*.tsx", "**/*.jsx", "src/components/**/*"],
    "nextjs": ["**/*.tsx", "**/*.ts", "app/**/*", "pages/**/*"],
    "vue": ["**/*.vue", "src/**/*"],
    "python": ["**/*.py"],
    "fastapi": ["**/*.py", "app/**/*", "routers/**/*"],
    "tailwind": ["**/*.css", "tailwind.config.*"],
    "prisma": ["prisma/**/*", "**/*.prisma"],
    "drizzle": ["drizzle/**/*", "db/**/*"],
    "docker": ["Dockerfile*", "docker-compose*.yml", ".dockerignore"],
    "graphql": ["**/*.graphql", "**/*.gql"],
    "vitest": ["**/*.test.ts", "**/*.spec.ts", "vitest.config.*"],
    "express": ["**/*.ts", "**/*.js", "routes/**/*", "middleware/**/*"],
    "supabase": ["supabase/**/*", "**/*.sql"],
}

AGENT_GLOBS: dict[str, list[str]] = {
    "backend-engineer": ["src/**/*", "lib/**/*", "api/**/*"],
    "frontend-specialist": ["src/components/**/*", "src/pages/**/*", "public/**/*"],
    "devops-specialist": ["Dockerfile*", "*.yml", "*.yaml", ".github/**/*"],
    "database-specialist": ["**/*.sql", "prisma/**/*", "drizzle/**/*", "migrations/**/*"],
    "api-designer": ["api/**/*", "routes/**/*", "openapi.*"],
    "testing-specialist": ["**/*.test.*", "**/*.spec.*", "tests/**/*"],
    "docs-writer": ["**/*.md", "docs/**/*"],
}

DEFAULT_GLOBS = ["**/*"]


def get_skill_globs(skill_name: str) -> list[str]:
    return SKILL_GLOBS.get(skill_name.lower(), DEFAULT_GLOBS)


def get_agent_globs(agent_name: str) -> list[str]:
    return AGENT_GLOBS.get(agent_name.lower(), DEFAULT_GLOBS)


def build_frontmatter(
    name: str, description: str | None = None, globs: list[str] | None = None
) -> str:
    lines = ["---", f'name: "{name}"']
    if description:
        lines.append(f'description: "{description}"')
    if globs:
        lines.append("globs:")
        lines.extend(f'  - "{glob}"' for glob in globs)
    lines.append("---")
    return "\n".join(lines)


def to_cursor_format(
    content: str,
    name: str,
    description: str | None = None,
    globs: list[str] | None = None,
) -> str:
    """Prefix markdown with Cursor rule frontmatter."""
    return f"{build_frontmatter(name, description, globs)}\n{content}"
