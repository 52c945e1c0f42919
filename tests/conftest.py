"""Shared fixtures: small project trees built under tmp_path."""

import json
from pathlib import Path
from typing import Callable

import pytest

from superagents.analyzer import analyze
from superagents.models import GenerationContext, GoalCategory, ProjectGoal

ProjectFactory = Callable[[dict[str, str]], Path]


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Build a project tree in a fresh directory."""
    counter = iter(range(1000))

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / f"project{next(counter)}"
        root.mkdir()
        return write_tree(root, files)

    return _make


NEXTJS_MANIFEST = {
    "name": "shop",
    "scripts": {"dev": "next dev", "test": "vitest"},
    "dependencies": {
        "next": "^14.0.0",
        "react": "^18.0.0",
        "@prisma/client": "^5.0.0",
        "stripe": "^14.0.0",
        "tailwindcss": "^3.4.0",
    },
    "devDependencies": {
        "typescript": "^5.0.0",
        "vitest": "^1.0.0",
    },
}

NEXTJS_FILES = {
    "package.json": json.dumps(NEXTJS_MANIFEST, indent=2),
    "tsconfig.json": '{"compilerOptions": {"strict": true}}\n',
    "next.config.js": "module.exports = {}\n",
    ".gitignore": "# local\n\nvendor/\n",
    "app/api/users/route.ts": (
        "import { NextResponse } from 'next/server'\n"
        "export async function GET() {\n  return NextResponse.json([])\n}\n"
    ),
    "app/layout.tsx": "export default function RootLayout({ children }) {\n  return children\n}\n",
    "app/page.tsx": "export default function Home() {\n  return null\n}\n",
    "components/Button.tsx": "export function Button() {\n  return null\n}\n",
    "lib/utils.ts": "export const cn = (...names) => names.join(' ')\n",
    "lib/utils.test.ts": "import { cn } from './utils'\n",
    "vendor/components/Legacy.tsx": "export const Legacy = 1\n",
    "node_modules/react/index.js": "module.exports = {}\n",
}


@pytest.fixture
def nextjs_project(make_project: ProjectFactory) -> Path:
    """A small Next.js + Prisma + Stripe project."""
    return make_project(NEXTJS_FILES)


@pytest.fixture
def generation_context(nextjs_project: Path) -> GenerationContext:
    codebase = analyze(nextjs_project)
    return GenerationContext(
        goal=ProjectGoal("Online store for vintage records", GoalCategory.ECOMMERCE),
        codebase=codebase,
        selected_agents=tuple(codebase.suggested_agents),
        selected_skills=tuple(codebase.suggested_skills),
    )


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory (custom templates) at an empty folder."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
