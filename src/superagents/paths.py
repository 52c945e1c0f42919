"""Centralized path management for SuperAgents inputs and outputs."""

from pathlib import Path

# Files read from the analyzed project
MANIFEST_FILE = "package.json"
TYPE_CONFIG_FILE = "tsconfig.json"
IGNORE_FILE = ".gitignore"
CONFIG_FILE = "superagents.json"
ROADMAP_FILE = "ROADMAP.md"

# Generated configuration
CLAUDE_DIR = ".claude"
CLAUDE_MD = "CLAUDE.md"
AGENTS_DIR = "agents"
SKILLS_DIR = "skills"
HOOKS_DIR = "hooks"
CURSOR_DIR = ".cursor"
CURSOR_RULES_DIR = "rules"

# Per-user custom templates
USER_DIR = ".superagents"
TEMPLATES_DIR = "templates"


def get_claude_dir(project_path: Path) -> Path:
    """Get the .claude directory path for a project."""
    return project_path / CLAUDE_DIR


def get_claude_md_path(project_path: Path) -> Path:
    """Get the root guidance document path for a project."""
    return project_path / CLAUDE_MD


def get_cursor_rules_dir(project_path: Path) -> Path:
    """Get the .cursor/rules directory path for a project."""
    return project_path / CURSOR_DIR / CURSOR_RULES_DIR


def get_config_path(project_path: Path) -> Path:
    """Get the superagents.json settings path for a project."""
    return project_path / CONFIG_FILE


def get_roadmap_path(project_path: Path) -> Path:
    """Get the ROADMAP.md path for a project."""
    return project_path / ROADMAP_FILE


def get_templates_dir(home: Path | None = None) -> Path:
    """Get the per-user custom templates directory."""
    return (home or Path.home()) / USER_DIR / TEMPLATES_DIR


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists and return its path."""
    path.mkdir(parents=True, exist_ok=True)
    return path
