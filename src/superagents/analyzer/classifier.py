"""Project type, framework and language classification.

Type and framework detection are deliberately asymmetric: the project type
falls back to marker files from other ecosystems, while the framework is
decided from manifest dependencies alone. Their rule tables are independent
(``react`` decides a type but never a framework).
"""

from pathlib import Path

from superagents.analyzer.manifest import merged_dependencies, read_manifest
from superagents.models.codebase import Framework, ProjectType
from superagents.paths import MANIFEST_FILE, TYPE_CONFIG_FILE

# Framework marker files, checked before the manifest
TYPE_MARKER_FILES: list[tuple[str, ProjectType]] = [
    ("next.config.js", ProjectType.NEXTJS),
    ("next.config.mjs", ProjectType.NEXTJS),
    ("next.config.ts", ProjectType.NEXTJS),
    ("angular.json", ProjectType.ANGULAR),
    ("svelte.config.js", ProjectType.SVELTE),
]

# Manifest dependency -> project type, first match wins
TYPE_DEPENDENCY_RULES: list[tuple[str, ProjectType]] = [
    ("next", ProjectType.NEXTJS),
    ("react", ProjectType.REACT),
    ("vue", ProjectType.VUE),
    ("@angular/core", ProjectType.ANGULAR),
    ("svelte", ProjectType.SVELTE),
    ("express", ProjectType.NODE),
    ("fastify", ProjectType.NODE),
    ("@nestjs/core", ProjectType.NODE),
]

# Marker files of non-JavaScript ecosystems, checked last
ECOSYSTEM_MARKER_FILES: list[tuple[str, ProjectType]] = [
    ("requirements.txt", ProjectType.PYTHON),
    ("pyproject.toml", ProjectType.PYTHON),
    ("go.mod", ProjectType.GO),
    ("Cargo.toml", ProjectType.RUST),
    ("pom.xml", ProjectType.JAVA),
    ("build.gradle", ProjectType.JAVA),
    ("composer.json", ProjectType.PHP),
    ("Gemfile", ProjectType.RUBY),
]

# .NET markers carry the project name, matched by pattern in the root
ECOSYSTEM_MARKER_GLOBS: list[tuple[str, ProjectType]] = [
    ("*.csproj", ProjectType.CSHARP),
    ("*.sln", ProjectType.CSHARP),
]

# Manifest dependency -> framework, first match wins
FRAMEWORK_DEPENDENCY_RULES: list[tuple[str, Framework]] = [
    ("next", Framework.NEXTJS),
    ("nuxt", Framework.NUXTJS),
    ("@nuxt/core", Framework.NUXTJS),
    ("vue", Framework.VUE),
    ("@angular/core", Framework.ANGULAR),
    ("svelte", Framework.SVELTE),
    ("express", Framework.EXPRESS),
    ("fastify", Framework.FASTIFY),
    ("@nestjs/core", Framework.NESTJS),
]

ECOSYSTEM_LANGUAGES: dict[ProjectType, str] = {
    ProjectType.PYTHON: "python",
    ProjectType.GO: "go",
    ProjectType.RUST: "rust",
    ProjectType.JAVA: "java",
    ProjectType.CSHARP: "csharp",
    ProjectType.PHP: "php",
    ProjectType.RUBY: "ruby",
}


def detect_project_type(project_root: Path) -> ProjectType:
    """Classify the project from marker files and manifest dependencies."""
    for marker, project_type in TYPE_MARKER_FILES:
        if (project_root / marker).exists():
            return project_type

    deps = merged_dependencies(read_manifest(project_root))
    for dep_name, project_type in TYPE_DEPENDENCY_RULES:
        if dep_name in deps:
            return project_type

    for marker, project_type in ECOSYSTEM_MARKER_FILES:
        if (project_root / marker).exists():
            return project_type

    for pattern, project_type in ECOSYSTEM_MARKER_GLOBS:
        if any(project_root.glob(pattern)):
            return project_type

    return ProjectType.UNKNOWN


def detect_framework(project_root: Path) -> Framework | None:
    """Decide the framework from manifest dependencies only."""
    manifest = read_manifest(project_root)
    if manifest is None:
        return None

    deps = merged_dependencies(manifest)
    for dep_name, framework in FRAMEWORK_DEPENDENCY_RULES:
        if dep_name in deps:
            return framework

    return None


def detect_language(project_root: Path, project_type: ProjectType) -> str | None:
    """Primary language: TypeScript if configured, else JavaScript, else by ecosystem."""
    if (project_root / TYPE_CONFIG_FILE).exists():
        return "typescript"
    if (project_root / MANIFEST_FILE).exists():
        return "javascript"
    return ECOSYSTEM_LANGUAGES.get(project_type)
