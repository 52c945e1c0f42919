"""Representative file sampling for AI generation context.

Files are tried in priority order (manifest and type config, framework
config, pattern examples, entry points) and sampling stops as soon as the
file cap is reached. Missing, ignored, unreadable or oversized files are
skipped silently; long files are cut to the line cap with a marker line.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from superagents.analyzer.ignore import IgnoreRules
from superagents.analyzer.probe import run_probe
from superagents.config import SamplingLimits
from superagents.logging import get_logger
from superagents.models.codebase import (
    Framework,
    Pattern,
    ProjectType,
    SampledFile,
)
from superagents.paths import MANIFEST_FILE, TYPE_CONFIG_FILE

logger = get_logger("analyzer.sampler")

TRUNCATION_MARKER = "[... truncated ...]"

# Examples taken from each detected pattern
FILES_PER_PATTERN = 3

FRAMEWORK_CONFIG_FILES: dict[ProjectType, tuple[tuple[str, ...], str]] = {
    ProjectType.NEXTJS: (
        ("next.config.js", "next.config.mjs", "next.config.ts"),
        "Next.js configuration",
    ),
    ProjectType.REACT: (
        ("vite.config.ts", "vite.config.js"),
        "Vite configuration",
    ),
    ProjectType.VUE: (
        ("vite.config.ts", "vite.config.js", "vue.config.js", "nuxt.config.ts"),
        "Vue configuration",
    ),
    ProjectType.ANGULAR: (("angular.json",), "Angular workspace configuration"),
    ProjectType.SVELTE: (
        ("svelte.config.js", "vite.config.ts", "vite.config.js"),
        "Svelte configuration",
    ),
}

# Config files keyed by framework, for frameworks the project type does not imply
FRAMEWORK_ONLY_CONFIG_FILES: dict[Framework, tuple[tuple[str, ...], str]] = {
    Framework.NUXTJS: (("nuxt.config.ts", "nuxt.config.js"), "Nuxt configuration"),
    Framework.NESTJS: (("nest-cli.json",), "NestJS CLI configuration"),
}

ENTRY_POINTS: tuple[str, ...] = (
    "src/index.ts",
    "src/index.js",
    "src/main.ts",
    "src/main.js",
    "index.ts",
    "index.js",
    "app/layout.tsx",
    "app/page.tsx",
)


def truncate_lines(content: str, max_lines: int) -> str:
    """Keep the first ``max_lines`` lines and append the truncation marker."""
    # Only "\n" separates lines; a trailing newline does not open another line
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    if len(lines) <= max_lines:
        return content

    return "\n".join(lines[:max_lines]) + "\n" + TRUNCATION_MARKER


class FileSampler:
    """Collects a bounded, ordered, duplicate-free list of sampled files."""

    def __init__(
        self,
        project_root: Path,
        ignore: IgnoreRules,
        limits: SamplingLimits | None = None,
    ) -> None:
        self.project_root = project_root
        self.ignore = ignore
        self.limits = limits or SamplingLimits()
        self._files: list[SampledFile] = []
        self._seen: set[str] = set()

    @property
    def is_full(self) -> bool:
        return len(self._files) >= self.limits.max_files

    def sample(
        self,
        project_type: ProjectType,
        framework: Framework | None,
        patterns: Sequence[Pattern],
    ) -> list[SampledFile]:
        """Sample files in priority order and return what was collected."""
        try:
            self._sample(project_type, framework, patterns)
        except Exception as e:
            logger.warning("File sampling stopped early: %s", e)
        return list(self._files)

    def _sample(
        self,
        project_type: ProjectType,
        framework: Framework | None,
        patterns: Sequence[Pattern],
    ) -> None:
        self.try_add(MANIFEST_FILE, "Project dependencies and scripts")
        self.try_add(TYPE_CONFIG_FILE, "TypeScript configuration")

        if project_type in FRAMEWORK_CONFIG_FILES:
            config_files, purpose = FRAMEWORK_CONFIG_FILES[project_type]
            for config_file in config_files:
                self.try_add(config_file, purpose)

        if framework in FRAMEWORK_ONLY_CONFIG_FILES:
            config_files, purpose = FRAMEWORK_ONLY_CONFIG_FILES[framework]
            for config_file in config_files:
                self.try_add(config_file, purpose)

        for pattern in patterns:
            for rel_path in pattern.paths[:FILES_PER_PATTERN]:
                self.try_add(rel_path, f"Example {pattern.type.value}")

        for entry_point in ENTRY_POINTS:
            self.try_add(entry_point, "Entry point file")

    def try_add(self, rel_path: str, purpose: str) -> bool:
        """Add one file if it passes every admission check."""
        if self.is_full or rel_path in self._seen:
            return False
        if self.ignore.is_excluded(rel_path):
            return False

        content = run_probe(
            f"sample {rel_path}", self._read, self.project_root / rel_path, default=None
        )
        if content is None:
            return False

        self._files.append(SampledFile(path=rel_path, content=content, purpose=purpose))
        self._seen.add(rel_path)
        return True

    def _read(self, full_path: Path) -> str | None:
        if not full_path.is_file():
            return None
        if full_path.stat().st_size > self.limits.max_file_bytes:
            return None
        # Raw bytes keep CRLF intact; undecodable bytes become U+FFFD
        content = full_path.read_bytes().decode("utf-8", errors="replace")
        return truncate_lines(content, self.limits.max_lines)


def sample_files(
    project_root: Path,
    project_type: ProjectType,
    framework: Framework | None,
    patterns: Sequence[Pattern],
    ignore: IgnoreRules,
    limits: SamplingLimits | None = None,
) -> list[SampledFile]:
    """Sample representative files for a project."""
    sampler = FileSampler(project_root, ignore, limits)
    return sampler.sample(project_type, framework, patterns)
