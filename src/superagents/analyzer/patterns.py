"""Structural pattern detection.

The project tree is walked once and every probe is an independent
gitignore-style glob match over that file list. A probe that fails counts
as zero matches, and probes with zero matches are left out of the result
entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from superagents.analyzer.ignore import IgnoreRules
from superagents.analyzer.probe import match_files, run_probe, walk_files
from superagents.models.codebase import Pattern, PatternType

SOURCE_EXTENSIONS = ("ts", "tsx", "js", "jsx", "mjs", "cjs", "vue", "svelte")
SCRIPT_EXTENSIONS = ("ts", "tsx", "js", "jsx", "mjs", "cjs")


def _under_dirs(dir_names: tuple[str, ...], extensions: tuple[str, ...]) -> list[str]:
    """Globs for source files anywhere below directories named ``dir_names``."""
    return [f"**/{d}/**/*.{ext}" for d in dir_names for ext in extensions]


@dataclass(frozen=True)
class PatternProbe:
    type: PatternType
    globs: tuple[str, ...]
    confidence: float
    description: str


# Exact framework conventions weigh 1.0, generic directory names less
PATTERN_PROBES: tuple[PatternProbe, ...] = (
    PatternProbe(
        PatternType.API_ROUTES,
        ("**/app/**/route.ts", "**/app/**/route.js"),
        1.0,
        "Next.js App Router API routes",
    ),
    PatternProbe(
        PatternType.SERVER_ACTIONS,
        (
            "**/app/**/actions.ts",
            "**/app/**/actions.js",
            *_under_dirs(("actions",), SCRIPT_EXTENSIONS),
        ),
        0.8,
        "Server actions",
    ),
    PatternProbe(
        PatternType.COMPONENTS,
        tuple(_under_dirs(("components",), ("tsx", "jsx", "vue", "svelte"))),
        1.0,
        "UI components",
    ),
    PatternProbe(
        PatternType.SERVICES,
        tuple(_under_dirs(("services", "service"), SCRIPT_EXTENSIONS)),
        0.9,
        "Service layer",
    ),
    PatternProbe(
        PatternType.MODELS,
        tuple(_under_dirs(("models", "entities", "schemas"), SCRIPT_EXTENSIONS)),
        0.8,
        "Data models and schemas",
    ),
    PatternProbe(
        PatternType.CONTROLLERS,
        tuple(_under_dirs(("controllers", "controller"), SCRIPT_EXTENSIONS)),
        0.9,
        "Request controllers",
    ),
    PatternProbe(
        PatternType.MIDDLEWARE,
        tuple(_under_dirs(("middleware", "middlewares"), SCRIPT_EXTENSIONS)),
        0.9,
        "Middleware",
    ),
    PatternProbe(
        PatternType.HOOKS,
        tuple(_under_dirs(("hooks", "composables"), SCRIPT_EXTENSIONS)),
        0.8,
        "Hooks and composables",
    ),
    PatternProbe(
        PatternType.UTILS,
        tuple(_under_dirs(("utils", "helpers", "lib"), SCRIPT_EXTENSIONS)),
        0.7,
        "Utility modules",
    ),
    PatternProbe(
        PatternType.TESTS,
        tuple(
            f"**/*.{kind}.{ext}"
            for kind in ("test", "spec")
            for ext in SCRIPT_EXTENSIONS
        ),
        0.9,
        "Test files",
    ),
)


def run_pattern_probe(files: list[str], probe: PatternProbe) -> Pattern | None:
    """Run one probe over the walked files; None when it matches nothing or fails."""
    paths = run_probe(
        f"pattern {probe.type.value}",
        match_files,
        files,
        list(probe.globs),
        default=[],
    )
    if not paths:
        return None
    return Pattern(
        type=probe.type,
        paths=tuple(paths),
        confidence=probe.confidence,
        description=probe.description,
    )


def detect_patterns(
    project_root: Path,
    ignore: IgnoreRules,
    probes: tuple[PatternProbe, ...] = PATTERN_PROBES,
) -> list[Pattern]:
    """Run every probe and keep the patterns with at least one match."""
    files = run_probe("pattern walk", walk_files, project_root, ignore, default=[])
    patterns: list[Pattern] = []
    for probe in probes:
        pattern = run_pattern_probe(files, probe)
        if pattern is not None:
            patterns.append(pattern)
    return patterns
