"""Top-level codebase analysis."""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path

from superagents.analyzer.classifier import (
    detect_framework,
    detect_language,
    detect_project_type,
)
from superagents.analyzer.dependencies import catalog_dependencies
from superagents.analyzer.existing import detect_existing_config
from superagents.analyzer.ignore import IgnoreRules, resolve_ignore_rules
from superagents.analyzer.manifest import read_manifest
from superagents.analyzer.monorepo import detect_monorepo
from superagents.analyzer.patterns import detect_patterns
from superagents.analyzer.probe import run_probe
from superagents.analyzer.recommend import recommend
from superagents.analyzer.sampler import FileSampler
from superagents.config import SamplingLimits
from superagents.logging import get_logger
from superagents.models.codebase import CodebaseAnalysis, ProjectType

logger = get_logger("analyzer")


class CodebaseAnalyzer:
    """Analyze one project tree.

    The ignore rules are resolved once per run and handed to every scan
    that walks the tree (pattern probes and the file sampler).
    """

    def __init__(
        self,
        project_root: Path,
        limits: SamplingLimits | None = None,
        extra_ignores: list[str] | None = None,
        max_workers: int = 4,
    ) -> None:
        self.project_root = project_root
        self.limits = limits or SamplingLimits()
        self.extra_ignores = extra_ignores or []
        self.max_workers = max_workers

    def analyze(self) -> CodebaseAnalysis:
        """Run every analysis step and return one immutable record."""
        start_time = time.time()
        root = self.project_root

        ignore = IgnoreRules(resolve_ignore_rules(root, self.extra_ignores))
        logger.debug("Analyzing %s with %d ignore rules", root, len(ignore.patterns))

        # Independent probes; no shared state between them
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            type_future = executor.submit(
                run_probe, "project type", detect_project_type, root,
                default=ProjectType.UNKNOWN,
            )
            framework_future = executor.submit(
                run_probe, "framework", detect_framework, root, default=None
            )
            monorepo_future = executor.submit(
                run_probe, "monorepo", detect_monorepo, root, default=None
            )
            patterns_future = executor.submit(
                run_probe, "patterns", detect_patterns, root, ignore, default=[]
            )

            project_type = type_future.result()
            framework = framework_future.result()
            monorepo = monorepo_future.result()
            patterns = patterns_future.result()

        manifest = read_manifest(root)
        dependencies = catalog_dependencies(manifest, "dependencies")
        dev_dependencies = catalog_dependencies(manifest, "devDependencies")

        sampled_files = FileSampler(root, ignore, self.limits).sample(
            project_type, framework, patterns
        )
        recommendations = recommend(
            project_type, framework, patterns, dependencies + dev_dependencies
        )

        return CodebaseAnalysis(
            project_root=root,
            project_type=project_type,
            language=detect_language(root, project_type),
            framework=framework,
            dependencies=tuple(dependencies),
            dev_dependencies=tuple(dev_dependencies),
            detected_patterns=tuple(patterns),
            recommendations=recommendations,
            sampled_files=tuple(sampled_files),
            monorepo=monorepo,
            existing_config=run_probe(
                "existing config", detect_existing_config, root, default=None
            ),
            ignore_rules=ignore.patterns,
            analyzed_at=datetime.now().isoformat(),
            analysis_time_ms=int((time.time() - start_time) * 1000),
        )


def analyze(
    project_root: Path,
    limits: SamplingLimits | None = None,
    extra_ignores: list[str] | None = None,
) -> CodebaseAnalysis:
    """Analyze a project tree with the given sampling limits."""
    return CodebaseAnalyzer(project_root, limits, extra_ignores).analyze()
