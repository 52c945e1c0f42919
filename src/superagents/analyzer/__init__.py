"""Codebase analysis: classification, patterns, sampling and recommendations."""

from superagents.analyzer.core import CodebaseAnalyzer, analyze
from superagents.analyzer.ignore import IgnoreRules, resolve_ignore_rules
from superagents.analyzer.recommend import recommend

__all__ = [
    "CodebaseAnalyzer",
    "IgnoreRules",
    "analyze",
    "recommend",
    "resolve_ignore_rules",
]
