"""JSON output writers for analysis results."""

import json
from pathlib import Path

from superagents import __version__
from superagents.models.codebase import CodebaseAnalysis


def analysis_to_dict(analysis: CodebaseAnalysis, include_content: bool = False) -> dict:
    """Serialize an analysis; sampled file contents are omitted unless asked for."""
    data = analysis.to_dict()
    if not include_content:
        data["sampled_files"] = [
            {"path": f.path, "purpose": f.purpose, "lines": len(f.content.splitlines())}
            for f in analysis.sampled_files
        ]
    return {"version": "1.0", "superagents_version": __version__, "analysis": data}


def write_analysis(
    analysis: CodebaseAnalysis, output_path: Path, include_content: bool = False
) -> None:
    """Write an analysis JSON file."""
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(analysis_to_dict(analysis, include_content), f, indent=2)


def load_analysis(results_path: Path) -> dict:
    """Load an analysis JSON file."""
    with open(results_path, "r", encoding="utf-8") as f:
        return json.load(f)
