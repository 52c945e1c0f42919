"""Configuration loading and saving for SuperAgents."""

import json
from dataclasses import dataclass
from pathlib import Path

from superagents.paths import get_config_path

DEFAULT_MAX_FILES = 20
DEFAULT_MAX_FILE_BYTES = 100_000
DEFAULT_MAX_LINES = 500


@dataclass(frozen=True)
class SamplingLimits:
    """Hard caps applied by the file sampler."""

    max_files: int = DEFAULT_MAX_FILES
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    max_lines: int = DEFAULT_MAX_LINES


def load_config(config_path: Path) -> dict:
    """Load a superagents.json configuration file."""
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_config(config: dict, config_path: Path) -> None:
    """Save configuration to superagents.json."""
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)


def load_project_config(project_path: Path) -> dict:
    """Load the project's superagents.json, or an empty config if there is none."""
    config_path = get_config_path(project_path)
    if not config_path.exists():
        return {}
    return load_config(config_path)


def get_sampling_limits(config: dict) -> SamplingLimits:
    """Get file sampling caps from config."""
    analysis = config.get("analysis", {})
    return SamplingLimits(
        max_files=int(analysis.get("max_files", DEFAULT_MAX_FILES)),
        max_file_bytes=int(analysis.get("max_file_bytes", DEFAULT_MAX_FILE_BYTES)),
        max_lines=int(analysis.get("max_lines", DEFAULT_MAX_LINES)),
    )


def get_extra_ignores(config: dict) -> list[str]:
    """Get ignore patterns added on top of the ignore file."""
    return list(config.get("analysis", {}).get("ignore", []))


def get_llm_tool(config: dict) -> str:
    """Get the LLM command-line tool used for generation."""
    return config.get("generation", {}).get("llm", "claude")


def get_model(config: dict) -> str:
    """Get the model name written into generated agents."""
    return config.get("generation", {}).get("model", "sonnet")


def get_llm_timeout(config: dict) -> int:
    """Get the per-call LLM timeout in seconds."""
    return int(config.get("generation", {}).get("timeout", 300))


def get_target(config: dict) -> str:
    """Get the output layout ("claude" or "cursor")."""
    return config.get("generation", {}).get("target", "claude")
