"""Output modules for CLI display and file writing."""

from superagents.output.json_writer import write_analysis
from superagents.output.tree import display_analysis
from superagents.output.writer import write_outputs

__all__ = ["display_analysis", "write_analysis", "write_outputs"]
