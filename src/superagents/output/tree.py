"""Rich visualization of codebase analysis results."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from superagents.models.codebase import CodebaseAnalysis, Pattern, Recommendation

console = Console()

# Paths shown per pattern before collapsing the rest
MAX_PATHS_SHOWN = 5


def _confidence_color(confidence: float) -> str:
    """Get color based on confidence weight."""
    if confidence >= 0.9:
        return "green"
    if confidence >= 0.8:
        return "yellow"
    return "dim"


def build_patterns_tree(
    patterns: Sequence[Pattern], root_label: str, verbose: bool = False
) -> Tree:
    """Build a Rich tree of detected patterns and their files."""
    root = Tree(f"[bold]{root_label}[/]", guide_style="dim")

    if not patterns:
        root.add("[yellow]No structural patterns detected[/]")
        return root

    for pattern in patterns:
        label = Text()
        label.append(pattern.type.value, style="cyan bold")
        label.append(f" ({len(pattern.paths)} files, ", style="dim")
        label.append(
            f"confidence: {pattern.confidence:.1f}",
            style=_confidence_color(pattern.confidence),
        )
        label.append(f") {pattern.description}", style="dim")
        node = root.add(label)

        shown = pattern.paths if verbose else pattern.paths[:MAX_PATHS_SHOWN]
        for path in shown:
            node.add(f"[yellow]{escape(path)}[/]")
        hidden = len(pattern.paths) - len(shown)
        if hidden > 0:
            node.add(f"[dim]... {hidden} more[/]")

    return root


def build_monorepo_tree(analysis: CodebaseAnalysis) -> Tree | None:
    """Build a tree of workspace packages, or None for single-package projects."""
    monorepo = analysis.monorepo
    if monorepo is None:
        return None

    tool = monorepo.tool.value if monorepo.tool else "unknown"
    root = Tree(f"[bold]Monorepo[/] ({tool})", guide_style="dim")
    for package in monorepo.packages:
        marker = "" if package.has_manifest else " [dim](no package.json)[/]"
        root.add(f"[cyan]{package.name}[/] [dim]{package.relative_path}[/]{marker}")
    return root


def build_recommendations_table(
    title: str, recommendations: Sequence[Recommendation]
) -> Table:
    """Build a table of recommendations with their reasons."""
    table = Table(title=title, title_justify="left", show_lines=False)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Score", justify="right")
    table.add_column("Why")

    for rec in recommendations:
        table.add_row(rec.name, f"{rec.score:.1f}", "\n".join(rec.reasons))
    return table


def build_summary_table(analysis: CodebaseAnalysis) -> Table:
    """Build the key/value overview of an analysis."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    framework = analysis.framework.value if analysis.framework else "none"
    table.add_row("Project type", analysis.project_type.value)
    table.add_row("Language", analysis.language or "unknown")
    table.add_row("Framework", framework)
    table.add_row("Dependencies", str(len(analysis.dependencies)))
    table.add_row("Dev dependencies", str(len(analysis.dev_dependencies)))
    table.add_row("Sampled files", str(len(analysis.sampled_files)))
    table.add_row("Analysis time", f"{analysis.analysis_time_ms} ms")
    return table


def display_analysis(analysis: CodebaseAnalysis, verbose: bool = False) -> None:
    """Display a full analysis to the console."""
    console.print(build_summary_table(analysis))
    console.print()
    console.print(
        build_patterns_tree(
            analysis.detected_patterns, analysis.project_root.name, verbose
        )
    )

    monorepo_tree = build_monorepo_tree(analysis)
    if monorepo_tree is not None:
        console.print()
        console.print(monorepo_tree)

    console.print()
    console.print(build_recommendations_table("Agents", analysis.recommendations.agents))
    console.print(build_recommendations_table("Skills", analysis.recommendations.skills))

    if verbose and analysis.sampled_files:
        console.print("\n[bold]Sampled files:[/]")
        for sampled in analysis.sampled_files:
            console.print(f"  • [yellow]{escape(sampled.path)}[/] [dim]{sampled.purpose}[/]")
