"""SuperAgents CLI - Codebase-aware agent configuration for AI coding assistants."""

from functools import partial
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.progress_bar import ProgressBar
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from superagents import __version__
from superagents.analyzer import CodebaseAnalyzer
from superagents.archive import export_config, import_config, preview_config
from superagents.config import (
    get_extra_ignores,
    get_llm_timeout,
    get_llm_tool,
    get_model,
    get_sampling_limits,
    get_target,
    load_project_config,
)
from superagents.generation import (
    build_agent_prompt,
    build_claude_md_prompt,
    build_skill_prompt,
    generate,
    generate_outputs,
)
from superagents.generation.llm import validate_llm_tool
from superagents.generation.templates import template_path
from superagents.logging import configure_logging, get_logger
from superagents.models import (
    CodebaseAnalysis,
    GenerationContext,
    GoalCategory,
    ProjectGoal,
    categorize_goal,
)
from superagents.output import display_analysis, write_analysis, write_outputs
from superagents.output.writer import TARGETS, output_exists
from superagents.paths import get_roadmap_path
from superagents.roadmap import parse_roadmap, summarize_progress

app = typer.Typer(
    name="superagents",
    help="Generate codebase-aware agents and skills for AI coding assistants",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()
logger = get_logger("cli")

# Characters of each prompt shown in --dry-run
PROMPT_PREVIEW_CHARS = 400


def version_callback(value: bool) -> None:
    if value:
        console.print(f"superagents version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Generate codebase-aware agents and skills for AI coding assistants."""


def _run_analysis(path: Path, config: dict) -> CodebaseAnalysis:
    """Analyze a project with a spinner."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Analyzing codebase...", total=None)
        analyzer = CodebaseAnalyzer(
            path,
            limits=get_sampling_limits(config),
            extra_ignores=get_extra_ignores(config),
        )
        analysis = analyzer.analyze()
        progress.update(task, completed=True)
    return analysis


def _load_config_or_exit(path: Path) -> dict:
    try:
        return load_project_config(path)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        console.print(f"[red]Error:[/] invalid superagents.json: {e}")
        raise typer.Exit(1)


def _resolve_project(path: Path) -> Path:
    path = path.resolve()
    if not path.is_dir():
        console.print(f"[red]Error:[/] not a directory: {path}")
        raise typer.Exit(1)
    return path


@app.command()
def analyze(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project to analyze",
    ),
    json_output: Optional[Path] = typer.Option(
        None,
        "--json",
        "-j",
        help="Also write the analysis as JSON to this file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show every detected path and the sampled files",
    ),
) -> None:
    """Analyze a codebase and show what would be generated."""
    configure_logging(verbose=verbose)
    path = _resolve_project(path)
    config = _load_config_or_exit(path)

    console.print(Panel.fit("[bold blue]SuperAgents - Codebase Analysis[/]"))
    console.print()

    analysis = _run_analysis(path, config)
    display_analysis(analysis, verbose=verbose)

    if json_output is not None:
        write_analysis(analysis, json_output)
        console.print(f"\n[green]Analysis saved to:[/] {json_output}")


def _collect_goal(goal: Optional[str], category: Optional[GoalCategory]) -> ProjectGoal:
    """Use the given goal or ask for one."""
    if not goal:
        goal = Prompt.ask("[bold]What are you building?[/]")
    goal = goal.strip()
    if not goal:
        console.print("[red]Error:[/] a project goal is required")
        raise typer.Exit(1)
    return ProjectGoal(description=goal, category=category or categorize_goal(goal))


def _show_dry_run(context: GenerationContext, target: str) -> None:
    """Show planned files and prompt previews without calling the LLM."""
    console.print(Panel.fit("[bold cyan]Dry Run Preview[/]"))
    console.print(f"\n[dim]Goal:[/] {context.goal.description} ({context.goal.category.value})")
    console.print(f"[dim]Target:[/] {target}\n")

    table = Table(title="Planned files", title_justify="left")
    table.add_column("Kind", style="cyan")
    table.add_column("Name")
    table.add_column("Source", style="dim")
    for name in context.selected_agents:
        source = "template" if template_path("agent", name).is_file() else "llm"
        table.add_row("agent", name, source)
    for name in context.selected_skills:
        source = "template" if template_path("skill", name).is_file() else "llm"
        table.add_row("skill", name, source)
    table.add_row("root", "CLAUDE.md", "llm")
    console.print(table)

    previews = [("CLAUDE.md", build_claude_md_prompt(context))]
    if context.selected_agents:
        name = context.selected_agents[0]
        previews.append((f"agent {name}", build_agent_prompt(name, context)))
    if context.selected_skills:
        name = context.selected_skills[0]
        previews.append((f"skill {name}", build_skill_prompt(name, context)))

    for label, prompt in previews:
        preview = prompt[:PROMPT_PREVIEW_CHARS]
        if len(prompt) > PROMPT_PREVIEW_CHARS:
            preview += "\n..."
        console.print(Panel(Text(preview), title=f"Prompt: {label}", title_align="left"))


@app.command("generate")
def generate_command(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project",
    ),
    goal: Optional[str] = typer.Option(
        None,
        "--goal",
        "-g",
        help="What you are building (prompted if omitted)",
    ),
    category: Optional[GoalCategory] = typer.Option(
        None,
        "--category",
        "-c",
        help="Goal category (guessed from the goal if omitted)",
    ),
    llm: Optional[str] = typer.Option(
        None,
        "--llm",
        "-l",
        help="LLM CLI tool to use (e.g., claude, kimi, opencode)",
    ),
    target: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="Output layout: claude or cursor",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show what would be generated without calling the LLM",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration without asking",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Analyze a codebase and generate agents, skills and CLAUDE.md."""
    configure_logging(verbose=verbose)
    path = _resolve_project(path)
    config = _load_config_or_exit(path)

    llm_tool = llm or get_llm_tool(config)
    target = target or get_target(config)
    if target not in TARGETS:
        console.print(f"[red]Error:[/] unknown target {target!r} (expected {', '.join(TARGETS)})")
        raise typer.Exit(1)
    try:
        validate_llm_tool(llm_tool)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    console.print(Panel.fit("[bold blue]SuperAgents - Generate[/]"))
    console.print()

    project_goal = _collect_goal(goal, category)
    analysis = _run_analysis(path, config)
    recommendations = analysis.recommendations

    context = GenerationContext(
        goal=project_goal,
        codebase=analysis,
        selected_agents=tuple(recommendations.agent_names),
        selected_skills=tuple(recommendations.skill_names),
        model=get_model(config),
    )

    if dry_run:
        _show_dry_run(context, target)
        return

    if output_exists(path, target) and not force:
        overwrite = Confirm.ask(
            "\n[bold]Existing configuration found. Overwrite it?[/]", default=False
        )
        if not overwrite:
            console.print("[yellow]Aborted.[/]")
            raise typer.Exit()

    generate_fn = partial(generate, llm_tool=llm_tool, cwd=path, timeout=get_llm_timeout(config))
    total = len(context.selected_agents) + len(context.selected_skills) + 1

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Generating...", total=total)

            def on_progress(label: str) -> None:
                progress.update(task, description=f"Generating {label}...")
                progress.advance(task)

            outputs = generate_outputs(context, generate_fn, on_progress=on_progress)

        summary = write_outputs(outputs, path, target=target, overwrite=True)
    except (RuntimeError, ValueError, OSError) as e:
        logger.debug("Generation failed", exc_info=True)
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    console.print(f"\n[green]Wrote {summary.total_files} files to:[/] {summary.output_dir}")
    if summary.agents:
        console.print(f"[dim]Agents:[/] {', '.join(summary.agents)}")
    if summary.skills:
        console.print(f"[dim]Skills:[/] {', '.join(summary.skills)}")


@app.command("export")
def export_command(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Archive path (default: superagents-config.zip in the current directory)",
    ),
) -> None:
    """Export the generated configuration as a zip archive."""
    path = _resolve_project(path)
    output = output or Path("superagents-config.zip")

    try:
        metadata = export_config(path, output)
    except (FileNotFoundError, OSError) as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Exported configuration to:[/] {output}")
    console.print(
        f"[dim]{len(metadata.agents)} agents, {len(metadata.skills)} skills"
        f"{', CLAUDE.md' if metadata.has_claude_md else ''}[/]"
    )


@app.command("import")
def import_command(
    archive: Path = typer.Argument(
        ...,
        help="Archive created by superagents export",
    ),
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing .claude/ configuration",
    ),
) -> None:
    """Import configuration from an exported archive."""
    path = _resolve_project(path)

    try:
        result = import_config(archive, path, overwrite=force)
    except (FileNotFoundError, FileExistsError, ValueError, OSError) as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Imported {result.files_written} files into:[/] {path}")
    console.print(
        f"[dim]Exported {result.metadata.exported_at} "
        f"by superagents {result.metadata.version}[/]"
    )


@app.command()
def preview(
    archive: Path = typer.Argument(
        ...,
        help="Archive created by superagents export",
    ),
) -> None:
    """Show what an exported archive contains."""
    try:
        metadata = preview_config(archive)
    except (FileNotFoundError, ValueError, OSError) as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    if metadata is None:
        console.print("[yellow]Archive has no metadata.json[/]")
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("Project", metadata.project_root)
    table.add_row("Exported", metadata.exported_at)
    table.add_row("Version", metadata.version)
    table.add_row("Agents", ", ".join(metadata.agents) or "-")
    table.add_row("Skills", ", ".join(metadata.skills) or "-")
    table.add_row("Hooks", "yes" if metadata.has_hooks else "no")
    table.add_row("CLAUDE.md", "yes" if metadata.has_claude_md else "no")
    console.print(Panel.fit(f"[bold]{archive.name}[/]"))
    console.print(table)


@app.command()
def status(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project",
    ),
) -> None:
    """Show progress through the project's ROADMAP.md."""
    path = _resolve_project(path)
    roadmap_path = get_roadmap_path(path)

    if not roadmap_path.is_file():
        console.print(f"[red]No roadmap found:[/] {roadmap_path}")
        raise typer.Exit(1)

    phases = parse_roadmap(roadmap_path.read_text(encoding="utf-8"))
    if not phases:
        console.print("[yellow]No phases found in ROADMAP.md[/]")
        return

    progress = summarize_progress(phases)
    console.print(Panel.fit("[bold blue]SuperAgents - Roadmap Status[/]"))
    console.print()

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Phase", no_wrap=True)
    table.add_column("Bar")
    table.add_column("Done", justify="right", style="dim")
    for phase in progress.phases:
        marker = "[green]✓[/]" if phase.is_complete else " "
        table.add_row(
            f"{marker} Phase {phase.number}: {phase.name}",
            ProgressBar(total=max(phase.total, 1), completed=phase.done_count, width=30),
            f"{phase.done_count}/{phase.total}",
        )
    console.print(table)

    console.print(
        f"\n[bold]Overall:[/] {progress.done}/{progress.total} tasks ({progress.percent}%)"
    )
    current = progress.current_phase
    if current is not None:
        console.print(f"[dim]Current phase:[/] {current.number}: {current.name}")


if __name__ == "__main__":
    app()
