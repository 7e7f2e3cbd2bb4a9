"""Command-line interface for Prompt Studio."""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..analysis.analyzer import PromptAnalyzer
from ..config import Config
from ..core.models import PromptAnalysis, Readiness, Scene, readiness_for_score
from ..core.scenes import has_content, iter_analyze_all, project_summary, renumber
from ..generators.prompt_optimizer import PromptOptimizer
from ..generators.report_generator import ReportGenerator
from ..parsers.record_csv import RecordFormatError, load_scenes, save_scenes

app = typer.Typer(
    name="prompt-studio",
    help="Score and optimize scene prompts for image, video and voice generation",
)
console = Console()

READINESS_COLORS = {
    Readiness.PRODUCTION_READY: "green",
    Readiness.GOOD: "blue",
    Readiness.NEEDS_WORK: "yellow",
    Readiness.POOR: "red",
}


def _colored(score: int) -> str:
    color = READINESS_COLORS[readiness_for_score(score)]
    return f"[{color}]{score}[/{color}]"


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Prompt Studio command-line tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _load(csv_file: Path) -> List[Scene]:
    if not csv_file.exists():
        console.print(f"[red]Error: File not found: {csv_file}[/red]")
        raise typer.Exit(1)
    try:
        return load_scenes(csv_file)
    except RecordFormatError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _analysis_table(analysis: PromptAnalysis) -> Table:
    table = Table(title="Prompt Analysis")
    table.add_column("Dimension", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Issues")
    table.add_column("Suggestions")

    for name, block in analysis.blocks.items():
        table.add_row(
            name.capitalize(),
            _colored(block.score),
            "\n".join(block.issues) or "-",
            "\n".join(block.suggestions) or "-",
        )
    return table


@app.command()
def analyze(
    image_prompt: str = typer.Argument(..., help="Image prompt text"),
    narration: str = typer.Argument("", help="Narration script text"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
):
    """Score one scene's prompts for image, video and voice generation."""
    analysis = PromptAnalyzer().analyze(image_prompt, narration)

    if as_json:
        typer.echo(json.dumps(analysis.to_dict(), indent=2))
        return

    console.print(_analysis_table(analysis))
    overall = analysis.overall
    color = READINESS_COLORS[overall.readiness]
    console.print(Panel(
        f"Overall score: [{color}]{overall.score}/100[/{color}]\n"
        f"Readiness: [{color}]{overall.readiness.value}[/{color}]",
        title="Overall",
    ))


@app.command()
def optimize(
    image_prompt: str = typer.Argument(..., help="Image prompt text"),
    narration: str = typer.Argument("", help="Narration script text"),
    section: str = typer.Option("full", help="Output section: image, video, voice, full"),
):
    """Rewrite prompts to add missing image, motion and narration signals."""
    optimizer = PromptOptimizer()

    if section == "image":
        result = optimizer.optimize_image_prompt(image_prompt)
    elif section == "video":
        result = optimizer.optimize_video_prompt(image_prompt)
    elif section == "voice":
        result = optimizer.optimize_voice_script(narration)
    elif section == "full":
        result = optimizer.optimize_full_prompt(image_prompt, narration)
    else:
        console.print(f"[red]Unknown section: {section}[/red]")
        raise typer.Exit(1)

    typer.echo(result)


@app.command()
def analyze_csv(
    csv_file: Path = typer.Argument(..., help="Scene record CSV file"),
    as_json: bool = typer.Option(False, "--json", help="Print scenes and summary as JSON"),
):
    """Analyze every scene in a record CSV and print the project summary."""
    scenes = _load(csv_file)

    if not has_content(scenes):
        console.print("[red]No content: add text to at least one scene[/red]")
        raise typer.Exit(1)

    analyzed = list(scenes)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        console=console,
        transient=True,
        disable=as_json,
    ) as progress:
        task = progress.add_task("Analyzing scenes...", total=len(scenes))
        for index, scene in iter_analyze_all(scenes):
            analyzed[index] = scene
            progress.advance(task)

    summary = project_summary(analyzed)

    if as_json:
        typer.echo(json.dumps({
            "scenes": [scene.to_dict() for scene in analyzed],
            "summary": summary.to_dict() if summary else None,
        }, indent=2))
        return

    table = Table(title=f"Scenes: {csv_file.name}")
    table.add_column("Scene", justify="right")
    for column in ("Image", "Video", "Voice", "Overall"):
        table.add_column(column, justify="right")
    table.add_column("Readiness")

    for scene in analyzed:
        if scene.analysis is None:
            table.add_row(str(scene.order), "-", "-", "-", "-", "not analyzed")
            continue
        a = scene.analysis
        table.add_row(
            str(scene.order),
            _colored(a.image.score),
            _colored(a.video.score),
            _colored(a.voice.score),
            _colored(a.overall.score),
            a.overall.readiness.value,
        )
    console.print(table)

    color = READINESS_COLORS[summary.readiness]
    console.print(Panel(
        f"Project score: [{color}]{summary.score}/100[/{color}]\n"
        f"Readiness: [{color}]{summary.readiness.value}[/{color}]\n"
        f"Analyzed scenes: {summary.analyzed_count} of {summary.scene_count}",
        title="Project Summary",
    ))


@app.command()
def optimize_csv(
    csv_file: Path = typer.Argument(..., help="Scene record CSV file"),
    output: Optional[Path] = typer.Option(None, help="Output CSV path"),
    show: bool = typer.Option(False, "--show", help="Also print the optimized prompts"),
):
    """Write a record CSV with every scene's prompts optimized."""
    scenes = _load(csv_file)
    optimizer = PromptOptimizer()

    optimized = []
    changes = 0
    for scene in scenes:
        image = optimizer.optimize_image_prompt(scene.image_prompt)
        voice = optimizer.optimize_voice_script(scene.narration_script)
        changes += len(optimizer.get_changes_report(scene.image_prompt, image))
        changes += len(optimizer.get_changes_report(scene.narration_script, voice))
        optimized.append(
            scene.with_text("image_prompt", image).with_text("narration_script", voice)
        )

    output = output or Config.OUTPUT_DIR / f"{csv_file.stem}_optimized.csv"
    save_scenes(output, optimized)

    if show:
        typer.echo(optimizer.format_optimized_scenes(scenes))

    console.print(Panel(
        f"[green]Prompts optimized![/green]\n\n"
        f"Scenes: {len(optimized)}\n"
        f"Clauses added: {changes}\n"
        f"Output: {output}",
        title="Optimization Complete",
    ))


@app.command()
def report(
    csv_file: Path = typer.Argument(..., help="Scene record CSV file"),
    output: Optional[Path] = typer.Option(None, help="Output Markdown path"),
    title: Optional[str] = typer.Option(None, help="Report title"),
):
    """Write a Markdown readiness report for a record CSV."""
    scenes = _load(csv_file)
    analyzed = [scene for _, scene in iter_analyze_all(scenes)]

    output = output or Config.OUTPUT_DIR / f"{csv_file.stem}_report.md"
    path = ReportGenerator().write(analyzed, output, title=title or csv_file.stem)

    summary = project_summary(analyzed)
    console.print(Panel(
        f"[green]Report generated![/green]\n\n"
        f"Output: {path}\n"
        f"Project score: {summary.score if summary else 'n/a'}",
        title="Readiness Report",
    ))


@app.command()
def template(
    output: Path = typer.Option(Path("scenes.csv"), help="Output CSV path"),
    scenes: int = typer.Option(3, min=1, help="Number of blank scenes"),
):
    """Write a starter record CSV with numbered blank scenes."""
    if output.exists():
        console.print(f"[red]Error: File already exists: {output}[/red]")
        raise typer.Exit(1)

    save_scenes(output, renumber(Scene() for _ in range(scenes)))
    console.print(f"[green]Template written:[/green] {output} ({scenes} scenes)")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
