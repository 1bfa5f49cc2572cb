"""Command-line interface for the fact-check engine using Typer and Rich."""

import json
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from factcheck_system import __version__
from factcheck_system.config.logging import get_logger
from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import (
    Classification,
    FactCheckResult,
    SecurityStatus,
    UrlPreview,
    VerificationStatus,
)
from factcheck_system.pipeline import FactCheckPipeline
from factcheck_system.sifters.credibility import UrlSafetyInspector
from factcheck_system.sifters.verification import build_draw_source

app = typer.Typer(
    help="Heuristic fact-check engine - credibility verdicts for text and source URLs",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")

CLASSIFICATION_STYLES = {
    Classification.LIKELY_REAL: "bold green",
    Classification.LIKELY_FAKE: "bold red",
    Classification.UNVERIFIABLE: "bold yellow",
}

STATUS_MARKERS = {
    VerificationStatus.VERIFIED: "[green]✓ verified[/green]",
    VerificationStatus.DISPUTED: "[red]⚑ disputed[/red]",
    VerificationStatus.UNVERIFIED: "[dim]? unverified[/dim]",
}

SECURITY_STYLES = {
    SecurityStatus.SAFE: "green",
    SecurityStatus.SUSPICIOUS: "yellow",
    SecurityStatus.DANGEROUS: "red",
    SecurityStatus.UNKNOWN: "dim",
}


def _read_text(text: Optional[str]) -> str:
    """Text argument, or stdin when omitted and piped."""
    if text:
        return text
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def render_result(result: FactCheckResult) -> None:
    """Print a FactCheckResult as panels and tables."""
    style = CLASSIFICATION_STYLES[result.classification]
    console.print(Panel(
        f"[{style}]{result.classification.value}[/{style}] "
        f"({result.confidence_score}% confidence)",
        title="Verdict",
        border_style=style.split()[-1],
    ))

    scores = Table(title="Scores", show_header=True, header_style="bold magenta")
    scores.add_column("Component", style="cyan", width=22)
    scores.add_column("Score", justify="right")
    scores.add_row("Source credibility", str(result.source_credibility))
    scores.add_row("Cross verification", str(result.cross_verification))
    scores.add_row("Content consistency", str(result.content_consistency))
    console.print(scores)

    console.print("\n[bold]Analysis reasoning:[/bold]")
    for reason in result.reasoning:
        console.print(f"  • {reason}")

    if result.entities:
        entities = Table(title="Key entities detected", show_header=True, header_style="bold magenta")
        entities.add_column("Entity", style="yellow")
        entities.add_column("Kind", style="cyan")
        entities.add_column("Mentions", justify="right")
        entities.add_column("Status")
        for entity in result.entities:
            entities.add_row(
                entity.name,
                entity.kind.value,
                str(entity.mention_count),
                STATUS_MARKERS.get(entity.verification_status, ""),
            )
        console.print(entities)

    if result.known_patterns:
        console.print("\n[bold red]Known misinformation patterns:[/bold red]")
        for pattern in result.known_patterns:
            console.print(f"  ⚠ {pattern}")


def render_preview(preview: UrlPreview) -> None:
    """Print a UrlPreview as a panel."""
    style = SECURITY_STYLES[preview.security_status]
    lines = [
        f"[bold]{preview.title or preview.url}[/bold]",
        preview.description or "",
        "",
        f"Security: [{style}]{preview.security_status.value}[/{style}] "
        f"(score {preview.security_score})",
    ]
    if preview.threat_types:
        lines.append(f"Threats: {', '.join(preview.threat_types)}")
    console.print(Panel("\n".join(lines), title=preview.url, border_style=style))


@app.command()
def analyze(
    text: Optional[str] = typer.Argument(None, help="Text to analyze (reads stdin if omitted)"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Source URL of the content"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible random draws"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """
    Analyze text (and optional source URL) for credibility.
    """
    content = _read_text(text)
    if not content.strip():
        console.print("[red]✗[/red] No text to analyze")
        raise typer.Exit(1)

    logger.info("Analyze command invoked", content_length=len(content), has_source=bool(source))

    draws = build_draw_source(
        seed=seed if seed is not None else settings.verification_seed,
        salt=settings.draw_salt,
    )
    result = FactCheckPipeline(draws=draws).analyze(content, source)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    render_result(result)


@app.command()
def preview(
    url: str = typer.Argument(..., help="URL to preview"),
    as_json: bool = typer.Option(False, "--json", help="Print the preview as JSON"),
) -> None:
    """
    Show the URL-safety preview for a link.
    """
    logger.info("Preview command invoked")
    result = UrlSafetyInspector().inspect(url)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    render_preview(result)


@app.command()
def status() -> None:
    """
    Display engine configuration.
    """
    table = Table(title="Fact-Check Engine Status", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="yellow")

    draw_mode = (
        f"seeded ({settings.verification_seed})"
        if settings.verification_seed is not None
        else "hash"
    )
    table.add_row("Draw source", draw_mode)
    table.add_row("Max entities", str(settings.max_entities))
    table.add_row(
        "Thresholds",
        f"Real >= {settings.real_threshold}, Fake <= {settings.fake_threshold}",
    )
    table.add_row("Logging", f"Level: {settings.log_level}, Format: {settings.log_format}")

    console.print(table)


@app.command()
def version() -> None:
    """Display version information."""
    console.print("[bold]Fact-Check Engine[/bold]")
    console.print(f"Version: {__version__}")


if __name__ == "__main__":
    app()
