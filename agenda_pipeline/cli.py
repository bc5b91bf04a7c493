"""CLI for the agenda pipeline."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from agenda_pipeline.config import DEFAULT_HTML_DIR
from agenda_pipeline.extractors import AgendaError, MissingRequiredField
from agenda_pipeline.pipeline import (
    print_agenda_summary,
    print_stats,
    render_json,
    run_pipeline,
)

app = typer.Typer(
    name="agenda-pipeline",
    help="Conference agenda extraction pipeline",
    add_completion=False,
)
# stdout is reserved for the JSON output
console = Console(stderr=True)


def _run(directory: Path, workers: int):
    if not directory.is_dir():
        console.print(f"[red]Error: {directory} is not a directory[/red]")
        raise typer.Exit(1)

    try:
        return run_pipeline(directory, workers=workers)
    except AgendaError as e:
        console.print(f"[red]Error: {e}[/red]")
        if isinstance(e, MissingRequiredField):
            console.print("[dim]Unknown markup variant, the row above needs extractor support[/dim]")
        raise typer.Exit(1)


@app.command()
def parse(
    directory: Path = typer.Argument(
        Path(DEFAULT_HTML_DIR),
        help="Directory holding the schedule .html pages (default: AGENDA_HTML_DIR env var or .)",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout"),
    workers: int = typer.Option(1, "--workers", "-w", help="Pages parsed concurrently"),
):
    """Parse all schedule pages into one sorted, deduplicated JSON array."""
    items = _run(directory, workers)
    payload = render_json(items)

    if output:
        output.write_text(payload, encoding="utf-8")
        console.print(f"[green]Wrote {len(items)} agenda items to {output}[/green]")
    else:
        typer.echo(payload)


@app.command()
def summary(
    directory: Path = typer.Argument(
        Path(DEFAULT_HTML_DIR),
        help="Directory holding the schedule .html pages (default: AGENDA_HTML_DIR env var or .)",
    ),
    limit: int = typer.Option(20, "--limit", "-l", help="Rows to show in the table"),
    show_stats: bool = typer.Option(True, "--stats/--no-stats", help="Show statistics"),
    workers: int = typer.Option(1, "--workers", "-w", help="Pages parsed concurrently"),
):
    """Parse schedule pages and display a summary."""
    items = _run(directory, workers)

    print_agenda_summary(items, limit=limit)

    if show_stats:
        print_stats(items)


if __name__ == "__main__":
    app()
