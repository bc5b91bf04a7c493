"""Main pipeline orchestration."""

import json
import math
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Union

from bs4 import BeautifulSoup
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from agenda_pipeline.extractors import extract_agenda
from agenda_pipeline.models import AgendaItem

console = Console(stderr=True)


class HTMLDocument(BaseModel):
    """A schedule page read from disk."""

    path: Path
    html: str


Document = Union[str, BeautifulSoup, HTMLDocument]


def load_documents(directory: Path) -> list[HTMLDocument]:
    """Read every .html file directly inside a directory, sorted by name.

    Bytes that are not valid UTF-8 become U+FFFD instead of failing the run.
    """
    paths = sorted(p for p in Path(directory).glob("*.html") if p.is_file())
    return [HTMLDocument(path=p, html=p.read_text(encoding="utf-8", errors="replace")) for p in paths]


def _extract_one(document: Document) -> list[AgendaItem]:
    if isinstance(document, HTMLDocument):
        items = extract_agenda(document.html, source=document.path.name)
        console.print(f"[dim]{document.path.name}: {len(items)} agenda items[/dim]")
        return items
    return extract_agenda(document)


def _start_key(item: AgendaItem) -> tuple:
    """Sort key for start times.

    Start times are epoch-like strings, so numeric values compare as
    numbers. Anything else (including nan/inf) compares as text after
    them; missing last.
    """
    if item.start_utc is None:
        return (2, 0.0, "")
    try:
        value = float(item.start_utc)
    except ValueError:
        return (1, 0.0, item.start_utc)
    if not math.isfinite(value):
        return (1, 0.0, item.start_utc)
    return (0, value, "")


def sort_items(items: Iterable[AgendaItem]) -> list[AgendaItem]:
    """Stable sort by start time."""
    return sorted(items, key=_start_key)


def dedup_key(item: AgendaItem) -> tuple[str, str, Optional[str]]:
    """Composite identity of an agenda item.

    Presenters, tags and links are not part of it.
    """
    return (item.event_title, item.location, item.start_utc)


def deduplicate(items: Iterable[AgendaItem]) -> list[AgendaItem]:
    """Keep the first item for each dedup key."""
    seen = set()
    unique = []
    for item in items:
        key = dedup_key(item)
        if key not in seen:
            seen.add(key)
            unique.append(item)
    return unique


def merge_all(documents: Iterable[Document], workers: int = 1) -> list[AgendaItem]:
    """Extract, concatenate, sort and deduplicate a set of documents.

    Any MissingRequiredField aborts the whole merge.

    Args:
        documents: Raw HTML strings, parsed soups or loaded HTMLDocuments
        workers: Documents extracted concurrently (1 = sequential)

    Returns:
        Agenda items sorted by start time, duplicates removed.
    """
    documents = list(documents)

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in input order, keeping the concatenation stable
            per_document = list(executor.map(_extract_one, documents))
    else:
        per_document = [_extract_one(doc) for doc in documents]

    combined = [item for items in per_document for item in items]
    return deduplicate(sort_items(combined))


def run_pipeline(directory: Path, workers: int = 1) -> list[AgendaItem]:
    """Run the full pipeline over a directory of schedule pages.

    1. Load every .html file
    2. Extract agenda rows from each page
    3. Sort by start time and drop duplicates
    """
    console.print(f"\n[bold cyan]Parsing schedule pages in {directory}[/bold cyan]\n")

    documents = load_documents(directory)
    if not documents:
        console.print("[yellow]No .html files found[/yellow]")
        return []
    console.print(f"[dim]Pages found: {len(documents)}[/dim]")

    items = merge_all(documents, workers=workers)

    console.print(f"[green]Pipeline complete: {len(items)} agenda items[/green]\n")
    return items


def render_json(items: Iterable[AgendaItem]) -> str:
    """Serialize items as one compact JSON array."""
    return json.dumps(
        [item.to_record() for item in items],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def print_agenda_summary(items: list[AgendaItem], limit: int = 20) -> None:
    """Print a summary table of agenda items."""
    table = Table(title=f"Agenda Summary (showing {min(len(items), limit)} of {len(items)})")
    table.add_column("Start", style="magenta")
    table.add_column("Title", style="cyan", max_width=40)
    table.add_column("Location", style="green", max_width=25)
    table.add_column("Presenters", style="yellow", max_width=30)
    table.add_column("Tags", style="blue", max_width=25)

    for item in items[:limit]:
        presenters = ", ".join(p.name for p in item.presenters[:3]) or "-"
        tags = ", ".join(item.tags[:3]) if item.tags else "-"
        table.add_row(
            item.start_utc or "?",
            item.event_title[:40],
            item.location[:25],
            presenters,
            tags,
        )

    console.print(table)


def print_stats(items: list[AgendaItem]) -> None:
    """Print statistics about the agenda."""
    console.print("\n[bold]Statistics[/bold]")
    console.print(f"  Agenda items: {len(items)}")

    with_link = sum(1 for item in items if item.event_link)
    non_primary = sum(1 for item in items if item.primary_session_id)
    with_tags = sum(1 for item in items if item.tags)
    console.print(f"  With event link: {with_link}")
    console.print(f"  Part of a shared session: {non_primary}")
    console.print(f"  With tags: {with_tags}")

    locations = {}
    for item in items:
        locations[item.location] = locations.get(item.location, 0) + 1
    top_locations = sorted(locations.items(), key=lambda x: x[1], reverse=True)[:5]
    console.print(f"  Top locations: {dict(top_locations)}")

    tags = {}
    for item in items:
        for tag in item.tags or []:
            tags[tag] = tags.get(tag, 0) + 1
    top_tags = sorted(tags.items(), key=lambda x: x[1], reverse=True)[:5]
    console.print(f"  Top tags: {dict(top_tags)}")
