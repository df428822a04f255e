"""Dining map CLI: entry-point for all pipeline operations.

Usage:
    python cli/main.py --help

Commands:
    links    → list every anchor on the page with its position
    clean    → fetch + extract + clean, print the rows
    geocode  → look up a single query
    run      → full pipeline, optionally written to a file
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from diningmap.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import NoReturn, Optional

import typer

from diningmap.config import settings
from diningmap.errors import DiningMapError
from diningmap.locations import EXCLUDED_LABELS
from diningmap.pipeline.cleaner import clean_records
from diningmap.pipeline.geocoder import build_geocoder
from diningmap.pipeline.runner import run_pipeline
from diningmap.pipeline.table import FORMATS, write_table
from diningmap.scraper import extract_links, fetch_document

app = typer.Typer(
    name="diningmap",
    help="Scrape, geocode and correct a campus dining list.",
    no_args_is_help=True,
)


def _fail(tag: str, exc: Exception) -> NoReturn:
    typer.echo(f"[{tag}] ❌ Error: {exc}")
    raise typer.Exit(code=1)


@app.command("links")
def links(
    url: Optional[str] = typer.Option(None, help="Page to scrape (default: SOURCE_URL)."),
) -> None:
    """List every anchor on the page with its 1-based position."""
    url = url or settings.source_url
    typer.echo(f"[links] Fetching {url!r} …")
    try:
        document = fetch_document(url)
    except DiningMapError as exc:
        _fail("links", exc)

    count = 0
    for record in extract_links(document):
        count += 1
        typer.echo(f"  {record.position:>4}  {record.label.strip()!r}  {record.href}")
    typer.echo(f"[links] {count} link(s).")


@app.command("clean")
def clean(
    url: Optional[str] = typer.Option(None, help="Page to scrape (default: SOURCE_URL)."),
    start: Optional[int] = typer.Option(None, help="First anchor position to keep."),
    end: Optional[int] = typer.Option(None, help="Last anchor position to keep."),
) -> None:
    """Fetch, extract and clean the listing without geocoding it."""
    url = url or settings.source_url
    start = settings.row_range_start if start is None else start
    end = settings.row_range_end if end is None else end

    typer.echo(f"[clean] Fetching {url!r} …")
    try:
        records = list(extract_links(fetch_document(url)))
        rows = clean_records(records, start, end, EXCLUDED_LABELS, settings.link_domain)
    except DiningMapError as exc:
        _fail("clean", exc)

    for row in rows:
        typer.echo(f"  {row.label.strip()!r}  {row.link}")
    typer.echo(f"[clean] {len(rows)} location(s).")


@app.command("geocode")
def geocode(
    query: str = typer.Argument(..., help="Place name to look up."),
    provider: Optional[str] = typer.Option(None, help="Geocoder: nominatim | google."),
) -> None:
    """Look up a single query and print its coarse coordinates."""
    try:
        service = build_geocoder(provider)
        coords = service.geocode(query)
    except (DiningMapError, ValueError, EnvironmentError) as exc:
        _fail("geocode", exc)
    typer.echo(f"[geocode] {query!r} → {coords.latitude}, {coords.longitude}")


@app.command("run")
def run(
    url: Optional[str] = typer.Option(None, help="Page to scrape (default: SOURCE_URL)."),
    output: Optional[Path] = typer.Option(None, help="Write the table to this file."),
    fmt: str = typer.Option("csv", "--format", help=f"Output format: {' | '.join(FORMATS)}."),
    provider: Optional[str] = typer.Option(None, help="Geocoder: nominatim | google."),
) -> None:
    """Run the full pipeline and print the corrected table."""
    if fmt.lower() not in FORMATS:
        typer.echo(f"[run] Unknown format {fmt!r}. Use: {' | '.join(FORMATS)}")
        raise typer.Exit(code=1)

    try:
        geocoder = build_geocoder(provider)
        rows = run_pipeline(url, geocoder=geocoder)
    except (DiningMapError, ValueError, EnvironmentError) as exc:
        _fail("run", exc)

    typer.echo("")
    for row in rows:
        typer.echo(f"  {row.latitude:>9.4f}  {row.longitude:>9.4f}  {row.label.strip()}")

    if output is not None:
        path = write_table(rows, output, fmt)
        typer.echo(f"[run] Table written to {path}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
