"""Main Typer application for pattern-docs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from pattern_docs.cli.errorhandler import handle_cli_errors
from pattern_docs.config import SyncSettings, load_settings
from pattern_docs.logging_setup import configure_logging, console
from pattern_docs.sync import check_sync, plan_sync, sync_patterns

app = typer.Typer(
    name="pattern-docs",
    help="Sync the pattern articles into the documentation site's content directory",
    add_completion=False,
)

logger = logging.getLogger(__name__)

CHECK_FAILED_EXIT_CODE = 2

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to pattern-docs.toml (default: search upward)."),
]
SourceDirOption = Annotated[
    Path | None,
    typer.Option("--source-dir", help="Directory holding the numbered markdown articles."),
]
DestDirOption = Annotated[
    Path | None,
    typer.Option("--dest-dir", help="Site content directory that receives the pages."),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Show full tracebacks and debug logs.")]


@app.callback()
def main() -> None:
    """Sync and verify pattern documentation pages."""


def _resolve_settings(
    config: Path | None,
    source_dir: Path | None,
    dest_dir: Path | None = None,
) -> SyncSettings:
    settings = load_settings(config)
    return settings.with_overrides(source_dir=source_dir, dest_dir=dest_dir)


@app.command()
def sync(
    config: ConfigOption = None,
    source_dir: SourceDirOption = None,
    dest_dir: DestDirOption = None,
    debug: DebugOption = False,
) -> None:
    """Copy every source article into the site with generated frontmatter."""
    configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        settings = _resolve_settings(config, source_dir, dest_dir)
        logger.debug("Syncing %s -> %s", settings.source_dir, settings.dest_dir)
        report = sync_patterns(settings.source_dir, settings.dest_dir)

    console.print(
        f"[green]Synced {len(report)} page(s)[/green] into {escape(str(settings.dest_dir))}",
        highlight=False,
    )


@app.command()
def check(
    config: ConfigOption = None,
    source_dir: SourceDirOption = None,
    dest_dir: DestDirOption = None,
    debug: DebugOption = False,
) -> None:
    """Report whether the site pages match what ``sync`` would write."""
    configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        settings = _resolve_settings(config, source_dir, dest_dir)
        report = check_sync(settings.source_dir, settings.dest_dir)

    for name in report.missing_metadata:
        console.print(f"[red]MISSING METADATA[/red] {escape(name)}", highlight=False)
    for name in report.stale:
        console.print(f"[yellow]STALE[/yellow] {escape(name)}", highlight=False)
    for name, problems in report.invalid_frontmatter:
        console.print(f"[red]INVALID FRONTMATTER[/red] {escape(name)} ({escape(', '.join(problems))})", highlight=False)
    for slug in report.missing_pages:
        console.print(f"[red]MISSING PAGE[/red] {escape(slug)}", highlight=False)
    for slug in report.unused_metadata:
        console.print(f"[dim]unused metadata: {escape(slug)}[/dim]", highlight=False)

    if not report.ok:
        console.print("[bold red]Pattern pages are out of sync.[/bold red] Run 'pattern-docs sync' and fix the issues above.")
        raise typer.Exit(CHECK_FAILED_EXIT_CODE)
    console.print("[green]Pattern pages are up to date.[/green]")


@app.command("list")
def list_pages(
    config: ConfigOption = None,
    source_dir: SourceDirOption = None,
    debug: DebugOption = False,
) -> None:
    """Show how each source article maps to a page slug and title."""
    configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        settings = _resolve_settings(config, source_dir)
        planned = plan_sync(settings.source_dir)

    table = Table(title="Pattern articles")
    table.add_column("Source", style="cyan")
    table.add_column("Slug", style="magenta")
    table.add_column("Title")
    for doc in planned:
        title = escape(doc.metadata.title) if doc.metadata else "[red]missing metadata[/red]"
        table.add_row(escape(doc.source.name), escape(doc.slug), title)
    console.print(table)
