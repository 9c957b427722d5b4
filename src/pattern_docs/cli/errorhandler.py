"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.markup import escape

from pattern_docs.config.exceptions import ConfigError
from pattern_docs.logging_setup import console
from pattern_docs.sync.exceptions import (
    FilesystemOperationError,
    MissingMetadataError,
    SourceDirectoryError,
)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise with the full traceback. If False, print the error.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except MissingMetadataError as e:
        if debug:
            raise
        console.print(f"[bold red]Missing metadata:[/bold red] {escape(str(e))}", highlight=False)
        console.print("Add an entry for this slug to PATTERN_METADATA and rerun the sync.")
        raise typer.Exit(1) from e
    except SourceDirectoryError as e:
        if debug:
            raise
        console.print(f"[bold red]Source Directory Error:[/bold red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e
    except FilesystemOperationError as e:
        if debug:
            raise
        console.print(f"[bold red]Write Error:[/bold red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration Error:[/bold red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {escape(str(e))}", highlight=False)
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
