"""Command-line interface for wiki-md.

Converts a folder of scraped wiki pages (or a single page) into Markdown
files with a front matter title block.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import settings
from .converter import convert_all
from .errors import WikiMdError
from .models import BatchSummary
from .utils.file_collector import collect_files

app = typer.Typer(
    name="wiki-md",
    help="Convert scraped wiki HTML pages into Markdown with front matter",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{settings.app_name} {settings.app_version}")
        raise typer.Exit()


def configure_logging(debug: bool) -> None:
    level = "DEBUG" if debug else settings.effective_log_level()
    logging.basicConfig(level=level, format=settings.log_format, force=True)


def print_summary(summary: BatchSummary, output_folder: Path) -> None:
    table = Table(title="Conversion Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="magenta")

    table.add_row("Converted", str(len(summary.converted)))
    table.add_row("Skipped", str(len(summary.skipped)))
    table.add_row("Failed", str(len(summary.failed)))
    table.add_row("Total", str(summary.total))

    console.print(table)
    console.print(f"Output directory: {output_folder}")

    if summary.failed:
        console.print("[bold red]Failed files:[/bold red]")
        for result in summary.failed:
            console.print(f"  ✗ {escape(str(result.input_path))}: {escape(result.error or '')}")


@app.command()
def convert(
    input_path: Path = typer.Argument(..., help="Folder of .html pages, or a single page"),
    output_folder: Path = typer.Argument(..., help="Folder receiving the .md files"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Worker pool size"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Convert wiki HTML pages into Markdown files."""
    configure_logging(debug)

    try:
        input_files = collect_files(input_path)
        summary = convert_all(input_files, output_folder, workers or settings.max_workers)
    except WikiMdError as e:
        console.print(f"[bold red]ERROR:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    print_summary(summary, output_folder)

    if summary.exit_code:
        raise typer.Exit(code=summary.exit_code)
    console.print("[bold green]✓ Conversion completed[/bold green]")


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
