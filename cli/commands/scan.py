"""
Scan command - list every program in a directory of .syx files.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import box

from cli.display.formatters import value_bar
from cli.settings import resolve_mode
from miniworks.library import load_directory

console = Console()
app = typer.Typer()


@app.command()
def scan(
    directory: Path = typer.Argument(..., help="Directory of .syx files"),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Include subdirectories"),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Checksum mode: mask7 or complement7 (default from config)"
    ),
) -> None:
    """
    Decode all .syx files in a directory and list their programs.

    Files that fail to decode are reported and skipped.

    Examples:

        miniworks scan ~/patches

        miniworks scan ~/patches --recursive
    """
    if not directory.is_dir():
        console.print(f"[red]Error: Not a directory: {directory}[/red]")
        raise typer.Exit(1)

    report = load_directory(directory, resolve_mode(mode), recursive=recursive)

    table = Table(title="Library", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("File", style="cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Cutoff", width=18)
    table.add_column("Reso", width=18)

    for entry in report.entries:
        table.add_row(
            entry.source.name,
            str(entry.program.number + 1),
            value_bar(entry.program.cutoff, show_percent=False, width=8),
            value_bar(entry.program.resonance, show_percent=False, width=8),
        )

    console.print(table)
    console.print(
        f"[dim]{len(report)} programs from {report.files_read} files, "
        f"{len(report.failures)} skipped[/dim]"
    )

    for failure in report.failures:
        console.print(f"[yellow]Skipped {failure}[/yellow]")
