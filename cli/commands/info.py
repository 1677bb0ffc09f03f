"""
Info command - display decoded MiniWorks programs and configurations.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display.tables import display_syx_info
from cli.settings import require_file, resolve_mode
from miniworks.formats.reader import MiniWorksReader

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="MiniWorks .syx file"),
    full: bool = typer.Option(False, "--full", "-f", help="Show every parameter of each program"),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Checksum mode: mask7 or complement7 (default from config)"
    ),
    device_id: Optional[int] = typer.Option(
        None, "--device-id", "-d", help="Only accept messages for this device ID"
    ),
) -> None:
    """
    Display the programs and settings stored in a .syx file.

    Program Dumps are listed one per line (or in full with --full);
    All Dumps show the global settings and all 20 user programs.

    Examples:

        miniworks info bank.syx

        miniworks info program.syx --full
    """
    require_file(file)

    try:
        contents = MiniWorksReader.read(file, resolve_mode(mode), device_id)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error reading {file}: {e}[/red]")
        raise typer.Exit(1)

    display_syx_info(contents, str(file), show_programs=full)

    if contents.is_empty and contents.errors:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
