"""
Extract command - pull single programs out of an All Dump.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.settings import require_file, resolve_device_id, resolve_mode
from miniworks.formats.constants import NUM_PROGRAMS
from miniworks.formats.reader import MiniWorksReader
from miniworks.formats.writer import MiniWorksWriter

console = Console()
app = typer.Typer()


@app.command()
def extract(
    file: Path = typer.Argument(..., help="All Dump .syx file"),
    slot: int = typer.Option(..., "--slot", "-s", help="Program to extract (1-20)"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output file (default: <file>_pNN.syx)"
    ),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Checksum mode: mask7 or complement7 (default from config)"
    ),
    device_id: Optional[int] = typer.Option(
        None, "--device-id", "-d", help="Device ID for the written dump (default from config)"
    ),
    bulk: bool = typer.Option(False, "--bulk", help="Write a Program Bulk Dump"),
) -> None:
    """
    Write one program of an All Dump as a Program Dump.

    Examples:

        miniworks extract bank.syx --slot 3

        miniworks extract bank.syx -s 12 -o lead.syx
    """
    require_file(file)

    if not 1 <= slot <= NUM_PROGRAMS:
        console.print(f"[red]Error: --slot must be 1-{NUM_PROGRAMS}, got {slot}[/red]")
        raise typer.Exit(1)

    checksum_mode = resolve_mode(mode)

    try:
        contents = MiniWorksReader.read(file, checksum_mode)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error reading {file}: {e}[/red]")
        raise typer.Exit(1)

    if contents.configuration is None:
        console.print(f"[red]No valid All Dump in {file}[/red]")
        for failure in contents.errors:
            console.print(f"[red]  {failure}[/red]")
        raise typer.Exit(1)

    program = contents.configuration.program(slot - 1)

    if output is None:
        output = file.with_name(f"{file.stem}_p{slot:02d}.syx")

    MiniWorksWriter.write(program, output, resolve_device_id(device_id), checksum_mode, bulk)
    console.print(f"[green]Wrote {program.display_name} to {output}[/green]")


if __name__ == "__main__":
    app()
