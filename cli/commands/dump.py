"""
Dump command - annotated hex dump of each message in a .syx file.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.hex_view import display_hex_dump, message_regions
from cli.settings import require_file
from miniworks.errors import MalformedMessageError
from miniworks.formats.sysex_parser import classify, split_messages

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="MiniWorks .syx file to dump"),
    message: int = typer.Option(0, "--message", "-n", help="Dump only message N (1-based, 0=all)"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of a MiniWorks SysEx file.

    Bytes are colored by region: header, program slot, parameter
    blocks, global settings, checksum.

    Examples:

        miniworks dump program.syx

        miniworks dump bank.syx --message 2 --width 29
    """
    require_file(file)

    if width < 1:
        console.print("[red]Error: --width must be at least 1[/red]")
        raise typer.Exit(1)

    messages = split_messages(file.read_bytes())
    if not messages:
        console.print(f"[red]No SysEx messages found in {file}[/red]")
        raise typer.Exit(1)

    if message:
        if not 1 <= message <= len(messages):
            console.print(f"[red]Message {message} out of range (file has {len(messages)})[/red]")
            raise typer.Exit(1)
        selected = [(message - 1, messages[message - 1])]
    else:
        selected = list(enumerate(messages))

    for index, raw in selected:
        try:
            message_type = classify(raw)
            kind = message_type.name
        except MalformedMessageError as e:
            message_type = None
            kind = f"invalid: {e}"

        display_hex_dump(
            raw,
            message_regions(message_type, len(raw)),
            title=f"Message {index + 1}: {kind} ({len(raw)} bytes)",
            bytes_per_line=width,
            show_legend=not no_legend,
        )
        console.print()


if __name__ == "__main__":
    app()
