"""
Request command - build dump request messages.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import mido
import typer
from rich.console import Console

from cli.display.formatters import hex_bytes
from cli.settings import load_config, resolve_device_id
from miniworks.formats.sysex_parser import (
    build_all_dump_request,
    build_program_bulk_dump_request,
    build_program_dump_request,
)
from miniworks.midi import send_messages, to_mido_message

console = Console()
app = typer.Typer()


class RequestKind(str, Enum):
    program = "program"
    bulk = "bulk"
    all = "all"


@app.command()
def request(
    kind: RequestKind = typer.Argument(..., help="program, bulk or all"),
    slot: int = typer.Option(1, "--slot", "-s", help="Program slot (1-40) for program requests"),
    device_id: Optional[int] = typer.Option(
        None, "--device-id", "-d", help="Target device ID (default from config)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the request to a .syx file"),
    send: bool = typer.Option(False, "--send", help="Send the request to a MIDI output port"),
    port: Optional[str] = typer.Option(None, "--port", "-p", help="MIDI output port (default from config)"),
) -> None:
    """
    Build a dump request and print, save or send it.

    Examples:

        miniworks request all

        miniworks request program --slot 5 -o req.syx

        miniworks request all --send --port "USB MIDI"
    """
    device = resolve_device_id(device_id)

    try:
        if kind == RequestKind.all:
            raw = build_all_dump_request(device)
        elif kind == RequestKind.bulk:
            raw = build_program_bulk_dump_request(slot - 1, device)
        else:
            raw = build_program_dump_request(slot - 1, device)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(hex_bytes(raw))

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        mido.write_syx_file(str(output), [to_mido_message(raw)])
        console.print(f"[green]Wrote {output}[/green]")

    if send:
        port_name = port or load_config().midi_port
        try:
            send_messages([raw], port_name)
        except IOError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)
        console.print("[green]Request sent[/green]")


if __name__ == "__main__":
    app()
