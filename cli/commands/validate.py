"""
Validate command - check framing, length and checksum of every message.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from cli.display.formatters import format_checksum
from cli.settings import require_file, resolve_mode
from miniworks.errors import ChecksumMismatchError, MalformedMessageError
from miniworks.formats.sysex_parser import MessageType, classify, parse_message, split_messages
from miniworks.utils.checksum import ChecksumMode, calculate_checksum, checksum_payload

console = Console()
app = typer.Typer()


@dataclass
class MessageCheck:
    """Validation result for one message."""

    index: int
    length: int
    message_type: Optional[MessageType] = None
    device_id: Optional[int] = None
    checksum: str = ""
    error: str = ""
    hint: str = ""

    @property
    def valid(self) -> bool:
        return not self.error


def check_message(index: int, raw: bytes, mode: ChecksumMode) -> MessageCheck:
    """
    Validate one message and describe the outcome.

    On a checksum mismatch the other checksum mode is tried, so a file
    written by a different firmware revision is reported as such.
    """
    check = MessageCheck(index=index, length=len(raw))

    try:
        check.message_type = classify(raw)
    except MalformedMessageError as e:
        check.error = str(e)
        return check

    check.device_id = raw[3]

    try:
        parse_message(raw, mode)
    except ChecksumMismatchError as e:
        check.error = "Checksum mismatch"
        check.checksum = format_checksum(e.received, e.expected)
        for other in ChecksumMode:
            if other is not mode and calculate_checksum(checksum_payload(raw), other) == e.received:
                check.hint = f"checksum matches {other.value}"
        return check

    if check.message_type.is_dump:
        check.checksum = format_checksum(raw[-2], raw[-2])
    return check


def display_checks(checks: List[MessageCheck], filepath: str, mode: ChecksumMode) -> None:
    """Display validation results with Rich formatting."""
    errors = [c for c in checks if not c.valid]
    valid = bool(checks) and not errors

    status = "[bold green]VALID[/bold green]" if valid else "[bold red]INVALID[/bold red]"
    console.print(
        Panel(
            f"[bold]File:[/bold] {filepath}\n"
            f"[bold]Checksum Mode:[/bold] {mode.value}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Messages: [blue]{len(checks)}[/blue]  Errors: [red]{len(errors)}[/red]",
            title="[bold]Validation Result[/bold]",
            border_style="green" if valid else "red",
        )
    )

    if not checks:
        console.print("[red]No SysEx messages found[/red]")
        return

    table = Table(title="Messages", box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Type", style="cyan", width=26)
    table.add_column("Bytes", width=6, justify="right")
    table.add_column("Dev", width=4, justify="right")
    table.add_column("Checksum", width=22)
    table.add_column("Result", width=40)

    for check in checks:
        kind = check.message_type.name if check.message_type is not None else "?"
        device = "" if check.device_id is None else str(check.device_id)
        if check.valid:
            result = "[green]OK[/green]"
        else:
            result = f"[red]{check.error}[/red]"
            if check.hint:
                result += f" [yellow]({check.hint})[/yellow]"
        table.add_row(str(check.index + 1), kind, str(check.length), device, check.checksum, result)

    console.print(table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="MiniWorks .syx file to validate"),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Checksum mode: mask7 or complement7 (default from config)"
    ),
) -> None:
    """
    Validate every SysEx message in a file.

    Checks for:

    - F0/F7 framing
    - Waldorf manufacturer and MiniWorks machine IDs
    - Known command byte and exact message length
    - Checksum of dump messages

    Exits with status 1 if any message is invalid.

    Examples:

        miniworks validate bank.syx

        miniworks validate bank.syx --mode complement7
    """
    require_file(file)
    checksum_mode = resolve_mode(mode)

    data = file.read_bytes()
    checks = [check_message(i, raw, checksum_mode) for i, raw in enumerate(split_messages(data))]

    display_checks(checks, str(file), checksum_mode)

    if not checks or any(not c.valid for c in checks):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
