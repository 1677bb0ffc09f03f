"""
Hex dump display utilities.

Each byte of a MiniWorks message belongs to a region (header, program
slot, parameter block, globals, checksum). Regions are derived from the
message type so the dump lines can be annotated.
"""

from typing import List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from miniworks.formats.constants import (
    ALL_DUMP_PROGRAMS_OFFSET,
    GLOBALS_LENGTH,
    GLOBALS_OFFSET,
    HEADER_LENGTH,
    NUM_PROGRAMS,
    PROGRAM_BLOCK_LENGTH,
    PROGRAM_DATA_OFFSET,
    PROGRAM_NUMBER_OFFSET,
)
from miniworks.formats.sysex_parser import MessageType

console = Console()

# (start, end, name, description, color)
Region = Tuple[int, int, str, str, str]


def message_regions(message_type: Optional[MessageType], length: int) -> List[Region]:
    """
    Build the region map for one message.

    Args:
        message_type: Classified type, or None for an unrecognised message
        length: Message length in bytes

    Returns:
        Regions covering the whole message, in offset order
    """
    regions: List[Region] = [(0, min(HEADER_LENGTH, length), "HEADER", "F0 3E 04 DV CM", "bright_blue")]

    if message_type is None:
        if length > HEADER_LENGTH:
            regions.append((HEADER_LENGTH, length, "UNKNOWN", "Unrecognised data", "dim"))
        return regions

    if message_type.has_slot:
        regions.append(
            (PROGRAM_NUMBER_OFFSET, PROGRAM_NUMBER_OFFSET + 1, "SLOT", "Program number", "cyan")
        )

    if message_type in (MessageType.PROGRAM_DUMP, MessageType.PROGRAM_BULK_DUMP):
        regions.append(
            (
                PROGRAM_DATA_OFFSET,
                PROGRAM_DATA_OFFSET + PROGRAM_BLOCK_LENGTH,
                "PARAMS",
                "29 program parameters",
                "green",
            )
        )
    elif message_type == MessageType.ALL_DUMP:
        for number in range(NUM_PROGRAMS):
            start = ALL_DUMP_PROGRAMS_OFFSET + number * PROGRAM_BLOCK_LENGTH
            regions.append(
                (
                    start,
                    start + PROGRAM_BLOCK_LENGTH,
                    f"P.{number + 1}",
                    f"Program {number + 1} parameters",
                    "green" if number % 2 == 0 else "bright_green",
                )
            )
        regions.append(
            (GLOBALS_OFFSET, GLOBALS_OFFSET + GLOBALS_LENGTH, "GLOBALS", "Global settings", "magenta")
        )

    if message_type.is_dump:
        regions.append((length - 2, length - 1, "CHECKSUM", "Checksum", "yellow"))

    regions.append((length - 1, length, "END", "F7", "bright_blue"))
    return regions


def region_for_offset(regions: List[Region], offset: int) -> Region:
    """Get the region that contains an offset."""
    for region in regions:
        if region[0] <= offset < region[1]:
            return region
    return (offset, offset + 1, "UNKNOWN", "Unknown region", "white")


def format_hex_line(data: bytes, offset: int, regions: List[Region], bytes_per_line: int = 16) -> Text:
    """
    Format a single line of hex dump, each byte colored by its region.

    The region tag shows the region of the first byte on the line.
    """
    text = Text()
    text.append(f"0x{offset:03X} ", style="dim")

    _, _, name, _, color = region_for_offset(regions, offset)
    text.append(f"[{name:8s}] ", style=color)

    for i, byte in enumerate(data):
        _, _, _, _, byte_color = region_for_offset(regions, offset + i)
        text.append(f"{byte:02X}", style=byte_color)
        text.append(" ")

    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    return text


def create_legend(regions: List[Region]) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=10)
    table.add_column("Description", width=40)

    for start, end, name, desc, color in regions:
        size = end - start
        table.add_row(
            Text(name, style=color),
            f"{desc} ({size} bytes, 0x{start:03X}-0x{end - 1:03X})",
        )

    return table


def display_hex_dump(
    data: bytes,
    regions: List[Region],
    title: str = "Hex Dump",
    bytes_per_line: int = 16,
    show_legend: bool = True,
) -> None:
    """Display an annotated hex dump of one message."""
    if show_legend:
        console.print(create_legend(regions))

    lines = []
    for offset in range(0, len(data), bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]
        lines.append(format_hex_line(chunk, offset, regions, bytes_per_line))

    body = Text("\n").join(lines)
    console.print(Panel(body, title=title, border_style="blue", expand=False))
