"""
Display formatting utilities for CLI output.

Provides bar graphics and byte formatting helpers.
"""

from typing import Iterable


def value_bar(
    value: int,
    max_value: int = 127,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
    show_percent: bool = True,
) -> str:
    """
    Create a text-based bar graphic with value and percentage.

    Args:
        value: Current value
        max_value: Maximum value (default 127 for MIDI)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value
        show_percent: Show percentage

    Returns:
        Formatted string like "91 [████████░░] 71%"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))

    fill_count = int((clamped / max_value) * width)
    empty_count = width - fill_count

    bar = filled_char * fill_count + empty_char * empty_count
    percent = int((clamped / max_value) * 100)

    parts = []
    if show_value:
        parts.append(f"{value:3d}")
    parts.append(f"[{bar}]")
    if show_percent:
        parts.append(f"{percent:3d}%")

    return " ".join(parts)


def pan_bar(
    pan: int,
    width: int = 11,
    left_char: str = "◀",
    right_char: str = "▶",
    center_char: str = "●",
    empty_char: str = "─",
) -> str:
    """
    Create a centered pan bar graphic.

    MiniWorks panning:
    - 0 = Hard left
    - 64 = Center
    - 127 = Hard right

    Returns:
        Formatted string like "L32 [──◀──●─────]"
    """
    center = width // 2

    bar = list(empty_char * width)
    bar[center] = center_char

    if pan == 64:
        position_str = "  C"
    elif pan < 64:
        left_amount = 64 - pan  # 1-64
        pos = max(0, center - int((left_amount / 64) * center))
        bar[pos] = left_char
        position_str = f"L{left_amount:2d}"
    else:
        right_amount = pan - 64  # 1-63
        pos = min(width - 1, center + int((right_amount / 63) * (width - center - 1)))
        bar[pos] = right_char
        position_str = f"R{right_amount:2d}"

    return f"{position_str} [{''.join(bar)}]"


def hex_bytes(data: Iterable[int], separator: str = " ") -> str:
    """
    Format bytes as uppercase hex pairs.

    Returns:
        "F0 3E 04 00 48 F7"
    """
    return separator.join(f"{b:02X}" for b in data)


def format_checksum(received: int, calculated: int) -> str:
    """
    Format a checksum comparison.

    Returns:
        "[green]0x23[/green]" or "[red]0x24 (expected 0x23)[/red]"
    """
    if received == calculated:
        return f"[green]0x{received:02X}[/green]"
    return f"[red]0x{received:02X} (expected 0x{calculated:02X})[/red]"


def highlight_non_default(value: int, default: int, text: str) -> str:
    """
    Highlight a value that differs from its initial value.

    Returns:
        "[yellow]...[/yellow]" or the text unchanged
    """
    if value != default:
        return f"[yellow]{text}[/yellow]"
    return text
