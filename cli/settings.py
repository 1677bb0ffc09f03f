"""
Option defaults shared by the CLI commands.

Values given on the command line win; otherwise the user config
(~/.config/miniworks/config.json, or the file named by MINIWORKS_CONFIG)
supplies them.
"""

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from miniworks.config import AppConfig
from miniworks.utils.checksum import ChecksumMode
from miniworks.utils.validation import validate_device_id

console = Console()


def load_config() -> AppConfig:
    path = os.environ.get("MINIWORKS_CONFIG")
    return AppConfig(Path(path) if path else None)


def resolve_mode(mode: Optional[str]) -> ChecksumMode:
    """Checksum mode from the option, else from the config."""
    value = mode if mode else load_config().checksum_mode
    try:
        return ChecksumMode.parse(value)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(2)


def resolve_device_id(device_id: Optional[int]) -> int:
    """Device ID from the option, else from the config."""
    value = device_id if device_id is not None else load_config().device_id
    try:
        return validate_device_id(value)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(2)


def require_file(file: Path) -> None:
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)
