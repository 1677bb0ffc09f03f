"""
MiniWorks - SysEx toolkit for the Waldorf MiniWorks 4-Pole.

A CLI tool for inspecting, validating and assembling MiniWorks SysEx files.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli.commands.info import info
from cli.commands.validate import validate
from cli.commands.dump import dump
from cli.commands.request import request
from cli.commands.extract import extract
from cli.commands.scan import scan
from miniworks import __version__

console = Console()

# Main app
app = typer.Typer(
    name="miniworks",
    help="Inspect and build Waldorf MiniWorks 4-Pole SysEx files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="validate")(validate)
app.command(name="dump")(dump)
app.command(name="request")(request)
app.command(name="extract")(extract)
app.command(name="scan")(scan)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]miniworks[/bold] version {__version__}")
    console.print("[dim]SysEx toolkit for the Waldorf MiniWorks 4-Pole[/dim]")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress details"),
) -> None:
    """
    MiniWorks - Inspect and build Waldorf MiniWorks 4-Pole SysEx files.

    Handles:

    - [cyan]Program Dumps[/cyan] (single programs, 37 bytes)
    - [cyan]All Dumps[/cyan] (20 programs + global settings, 593 bytes)
    - [cyan]Dump Requests[/cyan]

    [bold]Quick Start:[/bold]

        miniworks info bank.syx          # Programs and settings
        miniworks info p01.syx --full    # Every parameter

    [bold]Analysis Commands:[/bold]

        miniworks validate bank.syx      # Framing and checksums
        miniworks dump bank.syx          # Annotated hex dump
        miniworks scan ~/patches         # Programs in a directory

    [bold]Utility Commands:[/bold]

        miniworks request all            # Build an All Dump Request
        miniworks extract bank.syx -s 3  # Program 3 as a Program Dump

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
