"""
Rich table displays for MiniWorks programs and configurations.
"""

from typing import List

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from cli.display.formatters import highlight_non_default, pan_bar, value_bar
from miniworks.formats.reader import SyxContents
from miniworks.models.configuration import Configuration
from miniworks.models.enums import LFOShape, ModulationSource
from miniworks.models.global_settings import GlobalSettings
from miniworks.models.parameters import PROGRAM_PARAMETERS, ParameterSpec
from miniworks.models.program import Program

console = Console()


def format_parameter(spec: ParameterSpec, value) -> str:
    """Readable value for one parameter."""
    if spec.enum is not None:
        member = spec.decode(int(value))
        text = member.short_name if isinstance(member, ModulationSource) else member.label
        return highlight_non_default(int(value), spec.default, text)
    if spec.name == "panning":
        return highlight_non_default(int(value), spec.default, pan_bar(int(value)))
    return highlight_non_default(int(value), spec.default, value_bar(int(value), spec.max_value))


def display_program(program: Program, title: str = "") -> None:
    """Display all parameters of one program, grouped by section."""
    status = "[dim]ROM[/dim]" if program.is_read_only else "[green]User[/green]"
    table = Table(
        title=title or f"{program.display_name} ({status})",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Group", style="dim", width=12)
    table.add_column("Parameter", style="cyan", width=22)
    table.add_column("CC", style="dim", width=4, justify="right")
    table.add_column("Value", width=28)

    last_group = None
    for spec in PROGRAM_PARAMETERS:
        group = spec.group if spec.group != last_group else ""
        last_group = spec.group
        table.add_row(group, spec.label, str(spec.cc), format_parameter(spec, getattr(program, spec.name)))

    console.print(table)


def display_program_list(programs: List[Program], title: str = "Programs") -> None:
    """Display a one-line summary per program."""
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan", width=12)
    table.add_column("Cutoff", width=18)
    table.add_column("Reso", width=18)
    table.add_column("Volume", width=18)
    table.add_column("Pan", width=20)
    table.add_column("LFO", width=10)

    for program in programs:
        table.add_row(
            str(program.number + 1),
            program.display_name,
            value_bar(program.cutoff, show_percent=False, width=8),
            value_bar(program.resonance, show_percent=False, width=8),
            value_bar(program.volume, show_percent=False, width=8),
            pan_bar(program.panning, width=9),
            LFOShape.from_byte(int(program.lfo_shape)).label,
        )

    console.print(table)


def display_globals(settings: GlobalSettings) -> None:
    """Display global settings."""
    channel = "Omni" if settings.is_omni else str(settings.midi_channel)
    content = f"""[bold]MIDI Channel:[/bold] {channel}
[bold]MIDI Control:[/bold] {settings.midi_control.label}
[bold]Device ID:[/bold] {settings.device_id}
[bold]Startup Program:[/bold] {settings.startup_program + 1}
[bold]Note Number:[/bold] {settings.note_number}
[bold]Knob Mode:[/bold] {settings.knob_mode.label}"""

    console.print(
        Panel(content, title="[bold yellow]Global Settings[/bold yellow]", border_style="yellow", expand=False)
    )


def display_configuration(configuration: Configuration) -> None:
    """Display an All Dump: globals and the program list."""
    display_globals(configuration.globals)
    display_program_list(configuration.programs, title="User Programs")


def display_syx_info(contents: SyxContents, filepath: str, show_programs: bool = False) -> None:
    """Display everything decoded from a .syx file."""
    summary = f"""[bold]File:[/bold] {filepath}
[bold]Program Dumps:[/bold] {len(contents.programs)}
[bold]All Dumps:[/bold] {len(contents.configurations)}
[bold]Requests:[/bold] {len(contents.requests)}
[bold]Rejected:[/bold] {len(contents.errors)}"""

    console.print(Panel(summary, title="[bold blue]MiniWorks SysEx Info[/bold blue]", border_style="blue", expand=False))

    for configuration in contents.configurations:
        display_configuration(configuration)

    if contents.programs:
        if show_programs:
            for program in contents.programs:
                display_program(program)
        else:
            display_program_list(contents.programs)

    for request in contents.requests:
        slot = "" if request.program_number is None else f" slot {request.program_number + 1}"
        console.print(f"[cyan]{request.message_type.name}[/cyan]{slot} (device {request.device_id})")

    for failure in contents.errors:
        console.print(f"[red]Rejected {failure}[/red]")
