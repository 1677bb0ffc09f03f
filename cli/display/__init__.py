"""
CLI display modules.
"""

from cli.display.tables import (
    display_configuration,
    display_program,
    display_program_list,
    display_syx_info,
)
from cli.display.hex_view import display_hex_dump, message_regions

__all__ = [
    "display_configuration",
    "display_program",
    "display_program_list",
    "display_syx_info",
    "display_hex_dump",
    "message_regions",
]
