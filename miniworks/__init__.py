"""
MiniWorks - SysEx toolkit for the Waldorf MiniWorks 4-Pole.

This library provides tools to:
- Validate and classify MiniWorks SysEx messages
- Decode and encode Program Dumps and All Dumps
- Read and write .syx files
- Build dump requests and control change messages

Example usage:
    from miniworks import MiniWorksReader, encode_program

    contents = MiniWorksReader.read("bank.syx")
    program = contents.configuration.program(0)
    program.cutoff = 90

    message = encode_program(program)
"""

__version__ = "0.1.0"
__author__ = "MiniWorks Contributors"

from miniworks.errors import (
    ChecksumMismatchError,
    InvalidProgramCountError,
    MalformedMessageError,
    MiniWorksError,
)
from miniworks.formats.configuration_codec import decode_configuration, encode_configuration
from miniworks.formats.program_codec import decode_program, encode_program
from miniworks.formats.reader import MiniWorksReader
from miniworks.formats.sysex_parser import MessageType, SysExParser, classify, parse_message
from miniworks.formats.writer import MiniWorksWriter
from miniworks.models.configuration import Configuration
from miniworks.models.global_settings import GlobalSettings
from miniworks.models.program import Program
from miniworks.utils.checksum import ChecksumMode

__all__ = [
    "MiniWorksReader",
    "MiniWorksWriter",
    "SysExParser",
    "MessageType",
    "classify",
    "parse_message",
    "encode_program",
    "decode_program",
    "encode_configuration",
    "decode_configuration",
    "Program",
    "Configuration",
    "GlobalSettings",
    "ChecksumMode",
    "MiniWorksError",
    "MalformedMessageError",
    "ChecksumMismatchError",
    "InvalidProgramCountError",
]
