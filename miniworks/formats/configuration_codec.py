"""
Configuration codec - converts between Configuration objects and All Dumps.

All Dump layout (593 bytes):

    Offset   Content
    0-4      F0 3E 04 DV 08
    5-584    20 program blocks of 29 bytes, slot order, no program number
    585-590  Global settings: MIDI channel, MIDI control, device ID,
             startup program, note number, knob mode
    591      Checksum over bytes 5-590
    592      F7
"""

from typing import Optional

from miniworks.errors import InvalidProgramCountError, MalformedMessageError
from miniworks.formats.constants import (
    ALL_DUMP_PROGRAMS_OFFSET,
    GLOBALS_LENGTH,
    GLOBALS_OFFSET,
    MINIWORKS_MODEL_ID,
    NUM_PROGRAMS,
    PROGRAM_BLOCK_LENGTH,
    SYSEX_END,
    SYSEX_START,
    WALDORF_ID,
)
from miniworks.formats.program_codec import decode_program_block, encode_program_data
from miniworks.formats.sysex_parser import MessageType, parse_message
from miniworks.models.configuration import Configuration
from miniworks.models.global_settings import GlobalSettings
from miniworks.utils.checksum import ChecksumMode, add_checksum
from miniworks.utils.validation import ValidationError, validate_device_id


def encode_configuration(
    configuration: Configuration,
    device_id: Optional[int] = None,
    mode: ChecksumMode = ChecksumMode.MASK7,
) -> bytes:
    """
    Encode a configuration as a complete All Dump message.

    Args:
        configuration: Configuration holding exactly 20 programs
        device_id: Device ID byte; defaults to the configuration's own
        mode: Checksum algorithm

    Returns:
        593-byte SysEx message

    Raises:
        InvalidProgramCountError: If there are not exactly 20 programs
        ValidationError: If a program number differs from its slot
        ParameterRangeError: If a value does not fit its range
    """
    if len(configuration.programs) != NUM_PROGRAMS:
        raise InvalidProgramCountError(len(configuration.programs), NUM_PROGRAMS)

    for index, program in enumerate(configuration.programs):
        if program.number != index:
            raise ValidationError(
                f"Program in slot {index} is numbered {program.number}; use update_program"
            )

    if device_id is None:
        device_id = configuration.globals.device_id

    payload = bytearray()
    for program in configuration.programs:
        payload.extend(encode_program_data(program, for_all_dump=True))
    payload.extend(configuration.globals.to_bytes())

    header = bytes(
        [
            SYSEX_START,
            WALDORF_ID,
            MINIWORKS_MODEL_ID,
            validate_device_id(device_id),
            MessageType.ALL_DUMP,
        ]
    )
    return header + add_checksum(payload, mode) + bytes([SYSEX_END])


def decode_configuration(
    message: bytes,
    mode: ChecksumMode = ChecksumMode.MASK7,
    device_id: Optional[int] = None,
) -> Configuration:
    """
    Decode an All Dump message.

    The envelope and checksum are validated once for the whole message;
    programs are then numbered 0-19 by position.

    Args:
        message: Complete 593-byte SysEx message
        mode: Checksum algorithm
        device_id: Expected device ID, or None to accept any

    Returns:
        Decoded configuration

    Raises:
        MalformedMessageError: Framing, command or length is wrong,
            or the message is not an All Dump
        ChecksumMismatchError: Checksum does not match
    """
    parsed = parse_message(message, mode, device_id)

    if parsed.message_type != MessageType.ALL_DUMP:
        raise MalformedMessageError(
            f"Expected an all dump, got {parsed.message_type.name}", parsed.raw
        )

    data = parsed.raw
    programs = []
    for number in range(NUM_PROGRAMS):
        start = ALL_DUMP_PROGRAMS_OFFSET + number * PROGRAM_BLOCK_LENGTH
        programs.append(decode_program_block(data[start : start + PROGRAM_BLOCK_LENGTH], number))

    global_settings = GlobalSettings.from_bytes(data[GLOBALS_OFFSET : GLOBALS_OFFSET + GLOBALS_LENGTH])
    return Configuration(programs=programs, globals=global_settings)
