"""
Program codec - converts between Program objects and SysEx bytes.

Program Dump layout (37 bytes):

    Offset  Content
    0-4     F0 3E 04 DV 00        (01 for a Program Bulk Dump)
    5       Program number (0-39)
    6-34    29 parameter bytes, wire order of PROGRAM_PARAMETERS
    35      Checksum over bytes 4-34
    36      F7

Inside an All Dump the same 29 parameter bytes appear without the
program number byte; ``decode_program_block`` handles that form.
"""

from typing import Optional

from miniworks.errors import MalformedMessageError
from miniworks.formats.constants import (
    MIDI_DATA_MASK,
    MINIWORKS_MODEL_ID,
    PROGRAM_BLOCK_LENGTH,
    PROGRAM_DATA_OFFSET,
    SYSEX_END,
    SYSEX_START,
    WALDORF_ID,
)
from miniworks.formats.sysex_parser import MessageType, parse_message
from miniworks.models.parameters import PROGRAM_PARAMETERS
from miniworks.models.program import Program
from miniworks.utils.checksum import ChecksumMode, add_checksum
from miniworks.utils.validation import (
    validate_device_id,
    validate_range,
    validate_slot,
)


def encode_program_data(program: Program, for_all_dump: bool = False) -> bytes:
    """
    Encode the parameter bytes of a program.

    Args:
        program: Program to encode
        for_all_dump: Omit the program number byte (All Dump block form)

    Returns:
        29 bytes, or 30 bytes led by the program number

    Raises:
        ParameterRangeError: If a value does not fit its range
    """
    data = bytearray()

    if not for_all_dump:
        data.append(validate_slot(program.number))

    for spec in PROGRAM_PARAMETERS:
        value = getattr(program, spec.name)
        data.append(validate_range(int(value), spec.min_value, spec.max_value, spec.name))

    return bytes(data)


def encode_program(
    program: Program,
    device_id: int = 0,
    mode: ChecksumMode = ChecksumMode.MASK7,
    bulk: bool = False,
) -> bytes:
    """
    Encode a program as a complete Program Dump message.

    Args:
        program: Program to encode
        device_id: Device ID byte (0-126)
        mode: Checksum algorithm
        bulk: Emit a Program Bulk Dump (command 01) instead of 00

    Returns:
        37-byte SysEx message

    Raises:
        ParameterRangeError: If a value does not fit its range
    """
    command = MessageType.PROGRAM_BULK_DUMP if bulk else MessageType.PROGRAM_DUMP
    header = bytes([SYSEX_START, WALDORF_ID, MINIWORKS_MODEL_ID, validate_device_id(device_id)])
    # Command byte is part of the checksummed range
    body = add_checksum(bytes([command]) + encode_program_data(program), mode)
    return header + body + bytes([SYSEX_END])


def decode_program_block(block: bytes, number: int) -> Program:
    """
    Decode a bare 29-byte parameter block.

    No envelope or checksum check is done here; callers validate the
    enclosing message first.

    Args:
        block: Exactly 29 parameter bytes
        number: Program number to assign

    Returns:
        Decoded program

    Raises:
        MalformedMessageError: If the block is not 29 bytes or holds a
            byte above 0x7F
    """
    if len(block) != PROGRAM_BLOCK_LENGTH:
        raise MalformedMessageError(
            f"Program block must be {PROGRAM_BLOCK_LENGTH} bytes, got {len(block)}", bytes(block)
        )

    for offset, value in enumerate(block):
        if value > MIDI_DATA_MASK:
            raise MalformedMessageError(
                f"Program byte {offset} is not a MIDI data byte (0x{value:02X})", bytes(block)
            )

    program = Program(number=number)
    for spec in PROGRAM_PARAMETERS:
        setattr(program, spec.name, spec.decode(block[spec.offset]))
    return program


def decode_program(
    message: bytes,
    mode: ChecksumMode = ChecksumMode.MASK7,
    device_id: Optional[int] = None,
) -> Program:
    """
    Decode a Program Dump or Program Bulk Dump message.

    Args:
        message: Complete 37-byte SysEx message
        mode: Checksum algorithm
        device_id: Expected device ID, or None to accept any

    Returns:
        Decoded program, numbered from the message's program byte

    Raises:
        MalformedMessageError: Framing, command or length is wrong,
            or the message is not a program dump
        ChecksumMismatchError: Checksum does not match
    """
    parsed = parse_message(message, mode, device_id)

    if parsed.message_type not in (MessageType.PROGRAM_DUMP, MessageType.PROGRAM_BULK_DUMP):
        raise MalformedMessageError(
            f"Expected a program dump, got {parsed.message_type.name}", parsed.raw
        )

    block = parsed.raw[PROGRAM_DATA_OFFSET : PROGRAM_DATA_OFFSET + PROGRAM_BLOCK_LENGTH]
    return decode_program_block(block, parsed.program_number)
