"""
MiniWorks SysEx checksum calculation utilities.

Two algorithms are in use across MiniWorks firmware revisions:

mask7:
    1. Sum all payload bytes
    2. Keep the lower 7 bits of the sum

complement7:
    1. Sum all payload bytes
    2. Negate the sum and keep the lower 7 bits
    The payload plus checksum then sums to zero modulo 128.

The payload of a program message runs from the command byte up to,
but not including, the checksum byte. An All Dump payload skips the
command byte. The checksum is always a valid MIDI data byte (0-127).
"""

from enum import Enum
from typing import List, Union

from miniworks.formats.constants import (
    ALL_DUMP_CHECKSUM_START,
    ALL_DUMP_COMMAND,
    COMMAND_OFFSET,
    HEADER_LENGTH,
    MIDI_DATA_MASK,
    PROGRAM_CHECKSUM_START,
    SYSEX_END,
    SYSEX_START,
)


class ChecksumMode(Enum):
    """Checksum algorithm expected by a given firmware revision."""

    MASK7 = "mask7"
    COMPLEMENT7 = "complement7"

    @classmethod
    def parse(cls, value: Union[str, "ChecksumMode"]) -> "ChecksumMode":
        """
        Get a checksum mode from its name.

        Args:
            value: "mask7" or "complement7" (case-insensitive), or a mode

        Returns:
            Matching ChecksumMode

        Raises:
            ValueError: If the name is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown checksum mode {value!r} (expected one of: {names})")


def calculate_checksum(
    payload: Union[bytes, bytearray, List[int]], mode: ChecksumMode = ChecksumMode.MASK7
) -> int:
    """
    Calculate the checksum of a SysEx payload.

    Args:
        payload: Checksummed bytes, excluding the checksum and F7
        mode: Checksum algorithm

    Returns:
        Checksum value (0-127)

    Example:
        >>> calculate_checksum([64, 100, 127], ChecksumMode.MASK7)
        35
        >>> calculate_checksum([64, 100, 127], ChecksumMode.COMPLEMENT7)
        93
    """
    total = sum(payload)

    if mode is ChecksumMode.COMPLEMENT7:
        return (-total) & MIDI_DATA_MASK

    return total & MIDI_DATA_MASK


def checksum_start(command: int) -> int:
    """
    Get the offset of the first checksummed byte for a command.

    Program Dumps and Program Bulk Dumps include the command byte in
    the sum; All Dumps start right after it.
    """
    if command == ALL_DUMP_COMMAND:
        return ALL_DUMP_CHECKSUM_START
    return PROGRAM_CHECKSUM_START


def checksum_payload(message: Union[bytes, bytearray, List[int]]) -> bytes:
    """
    Extract the checksummed bytes from a complete message.

    Args:
        message: Complete SysEx message including F0 and F7

    Returns:
        Bytes from the checksum start up to the checksum byte
    """
    message = bytes(message)
    if len(message) <= COMMAND_OFFSET:
        return b""
    return message[checksum_start(message[COMMAND_OFFSET]) : -2]


def verify_checksum(
    payload: Union[bytes, bytearray, List[int]],
    expected_checksum: int,
    mode: ChecksumMode = ChecksumMode.MASK7,
) -> bool:
    """
    Verify a checksum against its payload.

    Args:
        payload: Bytes the checksum was calculated over
        expected_checksum: The checksum byte from the message
        mode: Checksum algorithm

    Returns:
        True if checksum is valid, False otherwise
    """
    return calculate_checksum(payload, mode) == expected_checksum


def verify_sysex_checksum(
    message: Union[bytes, bytearray, List[int]], mode: ChecksumMode = ChecksumMode.MASK7
) -> bool:
    """
    Verify the checksum of a complete MiniWorks dump message.

    Expects format: F0 3E 04 DV CM [payload...] CS F7

    Structurally invalid messages (too short, missing F0 or F7) are
    reported as invalid rather than raising; run the envelope check
    first to tell the two apart.

    Args:
        message: Complete SysEx message including F0 and F7
        mode: Checksum algorithm

    Returns:
        True if checksum is valid
    """
    message = bytes(message)

    # Header, checksum and F7 at the very least
    if len(message) < HEADER_LENGTH + 2:
        return False

    if message[0] != SYSEX_START or message[-1] != SYSEX_END:
        return False

    return verify_checksum(checksum_payload(message), message[-2], mode)


def add_checksum(
    payload: Union[bytes, bytearray, List[int]], mode: ChecksumMode = ChecksumMode.MASK7
) -> bytes:
    """
    Calculate and append checksum to data.

    Args:
        payload: Checksummed bytes
        mode: Checksum algorithm

    Returns:
        Original data with checksum appended
    """
    payload = bytes(payload)
    return payload + bytes([calculate_checksum(payload, mode)])
