"""
MiniWorks SysEx message parser.

Classifies and validates Waldorf MiniWorks 4-Pole System Exclusive
messages before any payload is decoded.

MiniWorks SysEx Format:
- Manufacturer ID: 0x3E (Waldorf)
- Machine ID: 0x04 (MiniWorks 4-Pole)
- Device ID: 0-126 (global setting)

Message kinds (CM byte):
    00  Program Dump            F0 3E 04 DV 00 PRG [29 bytes] CHK F7   (37)
    01  Program Bulk Dump       F0 3E 04 DV 01 PRG [29 bytes] CHK F7   (37)
    08  All Dump                F0 3E 04 DV 08 [586 bytes] CHK F7      (593)
    40  Program Dump Request    F0 3E 04 DV 40 PRG F7                  (7)
    41  Program Bulk Request    F0 3E 04 DV 41 PRG F7                  (7)
    48  All Dump Request        F0 3E 04 DV 48 F7                      (6)

Validation order: framing and identifiers, command byte, length, data
bytes and slot, then checksum (dump kinds only). Nothing is decoded
until all of them pass.
"""

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import List, Optional, Union

from miniworks.errors import (
    ChecksumMismatchError,
    IncompleteMessageError,
    MalformedMessageError,
    MiniWorksError,
    UnknownCommandError,
    WrongDeviceError,
    WrongMachineError,
    WrongManufacturerError,
)
from miniworks.formats.constants import (
    ALL_DUMP_LENGTH,
    ALL_DUMP_REQUEST_LENGTH,
    COMMAND_OFFSET,
    DEVICE_ID_OFFSET,
    HEADER_LENGTH,
    MACHINE_OFFSET,
    MANUFACTURER_OFFSET,
    MIDI_DATA_MASK,
    MINIWORKS_MODEL_ID,
    NUM_PROGRAM_SLOTS,
    PROGRAM_DUMP_LENGTH,
    PROGRAM_NUMBER_OFFSET,
    PROGRAM_REQUEST_LENGTH,
    SYSEX_END,
    SYSEX_START,
    WALDORF_ID,
)
from miniworks.utils.checksum import ChecksumMode, calculate_checksum, checksum_payload
from miniworks.utils.validation import validate_device_id, validate_slot

BytesLike = Union[bytes, bytearray, List[int]]


class MessageType(IntEnum):
    """MiniWorks SysEx command bytes."""

    PROGRAM_DUMP = 0x00
    PROGRAM_BULK_DUMP = 0x01
    ALL_DUMP = 0x08
    PROGRAM_DUMP_REQUEST = 0x40
    PROGRAM_BULK_DUMP_REQUEST = 0x41
    ALL_DUMP_REQUEST = 0x48

    @property
    def is_request(self) -> bool:
        return self >= MessageType.PROGRAM_DUMP_REQUEST

    @property
    def is_dump(self) -> bool:
        return not self.is_request

    @property
    def has_slot(self) -> bool:
        """Whether byte 5 carries a program number."""
        return self is not MessageType.ALL_DUMP and self is not MessageType.ALL_DUMP_REQUEST

    @property
    def expected_length(self) -> int:
        return _EXPECTED_LENGTHS[self]


_EXPECTED_LENGTHS = {
    MessageType.PROGRAM_DUMP: PROGRAM_DUMP_LENGTH,
    MessageType.PROGRAM_BULK_DUMP: PROGRAM_DUMP_LENGTH,
    MessageType.ALL_DUMP: ALL_DUMP_LENGTH,
    MessageType.PROGRAM_DUMP_REQUEST: PROGRAM_REQUEST_LENGTH,
    MessageType.PROGRAM_BULK_DUMP_REQUEST: PROGRAM_REQUEST_LENGTH,
    MessageType.ALL_DUMP_REQUEST: ALL_DUMP_REQUEST_LENGTH,
}


@dataclass
class SysExMessage:
    """
    Validated SysEx message.

    Attributes:
        message_type: Kind of message (dump or request)
        device_id: Device ID byte (0-126)
        program_number: Slot byte for program messages, None otherwise
        payload: Checksummed bytes (dumps only; empty for requests)
        checksum: Checksum byte (dumps only)
        raw: Original raw message bytes
    """

    message_type: MessageType
    device_id: int
    program_number: Optional[int] = None
    payload: bytes = b""
    checksum: Optional[int] = None
    raw: bytes = b""

    @property
    def is_dump(self) -> bool:
        return self.message_type.is_dump

    @property
    def is_request(self) -> bool:
        return self.message_type.is_request

    def __len__(self) -> int:
        return len(self.raw)


def check_framing(message: BytesLike, device_id: Optional[int] = None) -> bytes:
    """
    Check start/end markers and the manufacturer, machine and device IDs.

    Args:
        message: Complete SysEx message including F0 and F7
        device_id: Expected device ID, or None to accept any

    Returns:
        The message as bytes

    Raises:
        IncompleteMessageError: Too short, or F0/F7 missing
        WrongManufacturerError: Not a Waldorf message
        WrongMachineError: Not a MiniWorks 4-Pole message
        WrongDeviceError: Device ID differs from the expected one
    """
    data = bytes(message)

    # Header plus at least F7
    if len(data) < HEADER_LENGTH + 1:
        raise IncompleteMessageError(f"Message too short: {len(data)} bytes", data)

    if data[0] != SYSEX_START:
        raise IncompleteMessageError(f"Missing SysEx start byte (got 0x{data[0]:02X})", data)

    if data[-1] != SYSEX_END:
        raise IncompleteMessageError(f"Missing SysEx end byte (got 0x{data[-1]:02X})", data)

    if data[MANUFACTURER_OFFSET] != WALDORF_ID:
        raise WrongManufacturerError(data[MANUFACTURER_OFFSET], data)

    if data[MACHINE_OFFSET] != MINIWORKS_MODEL_ID:
        raise WrongMachineError(data[MACHINE_OFFSET], data)

    if device_id is not None and data[DEVICE_ID_OFFSET] != device_id:
        raise WrongDeviceError(data[DEVICE_ID_OFFSET], device_id, data)

    return data


def classify(message: BytesLike, device_id: Optional[int] = None) -> MessageType:
    """
    Determine the kind of a MiniWorks message.

    Framing is checked first, then the command byte, then the exact
    length for that kind. Every byte between F0 and F7 must be a MIDI
    data byte and a program slot must be 0-39.

    Args:
        message: Complete SysEx message including F0 and F7
        device_id: Expected device ID, or None to accept any

    Returns:
        Message type

    Raises:
        MalformedMessageError: Framing, command, length, a data byte or
            the program slot is wrong
    """
    data = check_framing(message, device_id)

    command = data[COMMAND_OFFSET]
    try:
        message_type = MessageType(command)
    except ValueError:
        raise UnknownCommandError(command, data)

    expected = message_type.expected_length
    if len(data) < expected:
        raise IncompleteMessageError(
            f"{message_type.name} truncated: {len(data)} bytes (expected {expected})", data
        )
    if len(data) > expected:
        raise MalformedMessageError(
            f"{message_type.name} too long: {len(data)} bytes (expected {expected})", data
        )

    for offset in range(1, len(data) - 1):
        if data[offset] > MIDI_DATA_MASK:
            raise MalformedMessageError(
                f"Byte {offset} is not a MIDI data byte (0x{data[offset]:02X})", data
            )

    if message_type.has_slot and data[PROGRAM_NUMBER_OFFSET] >= NUM_PROGRAM_SLOTS:
        raise MalformedMessageError(
            f"Program slot must be 0-{NUM_PROGRAM_SLOTS - 1}, got {data[PROGRAM_NUMBER_OFFSET]}",
            data,
        )

    return message_type


def parse_message(
    message: BytesLike,
    mode: ChecksumMode = ChecksumMode.MASK7,
    device_id: Optional[int] = None,
) -> SysExMessage:
    """
    Classify a message and verify its checksum.

    Args:
        message: Complete SysEx message including F0 and F7
        mode: Checksum algorithm for dump messages
        device_id: Expected device ID, or None to accept any

    Returns:
        Validated message

    Raises:
        MalformedMessageError: Framing, command or length is wrong
        ChecksumMismatchError: Dump checksum does not match its payload
    """
    data = bytes(message)
    message_type = classify(data, device_id)

    program_number = data[PROGRAM_NUMBER_OFFSET] if message_type.has_slot else None

    if message_type.is_request:
        return SysExMessage(
            message_type=message_type,
            device_id=data[DEVICE_ID_OFFSET],
            program_number=program_number,
            raw=data,
        )

    payload = checksum_payload(data)
    received = data[-2]
    calculated = calculate_checksum(payload, mode)
    if calculated != received:
        raise ChecksumMismatchError(calculated, received, data)

    return SysExMessage(
        message_type=message_type,
        device_id=data[DEVICE_ID_OFFSET],
        program_number=program_number,
        payload=payload,
        checksum=received,
        raw=data,
    )


def split_messages(data: BytesLike) -> List[bytes]:
    """
    Split a byte stream into individual SysEx messages.

    Bytes outside an F0...F7 frame are ignored. An F0 with no matching
    F7 before the next F0 is dropped.
    """
    data = bytes(data)
    messages = []
    start = None

    for i, byte in enumerate(data):
        if byte == SYSEX_START:
            start = i
        elif byte == SYSEX_END and start is not None:
            messages.append(data[start : i + 1])
            start = None

    return messages


@dataclass
class ParseFailure:
    """A message rejected during a batch parse."""

    index: int
    raw: bytes
    error: MiniWorksError

    def __str__(self) -> str:
        return f"message {self.index + 1}: {self.error}"


class SysExParser:
    """
    Parser for streams of MiniWorks SysEx messages.

    Rejected messages are collected in ``errors`` instead of stopping
    the parse, so one bad transmission does not hide the rest of a file.

    Example:
        parser = SysExParser()
        messages = parser.parse_file("bank.syx")

        for msg in messages:
            if msg.message_type == MessageType.ALL_DUMP:
                print(f"All dump from device {msg.device_id}")
    """

    def __init__(
        self, mode: ChecksumMode = ChecksumMode.MASK7, device_id: Optional[int] = None
    ):
        """
        Initialize parser.

        Args:
            mode: Checksum algorithm for dump messages
            device_id: Expected device ID, or None to accept any
        """
        self.mode = mode
        self.device_id = device_id
        self.messages: List[SysExMessage] = []
        self.errors: List[ParseFailure] = []

    def parse_file(self, filepath: Union[str, Path]) -> List[SysExMessage]:
        """
        Parse a SysEx file.

        Args:
            filepath: Path to .syx file

        Returns:
            List of messages that passed validation
        """
        with open(filepath, "rb") as f:
            data = f.read()
        return self.parse_bytes(data)

    def parse_bytes(self, data: BytesLike) -> List[SysExMessage]:
        """
        Parse SysEx data from bytes.

        Args:
            data: Raw SysEx stream (one or more messages)

        Returns:
            List of messages that passed validation
        """
        return self.parse_messages(split_messages(data))

    def parse_messages(self, raw_messages: List[bytes]) -> List[SysExMessage]:
        """Parse already-split messages."""
        self.messages = []
        self.errors = []

        for index, raw in enumerate(raw_messages):
            try:
                self.messages.append(parse_message(raw, self.mode, self.device_id))
            except MiniWorksError as e:
                self.errors.append(ParseFailure(index, bytes(raw), e))

        return self.messages

    def get_messages(self, message_type: MessageType) -> List[SysExMessage]:
        """Get only messages of one kind."""
        return [m for m in self.messages if m.message_type == message_type]


def _build_request(command: int, device_id: int, slot: Optional[int] = None) -> bytes:
    device_id = validate_device_id(device_id)
    body = [SYSEX_START, WALDORF_ID, MINIWORKS_MODEL_ID, device_id, command]
    if slot is not None:
        body.append(validate_slot(slot))
    body.append(SYSEX_END)
    return bytes(body)


def build_program_dump_request(slot: int, device_id: int = 0) -> bytes:
    """
    Build a Program Dump Request.

    Args:
        slot: Program slot (0-39)
        device_id: Target device ID (0-126)

    Returns:
        7-byte request: F0 3E 04 DV 40 PRG F7

    Raises:
        ParameterRangeError: If slot or device ID is out of range
    """
    return _build_request(MessageType.PROGRAM_DUMP_REQUEST, device_id, slot)


def build_program_bulk_dump_request(slot: int, device_id: int = 0) -> bytes:
    """
    Build a Program Bulk Dump Request.

    Returns:
        7-byte request: F0 3E 04 DV 41 PRG F7
    """
    return _build_request(MessageType.PROGRAM_BULK_DUMP_REQUEST, device_id, slot)


def build_all_dump_request(device_id: int = 0) -> bytes:
    """
    Build an All Dump Request.

    Returns:
        6-byte request: F0 3E 04 DV 48 F7
    """
    return _build_request(MessageType.ALL_DUMP_REQUEST, device_id)

