"""
Exceptions raised by the MiniWorks SysEx codecs.

Malformed messages and checksum mismatches are kept apart so a caller
can decide between re-requesting a transmission and rejecting the data.
"""

from typing import Optional


class MiniWorksError(Exception):
    """Base class for all codec errors."""

    pass


class MalformedMessageError(MiniWorksError, ValueError):
    """Framing, identifiers, command byte or length are wrong."""

    def __init__(self, message: str, data: Optional[bytes] = None):
        super().__init__(message)
        self.data = data


class IncompleteMessageError(MalformedMessageError):
    """Message is too short to hold what its command byte promises."""

    pass


class WrongManufacturerError(MalformedMessageError):
    """Manufacturer ID is not Waldorf (0x3E)."""

    def __init__(self, byte: int, data: Optional[bytes] = None):
        super().__init__(f"Wrong manufacturer ID: 0x{byte:02X}", data)
        self.byte = byte


class WrongMachineError(MalformedMessageError):
    """Machine ID is not the MiniWorks 4-Pole (0x04)."""

    def __init__(self, byte: int, data: Optional[bytes] = None):
        super().__init__(f"Wrong machine ID: 0x{byte:02X}", data)
        self.byte = byte


class WrongDeviceError(MalformedMessageError):
    """Device ID does not match the one the caller expects."""

    def __init__(self, byte: int, expected: int, data: Optional[bytes] = None):
        super().__init__(f"Wrong device ID: 0x{byte:02X} (expected 0x{expected:02X})", data)
        self.byte = byte
        self.expected = expected


class UnknownCommandError(MalformedMessageError):
    """Command byte is not a known dump or request type."""

    def __init__(self, byte: int, data: Optional[bytes] = None):
        super().__init__(f"Unknown command byte: 0x{byte:02X}", data)
        self.byte = byte


class ChecksumMismatchError(MiniWorksError):
    """Framing is fine but the embedded checksum disagrees with the payload."""

    def __init__(self, expected: int, received: int, data: Optional[bytes] = None):
        super().__init__(
            f"Checksum mismatch: calculated 0x{expected:02X}, received 0x{received:02X}"
        )
        self.expected = expected
        self.received = received
        self.data = data


class InvalidProgramCountError(MiniWorksError):
    """A configuration does not hold exactly 20 programs."""

    def __init__(self, count: int, expected: int = 20):
        super().__init__(f"Configuration needs exactly {expected} programs, got {count}")
        self.count = count
        self.expected = expected
