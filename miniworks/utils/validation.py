"""
Value validation utilities for MiniWorks program and global data.
"""

from miniworks.formats.constants import MAX_DEVICE_ID, NUM_PROGRAM_SLOTS


class ValidationError(ValueError):
    """Raised when a value cannot be represented on the wire."""

    pass


class ParameterRangeError(ValidationError):
    """A parameter value does not fit its range."""

    def __init__(self, name: str, value: int, low: int, high: int):
        super().__init__(f"{name} must be {low}-{high}, got {value}")
        self.name = name
        self.value = value
        self.low = low
        self.high = high


def validate_range(value: int, low: int, high: int, name: str = "value") -> int:
    """
    Validate that an integer lies in an inclusive range.

    Args:
        value: The value to validate
        low: Lowest allowed value
        high: Highest allowed value
        name: Name of the value for error messages

    Returns:
        The value as a plain int

    Raises:
        ParameterRangeError: If value is out of range
    """
    value = int(value)
    if not low <= value <= high:
        raise ParameterRangeError(name, value, low, high)
    return value


def validate_midi_value(value: int, name: str = "value") -> int:
    """
    Validate that a value is a MIDI data byte (0-127).

    Raises:
        ParameterRangeError: If value is out of range
    """
    return validate_range(value, 0, 127, name)


def validate_channel(channel: int) -> int:
    """
    Validate MIDI channel number (1-16).

    Raises:
        ParameterRangeError: If channel is out of range
    """
    return validate_range(channel, 1, 16, "MIDI channel")


def validate_device_id(device_id: int) -> int:
    """Validate a MiniWorks device ID (0-126)."""
    return validate_range(device_id, 0, MAX_DEVICE_ID, "Device ID")


def validate_slot(slot: int) -> int:
    """Validate a program slot addressable by requests (0-39)."""
    return validate_range(slot, 0, NUM_PROGRAM_SLOTS - 1, "Program slot")
