"""Utility functions for MiniWorks SysEx handling."""

from miniworks.utils.checksum import (
    ChecksumMode,
    add_checksum,
    calculate_checksum,
    verify_checksum,
    verify_sysex_checksum,
)
from miniworks.utils.validation import ParameterRangeError, ValidationError

__all__ = [
    "ChecksumMode",
    "add_checksum",
    "calculate_checksum",
    "verify_checksum",
    "verify_sysex_checksum",
    "ParameterRangeError",
    "ValidationError",
]
