"""
Bridges between raw MiniWorks messages and mido.

mido strips F0/F7 from SysEx data, so a raw message F0 3E 04 00 48 F7
becomes ``mido.Message("sysex", data=[0x3E, 0x04, 0x00, 0x48])``.
"""

from typing import Iterable, List, Optional, Union

import mido

from miniworks.errors import IncompleteMessageError
from miniworks.formats.constants import SYSEX_END, SYSEX_START
from miniworks.models.program import Program
from miniworks.utils.validation import validate_channel


def to_mido_message(raw: Union[bytes, bytearray, List[int]]) -> mido.Message:
    """
    Wrap a complete SysEx message for a mido port.

    Args:
        raw: Complete message including F0 and F7

    Raises:
        IncompleteMessageError: If F0 or F7 is missing
    """
    raw = bytes(raw)
    if len(raw) < 2 or raw[0] != SYSEX_START or raw[-1] != SYSEX_END:
        raise IncompleteMessageError("SysEx message must start with F0 and end with F7", raw)
    return mido.Message("sysex", data=raw[1:-1])


def from_mido_message(msg: mido.Message) -> bytes:
    """
    Get the complete raw bytes of a received SysEx message.

    Raises:
        ValueError: If the message is not SysEx
    """
    if msg.type != "sysex":
        raise ValueError(f"Expected a sysex message, got {msg.type}")
    return bytes(msg.bytes())


def control_change_messages(program: Program, channel: int = 1) -> List[mido.Message]:
    """
    Express a program as control changes.

    Sending these to a MiniWorks in "controls" mode sets the edit buffer
    without a SysEx transfer.

    Args:
        program: Program to send
        channel: MIDI channel (1-16)

    Returns:
        One control_change message per parameter, in wire order
    """
    channel = validate_channel(channel)
    return [
        mido.Message("control_change", channel=channel - 1, control=cc, value=value)
        for cc, value in program.to_cc_messages()
    ]


def apply_control_change(program: Program, msg: mido.Message) -> bool:
    """
    Update a program from a received control change.

    Returns:
        True if the message changed a program parameter
    """
    if msg.type != "control_change":
        return False
    return program.update_from_cc(msg.control, msg.value)


def find_midi_port(port_name: Optional[str] = None) -> Optional[str]:
    """
    Find an output port by name or return the first available.

    A partial, case-insensitive name match is accepted.
    """
    ports = mido.get_output_names()
    if not ports:
        return None
    if port_name:
        if port_name in ports:
            return port_name
        matches = [p for p in ports if port_name.lower() in p.lower()]
        return matches[0] if matches else None
    return ports[0]


def send_messages(raw_messages: Iterable[bytes], port_name: Optional[str] = None) -> int:
    """
    Send raw SysEx messages to an output port.

    Args:
        raw_messages: Complete messages including F0 and F7
        port_name: Port name (or part of it); first port if None

    Returns:
        Number of messages sent

    Raises:
        IOError: If no matching output port exists
    """
    port = find_midi_port(port_name)
    if port is None:
        wanted = f" matching {port_name!r}" if port_name else ""
        raise IOError(f"No MIDI output port found{wanted}")

    count = 0
    with mido.open_output(port) as outport:
        for raw in raw_messages:
            outport.send(to_mido_message(raw))
            count += 1
    return count
