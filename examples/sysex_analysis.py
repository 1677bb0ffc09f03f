#!/usr/bin/env python3
"""
Example: SysEx message analysis

Shows how to validate MiniWorks SysEx data message by message.
"""

import sys

sys.path.insert(0, "..")

from miniworks.formats.sysex_parser import MessageType, SysExParser
from miniworks.utils.checksum import ChecksumMode


def analyze_sysex(filepath: str, mode: ChecksumMode = ChecksumMode.MASK7):
    """
    Print every message in a .syx file.

    Args:
        filepath: Path to .syx file
        mode: Checksum algorithm
    """
    parser = SysExParser(mode)
    messages = parser.parse_file(filepath)

    print(f"Valid messages: {len(messages)}")
    for msg in messages:
        slot = "" if msg.program_number is None else f" slot {msg.program_number}"
        print(f"  {msg.message_type.name}{slot}, device {msg.device_id}, {len(msg)} bytes")

    all_dumps = parser.get_messages(MessageType.ALL_DUMP)
    if all_dumps:
        print(f"All Dumps: {len(all_dumps)}")

    if parser.errors:
        print(f"Rejected: {len(parser.errors)}")
        for failure in parser.errors:
            print(f"  {failure}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python sysex_analysis.py <file.syx> [mask7|complement7]")
        sys.exit(1)

    mode = ChecksumMode.parse(sys.argv[2]) if len(sys.argv) > 2 else ChecksumMode.MASK7
    analyze_sysex(sys.argv[1], mode)
