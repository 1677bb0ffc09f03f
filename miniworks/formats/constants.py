"""
Wire-level constants for Waldorf MiniWorks 4-Pole SysEx messages.

Every message starts with the same 5-byte header:

    F0 3E 04 DV CM

    0   F0: Start of System Exclusive
    1   3E: Waldorf Electronics manufacturer ID
    2   04: MiniWorks 4-Pole machine ID
    3   DV: Device ID (global setting, 0-126)
    4   CM: Command / dump type

Program Dump (37 bytes):
    F0 3E 04 DV 00 PRG [29 parameter bytes] CHK F7

All Dump (593 bytes):
    F0 3E 04 DV 08 [20 x 29 parameter bytes] [6 global bytes] CHK F7

The checksum of a Program Dump or Program Bulk Dump covers the command
byte through the last parameter byte. The All Dump checksum starts one
byte later, after the command byte.
"""

SYSEX_START = 0xF0
SYSEX_END = 0xF7

WALDORF_ID = 0x3E
MINIWORKS_MODEL_ID = 0x04
DEFAULT_DEVICE_ID = 0x00
MAX_DEVICE_ID = 126

# Header offsets
MANUFACTURER_OFFSET = 1
MACHINE_OFFSET = 2
DEVICE_ID_OFFSET = 3
COMMAND_OFFSET = 4
HEADER_LENGTH = 5

# Program messages checksum from the command byte, All Dumps from the
# first byte after it
ALL_DUMP_COMMAND = 0x08
PROGRAM_CHECKSUM_START = COMMAND_OFFSET
ALL_DUMP_CHECKSUM_START = HEADER_LENGTH

# Program layout
NUM_PROGRAMS = 20  # Editable user slots
NUM_PROGRAM_SLOTS = 40  # User + ROM slots addressable by requests
PROGRAM_BLOCK_LENGTH = 29
PROGRAM_NUMBER_OFFSET = HEADER_LENGTH
PROGRAM_DATA_OFFSET = PROGRAM_NUMBER_OFFSET + 1
PROGRAM_DUMP_LENGTH = PROGRAM_DATA_OFFSET + PROGRAM_BLOCK_LENGTH + 2  # + CHK F7

# All dump layout
ALL_DUMP_PROGRAMS_OFFSET = HEADER_LENGTH
GLOBALS_OFFSET = ALL_DUMP_PROGRAMS_OFFSET + NUM_PROGRAMS * PROGRAM_BLOCK_LENGTH  # 585
GLOBALS_LENGTH = 6
ALL_DUMP_LENGTH = GLOBALS_OFFSET + GLOBALS_LENGTH + 2  # 593

# Requests
PROGRAM_REQUEST_LENGTH = HEADER_LENGTH + 2  # + PRG F7
ALL_DUMP_REQUEST_LENGTH = HEADER_LENGTH + 1  # + F7

MIDI_DATA_MASK = 0x7F
