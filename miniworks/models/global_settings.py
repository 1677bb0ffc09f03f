"""
Global (device-wide) settings carried at the end of an All Dump.
"""

from dataclasses import dataclass
from typing import List

from miniworks.models.enums import KnobMode, MidiControl
from miniworks.utils.validation import validate_range


@dataclass
class GlobalSettings:
    """
    MiniWorks global parameters.

    Wire order (6 bytes, All Dump offsets 585-590):
        MIDI channel, MIDI control, device ID, startup program,
        note number, knob mode
    """

    midi_channel: int = 1  # 0 = omni, 1-16
    midi_control: MidiControl = MidiControl.CONTROLS
    device_id: int = 0  # 0-126
    startup_program: int = 0  # Program loaded at power-on (0-39)
    note_number: int = 60  # Note used for keytracking and envelope triggers
    knob_mode: KnobMode = KnobMode.RELATIVE

    # Inclusive ranges checked by validate()
    RANGES = {
        "midi_channel": (0, 16),
        "midi_control": (0, 2),
        "device_id": (0, 126),
        "startup_program": (0, 39),
        "note_number": (0, 127),
        "knob_mode": (0, 1),
    }

    @classmethod
    def from_bytes(cls, data: bytes) -> "GlobalSettings":
        """
        Build settings from the 6-byte global block.

        Unknown MIDI control or knob mode bytes fall back to their defaults.
        """
        if len(data) != 6:
            raise ValueError(f"Global block must be 6 bytes, got {len(data)}")
        return cls(
            midi_channel=data[0],
            midi_control=MidiControl.from_byte(data[1]),
            device_id=data[2],
            startup_program=data[3],
            note_number=data[4],
            knob_mode=KnobMode.from_byte(data[5]),
        )

    def to_bytes(self) -> bytes:
        """
        Encode to the 6-byte global block.

        Raises:
            ParameterRangeError: If a value does not fit its range
        """
        values = []
        for name, (low, high) in self.RANGES.items():
            values.append(validate_range(int(getattr(self, name)), low, high, name))
        return bytes(values)

    def validate(self) -> List[str]:
        """Return range problems (empty if valid)."""
        errors = []
        for name, (low, high) in self.RANGES.items():
            value = int(getattr(self, name))
            if not low <= value <= high:
                errors.append(f"Global {name} out of range: {value} (must be {low}-{high})")
        return errors

    @property
    def is_omni(self) -> bool:
        return self.midi_channel == 0
