"""
Raw-byte backed enumerations used by MiniWorks programs and globals.

Each enum maps one wire byte to a named value. ``from_byte`` never
fails: a byte outside the known set (for example a value written by
newer firmware) decodes to the enum's default member so the rest of
the program still decodes.
"""

from enum import IntEnum


class ByteEnum(IntEnum):
    """IntEnum with a documented fallback for unknown raw bytes."""

    @classmethod
    def default(cls) -> "ByteEnum":
        """Member used for new data and for unknown raw bytes."""
        return cls(0)

    @classmethod
    def from_byte(cls, value: int) -> "ByteEnum":
        """
        Decode a raw wire byte.

        Args:
            value: Raw byte from a program or global block

        Returns:
            Matching member, or ``default()`` if the byte is unknown
        """
        try:
            return cls(value)
        except ValueError:
            return cls.default()

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


class ModulationSource(ByteEnum):
    """Modulation sources selectable for cutoff, resonance, volume, pan and LFO speed."""

    OFF = 0
    LFO = 1
    LFO_MOD_WHEEL = 2  # LFO scaled by mod wheel
    LFO_AFTERTOUCH = 3  # LFO scaled by aftertouch
    LFO_VCA_ENVELOPE = 4  # LFO scaled by VCA envelope
    VCF_ENVELOPE = 5
    VCA_ENVELOPE = 6
    SIGNAL_ENVELOPE = 7  # Trigger or audio in
    VELOCITY_VCA_ENVELOPE = 8  # VCA envelope scaled by note-on velocity
    VELOCITY = 9
    KEYTRACK = 10
    PITCHBEND = 11
    MOD_WHEEL = 12  # CC#1
    AFTERTOUCH = 13  # Channel pressure
    BREATH_CONTROL = 14  # CC#2
    FOOT_CONTROLLER = 15  # CC#4

    @property
    def short_name(self) -> str:
        return _MOD_SOURCE_SHORT_NAMES[self]


_MOD_SOURCE_SHORT_NAMES = {
    ModulationSource.OFF: "Off",
    ModulationSource.LFO: "LFO",
    ModulationSource.LFO_MOD_WHEEL: "LFO*ModWhl",
    ModulationSource.LFO_AFTERTOUCH: "LFO*AftTch",
    ModulationSource.LFO_VCA_ENVELOPE: "LFO*VCAEnv",
    ModulationSource.VCF_ENVELOPE: "VCF Env",
    ModulationSource.VCA_ENVELOPE: "VCA Env",
    ModulationSource.SIGNAL_ENVELOPE: "Signal Env",
    ModulationSource.VELOCITY_VCA_ENVELOPE: "Vel*VCAEnv",
    ModulationSource.VELOCITY: "Vel",
    ModulationSource.KEYTRACK: "Keytrk",
    ModulationSource.PITCHBEND: "Ptchbnd",
    ModulationSource.MOD_WHEEL: "ModWhl",
    ModulationSource.AFTERTOUCH: "AftTch",
    ModulationSource.BREATH_CONTROL: "Breath",
    ModulationSource.FOOT_CONTROLLER: "Foot",
}


class LFOShape(ByteEnum):
    """LFO waveform."""

    SINE = 0
    TRIANGLE = 1
    SAWTOOTH = 2
    PULSE = 3
    SAMPLE_HOLD = 4


class TriggerSource(ByteEnum):
    """What triggers the envelopes."""

    AUDIO = 0
    MIDI = 1
    ALL = 2


class TriggerMode(ByteEnum):
    """Envelope retrigger behaviour."""

    # Unknown bytes decode to MULTI, the initial program's value. Some
    # editors fall back to SINGLE instead.
    MULTI = 0
    SINGLE = 1


class MidiControl(ByteEnum):
    """Global MIDI control mode."""

    OFF = 0
    CONTROLS = 1  # CtR: controls sent to / received from a sequencer
    SIGNAL = 2  # CtS: signal envelope sent as breath controller


class KnobMode(ByteEnum):
    """How front-panel knobs pick up stored values."""

    JUMP = 0
    RELATIVE = 1

    @classmethod
    def default(cls) -> "KnobMode":
        return cls.RELATIVE
