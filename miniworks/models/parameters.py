"""
Program parameter table.

One entry per byte of the 29-byte program block, in wire order. The
codecs walk this table instead of indexing literal offsets, so the
layout below is the single source of truth for:

    - byte offset within the program block
    - attribute name on Program
    - continuous controller number
    - value range and initial value
    - enum type for selector parameters
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Type

from miniworks.models.enums import (
    ByteEnum,
    LFOShape,
    ModulationSource,
    TriggerMode,
    TriggerSource,
)


@dataclass(frozen=True)
class ParameterSpec:
    """Static description of one program parameter."""

    name: str  # Attribute name on Program
    label: str
    offset: int  # Byte offset within the 29-byte program block
    cc: int  # Continuous controller number
    default: int = 0
    max_value: int = 127
    enum: Optional[Type[ByteEnum]] = None
    group: str = ""

    @property
    def min_value(self) -> int:
        return 0

    @property
    def is_selector(self) -> bool:
        """True for parameters backed by an enum."""
        return self.enum is not None

    def decode(self, raw: int):
        """Turn a raw byte into the value stored on Program."""
        if self.enum is not None:
            return self.enum.from_byte(raw)
        return raw


_MOD_MAX = len(ModulationSource) - 1

PROGRAM_PARAMETERS: Tuple[ParameterSpec, ...] = (
    # VCF envelope
    ParameterSpec("vcf_env_attack", "VCF Env Attack", 0, 14, 64, group="VCF Envelope"),
    ParameterSpec("vcf_env_decay", "VCF Env Decay", 1, 15, 64, group="VCF Envelope"),
    ParameterSpec("vcf_env_sustain", "VCF Env Sustain", 2, 16, 64, group="VCF Envelope"),
    ParameterSpec("vcf_env_release", "VCF Env Release", 3, 17, 64, group="VCF Envelope"),
    # VCA envelope
    ParameterSpec("vca_env_attack", "VCA Env Attack", 4, 18, 64, group="VCA Envelope"),
    ParameterSpec("vca_env_decay", "VCA Env Decay", 5, 19, 64, group="VCA Envelope"),
    ParameterSpec("vca_env_sustain", "VCA Env Sustain", 6, 20, 64, group="VCA Envelope"),
    ParameterSpec("vca_env_release", "VCA Env Release", 7, 21, 64, group="VCA Envelope"),
    # Envelope amounts
    ParameterSpec("vcf_env_cutoff_amount", "VCF Env Cutoff Amount", 8, 22, 0, group="VCF Envelope"),
    ParameterSpec("vca_env_volume_amount", "VCA Env Volume Amount", 9, 23, 0, group="VCA Envelope"),
    # LFO
    ParameterSpec("lfo_speed", "LFO Speed", 10, 24, 40, group="LFO"),
    ParameterSpec("lfo_speed_mod_amount", "LFO Speed Mod Amount", 11, 26, 64, group="LFO"),
    ParameterSpec(
        "lfo_shape", "LFO Shape", 12, 25, 0, max_value=len(LFOShape) - 1, enum=LFOShape, group="LFO"
    ),
    ParameterSpec(
        "lfo_speed_mod_source",
        "LFO Speed Mod Source",
        13,
        27,
        0,
        max_value=_MOD_MAX,
        enum=ModulationSource,
        group="LFO",
    ),
    # Modulation amounts
    ParameterSpec("cutoff_mod_amount", "Cutoff Mod Amount", 14, 70, 64, group="Filter"),
    ParameterSpec("resonance_mod_amount", "Resonance Mod Amount", 15, 72, 64, group="Filter"),
    ParameterSpec("volume_mod_amount", "Volume Mod Amount", 16, 74, 64, group="Amplifier"),
    ParameterSpec("panning_mod_amount", "Panning Mod Amount", 17, 76, 64, group="Amplifier"),
    # Modulation sources
    ParameterSpec(
        "cutoff_mod_source",
        "Cutoff Mod Source",
        18,
        71,
        0,
        max_value=_MOD_MAX,
        enum=ModulationSource,
        group="Filter",
    ),
    ParameterSpec(
        "resonance_mod_source",
        "Resonance Mod Source",
        19,
        73,
        0,
        max_value=_MOD_MAX,
        enum=ModulationSource,
        group="Filter",
    ),
    ParameterSpec(
        "volume_mod_source",
        "Volume Mod Source",
        20,
        75,
        0,
        max_value=_MOD_MAX,
        enum=ModulationSource,
        group="Amplifier",
    ),
    ParameterSpec(
        "panning_mod_source",
        "Panning Mod Source",
        21,
        77,
        0,
        max_value=_MOD_MAX,
        enum=ModulationSource,
        group="Amplifier",
    ),
    # Main values
    ParameterSpec("cutoff", "Cutoff", 22, 78, 127, group="Filter"),
    ParameterSpec("resonance", "Resonance", 23, 79, 0, group="Filter"),
    ParameterSpec("volume", "Volume", 24, 9, 127, group="Amplifier"),
    ParameterSpec("panning", "Panning", 25, 10, 64, group="Amplifier"),
    # Gate / trigger
    ParameterSpec("gate_time", "Gate Time", 26, 80, 16, group="Trigger"),
    ParameterSpec(
        "trigger_source",
        "Trigger Source",
        27,
        81,
        0,
        max_value=len(TriggerSource) - 1,
        enum=TriggerSource,
        group="Trigger",
    ),
    ParameterSpec(
        "trigger_mode",
        "Trigger Mode",
        28,
        82,
        0,
        max_value=len(TriggerMode) - 1,
        enum=TriggerMode,
        group="Trigger",
    ),
)

PARAMETERS_BY_NAME: Dict[str, ParameterSpec] = {p.name: p for p in PROGRAM_PARAMETERS}
PARAMETERS_BY_CC: Dict[int, ParameterSpec] = {p.cc: p for p in PROGRAM_PARAMETERS}


def get_parameter(name: str) -> ParameterSpec:
    """Look up a parameter by attribute name."""
    try:
        return PARAMETERS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown program parameter: {name}") from None
