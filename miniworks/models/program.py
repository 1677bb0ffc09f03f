"""
Program data model - one MiniWorks 4-Pole patch.
"""

import copy
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from miniworks.formats.constants import NUM_PROGRAM_SLOTS, NUM_PROGRAMS
from miniworks.models.enums import LFOShape, ModulationSource, TriggerMode, TriggerSource
from miniworks.models.parameters import (
    PARAMETERS_BY_CC,
    PROGRAM_PARAMETERS,
    get_parameter,
)
from miniworks.utils.validation import validate_midi_value


@dataclass
class Program:
    """
    A single MiniWorks program.

    Programs 0-19 are the editable user slots; 20-39 are the factory
    ROM programs, which can be copied but not written back.

    The name is display-only: no MiniWorks dump carries it, so it does
    not take part in equality.

    Attributes:
        number: Program slot (0-39)
        name: Display name
        (29 parameter fields, see miniworks.models.parameters)
    """

    number: int = 0
    name: str = field(default="", compare=False)

    # VCF envelope
    vcf_env_attack: int = 64
    vcf_env_decay: int = 64
    vcf_env_sustain: int = 64
    vcf_env_release: int = 64

    # VCA envelope
    vca_env_attack: int = 64
    vca_env_decay: int = 64
    vca_env_sustain: int = 64
    vca_env_release: int = 64

    # Envelope amounts
    vcf_env_cutoff_amount: int = 0
    vca_env_volume_amount: int = 0

    # LFO
    lfo_speed: int = 40
    lfo_speed_mod_amount: int = 64
    lfo_shape: LFOShape = LFOShape.SINE
    lfo_speed_mod_source: ModulationSource = ModulationSource.OFF

    # Modulation amounts
    cutoff_mod_amount: int = 64
    resonance_mod_amount: int = 64
    volume_mod_amount: int = 64
    panning_mod_amount: int = 64

    # Modulation sources
    cutoff_mod_source: ModulationSource = ModulationSource.OFF
    resonance_mod_source: ModulationSource = ModulationSource.OFF
    volume_mod_source: ModulationSource = ModulationSource.OFF
    panning_mod_source: ModulationSource = ModulationSource.OFF

    # Filter / amplifier
    cutoff: int = 127
    resonance: int = 0
    volume: int = 127
    panning: int = 64

    # Gate / trigger
    gate_time: int = 16
    trigger_source: TriggerSource = TriggerSource.AUDIO
    trigger_mode: TriggerMode = TriggerMode.MULTI

    @property
    def is_read_only(self) -> bool:
        """ROM programs (slot 20 and up) cannot be written to the device."""
        return self.number >= NUM_PROGRAMS

    @property
    def display_name(self) -> str:
        """Name, or the front-panel slot label when unnamed."""
        return self.name or f"P.{self.number + 1}"

    def parameter_values(self) -> Dict[str, int]:
        """Get all 29 parameter values as plain ints, in wire order."""
        return {spec.name: int(getattr(self, spec.name)) for spec in PROGRAM_PARAMETERS}

    def set_parameter(self, name: str, value: int) -> None:
        """
        Set a parameter from a raw value.

        Selector parameters go through their enum, so an unknown raw
        value falls back to the enum default.
        """
        spec = get_parameter(name)
        setattr(self, name, spec.decode(int(value)))

    def to_cc_messages(self) -> List[Tuple[int, int]]:
        """
        Express this program as continuous controller values.

        Returns:
            List of (cc_number, value) tuples in wire order
        """
        return [(spec.cc, int(getattr(self, spec.name))) for spec in PROGRAM_PARAMETERS]

    def update_from_cc(self, cc: int, value: int) -> bool:
        """
        Apply an incoming control change.

        Args:
            cc: Controller number
            value: Controller value (0-127)

        Returns:
            True if the controller maps to a program parameter

        Raises:
            ParameterRangeError: If the value is not a MIDI data byte
        """
        spec = PARAMETERS_BY_CC.get(cc)
        if spec is None:
            return False
        setattr(self, spec.name, spec.decode(validate_midi_value(value, spec.name)))
        return True

    def validate(self) -> List[str]:
        """
        Validate program data.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not 0 <= self.number < NUM_PROGRAM_SLOTS:
            errors.append(f"Invalid program number: {self.number} (must be 0-39)")

        for spec in PROGRAM_PARAMETERS:
            value = int(getattr(self, spec.name))
            if not spec.min_value <= value <= spec.max_value:
                errors.append(
                    f"{spec.label} out of range: {value} (must be 0-{spec.max_value})"
                )

        return errors

    def copy(self) -> "Program":
        """Create a deep copy of this program."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"Program(number={self.number}, name={self.display_name!r}, "
            f"cutoff={self.cutoff}, resonance={self.resonance}, volume={self.volume})"
        )
