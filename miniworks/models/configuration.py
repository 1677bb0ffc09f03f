"""
Configuration data model - the complete state of a MiniWorks device.
"""

import copy
from dataclasses import dataclass, field
from typing import List

from miniworks.formats.constants import NUM_PROGRAMS
from miniworks.models.global_settings import GlobalSettings
from miniworks.models.program import Program


def create_default_programs() -> List[Program]:
    """Create the 20 user programs with initial values."""
    return [Program(number=i) for i in range(NUM_PROGRAMS)]


@dataclass
class Configuration:
    """
    All 20 user programs plus the global settings.

    This is what an All Dump carries. The program list must always hold
    exactly 20 entries; the codecs refuse anything else.

    Attributes:
        programs: User programs, index = slot (0-19)
        globals: Device-wide settings
        name: Display name (not on the wire)
    """

    programs: List[Program] = field(default_factory=create_default_programs)
    globals: GlobalSettings = field(default_factory=GlobalSettings)
    name: str = field(default="", compare=False)

    @property
    def program_count(self) -> int:
        return len(self.programs)

    def program(self, number: int) -> Program:
        """
        Get a program by slot.

        Args:
            number: Slot number (0-19)
        """
        if not 0 <= number < NUM_PROGRAMS:
            raise IndexError(f"Program slot must be 0-{NUM_PROGRAMS - 1}, got {number}")
        return self.programs[number]

    def update_program(self, program: Program, number: int) -> None:
        """
        Store a program in a slot.

        The stored copy is renumbered to the slot, so ROM programs can be
        copied into user memory.
        """
        if not 0 <= number < NUM_PROGRAMS:
            raise IndexError(f"Program slot must be 0-{NUM_PROGRAMS - 1}, got {number}")
        stored = program.copy()
        stored.number = number
        self.programs[number] = stored

    def validate(self) -> List[str]:
        """
        Validate configuration data.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if len(self.programs) != NUM_PROGRAMS:
            errors.append(f"Configuration has {len(self.programs)} programs (need {NUM_PROGRAMS})")

        for index, program in enumerate(self.programs):
            if program.number != index:
                errors.append(f"Program in slot {index} is numbered {program.number}")
            errors.extend(f"P.{index + 1}: {e}" for e in program.validate())

        errors.extend(self.globals.validate())
        return errors

    def copy(self) -> "Configuration":
        """Create a deep copy of this configuration."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"Configuration(name={self.name!r}, programs={len(self.programs)}, "
            f"device_id={self.globals.device_id})"
        )
