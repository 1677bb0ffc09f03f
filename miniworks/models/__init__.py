"""Data models for MiniWorks programs and device configurations."""

from miniworks.models.configuration import Configuration
from miniworks.models.enums import (
    KnobMode,
    LFOShape,
    MidiControl,
    ModulationSource,
    TriggerMode,
    TriggerSource,
)
from miniworks.models.global_settings import GlobalSettings
from miniworks.models.parameters import PROGRAM_PARAMETERS, ParameterSpec
from miniworks.models.program import Program

__all__ = [
    "Configuration",
    "GlobalSettings",
    "Program",
    "ParameterSpec",
    "PROGRAM_PARAMETERS",
    "ModulationSource",
    "LFOShape",
    "TriggerSource",
    "TriggerMode",
    "MidiControl",
    "KnobMode",
]
