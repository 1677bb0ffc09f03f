"""
SysEx format handlers for the MiniWorks 4-Pole.

    constants            Wire layout and identifiers
    sysex_parser         Envelope validation, classification, requests
    program_codec        Program Dump <-> Program
    configuration_codec  All Dump <-> Configuration
    reader / writer      .syx files

Submodules are imported directly; this package does not re-export them
because the model and utility modules depend on ``constants``.
"""
