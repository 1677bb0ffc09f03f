"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from miniworks.models.program import Program

# Initial program values in wire order
DEFAULT_PARAMS = bytes(
    [
        64, 64, 64, 64,  # VCF envelope
        64, 64, 64, 64,  # VCA envelope
        0, 0,  # Envelope amounts
        40, 64, 0, 0,  # LFO speed, speed mod amount, shape, speed mod source
        64, 64, 64, 64,  # Mod amounts
        0, 0, 0, 0,  # Mod sources
        127, 0, 127, 64,  # Cutoff, resonance, volume, panning
        16, 0, 0,  # Gate time, trigger source, trigger mode
    ]
)

# sum(DEFAULT_PARAMS) == 1206
DEFAULT_PARAMS_SUM = 1206


def make_message(command: int, body: bytes, checksum: int, device_id: int = 0) -> bytes:
    """Assemble F0 3E 04 DV CM [body] CHK F7."""
    return bytes([0xF0, 0x3E, 0x04, device_id, command]) + bytes(body) + bytes([checksum, 0xF7])


@pytest.fixture
def default_params():
    """Return the 29 parameter bytes of an initial program."""
    return DEFAULT_PARAMS


@pytest.fixture
def program_dump():
    """Return a Program Dump of an initial program in slot 0 (mask7)."""
    # (0 + 1206) & 0x7F == 0x36
    return make_message(0x00, bytes([0]) + DEFAULT_PARAMS, 0x36)


@pytest.fixture
def program_dump_complement():
    """Return the same Program Dump with a complement7 checksum."""
    # (-1206) & 0x7F == 0x4A
    return make_message(0x00, bytes([0]) + DEFAULT_PARAMS, 0x4A)


@pytest.fixture
def program_bulk_dump():
    """Return a Program Bulk Dump of an initial program in slot 0 (mask7)."""
    # Command byte is summed too: (1 + 0 + 1206) & 0x7F == 0x37
    return make_message(0x01, bytes([0]) + DEFAULT_PARAMS, 0x37)


@pytest.fixture
def custom_program():
    """Return a program with non-default values in every section."""
    return Program(
        number=7,
        name="Acid",
        vcf_env_attack=0,
        vcf_env_decay=90,
        vcf_env_sustain=20,
        vcf_env_release=30,
        vcf_env_cutoff_amount=100,
        lfo_speed=99,
        lfo_shape=3,
        lfo_speed_mod_source=12,
        cutoff_mod_source=5,
        cutoff=40,
        resonance=110,
        volume=100,
        panning=30,
        gate_time=5,
        trigger_source=1,
        trigger_mode=1,
    )


@pytest.fixture
def all_dump():
    """Return an All Dump of 20 initial programs and initial globals (mask7)."""
    globals_block = bytes([1, 1, 0, 0, 60, 1])
    body = DEFAULT_PARAMS * 20 + globals_block
    # 20 * 1206 + 63 == 24183; 24183 & 0x7F == 0x77
    return make_message(0x08, body, 0x77)
