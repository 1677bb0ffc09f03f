"""Tests for All Dump encoding and decoding."""

import pytest

from miniworks.errors import ChecksumMismatchError, InvalidProgramCountError, MalformedMessageError
from miniworks.formats.configuration_codec import decode_configuration, encode_configuration
from miniworks.formats.program_codec import encode_program
from miniworks.models.configuration import Configuration
from miniworks.models.enums import KnobMode, MidiControl
from miniworks.models.global_settings import GlobalSettings
from miniworks.models.program import Program
from miniworks.utils.checksum import ChecksumMode
from miniworks.utils.validation import ParameterRangeError, ValidationError


class TestEncodeConfiguration:
    """Test cases for All Dump encoding."""

    def test_default_configuration_bytes(self, all_dump):
        assert encode_configuration(Configuration()) == all_dump

    def test_layout(self):
        config = Configuration()
        config.programs[19].cutoff = 1
        config.globals.note_number = 72
        data = encode_configuration(config)

        assert len(data) == 593
        assert data[4] == 0x08
        # Program 20 block: 5 + 19 * 29 = 556; cutoff at +22
        assert data[556 + 22] == 1
        assert data[585:591] == bytes([1, 1, 0, 0, 72, 1])
        assert data[592] == 0xF7

    def test_device_defaults_to_globals(self):
        config = Configuration(globals=GlobalSettings(device_id=7))
        assert encode_configuration(config)[3] == 7
        assert encode_configuration(config, device_id=2)[3] == 2

    def test_too_few_programs(self):
        config = Configuration(programs=[Program(number=i) for i in range(19)])
        with pytest.raises(InvalidProgramCountError) as excinfo:
            encode_configuration(config)
        assert excinfo.value.count == 19

    def test_too_many_programs(self):
        config = Configuration(programs=[Program(number=i % 20) for i in range(21)])
        with pytest.raises(InvalidProgramCountError):
            encode_configuration(config)

    def test_program_numbered_off_slot_rejected(self):
        config = Configuration()
        config.programs[3] = Program(number=8, cutoff=10)
        with pytest.raises(ValidationError, match="slot 3 is numbered 8"):
            encode_configuration(config)

    def test_update_program_renumbers_for_round_trip(self):
        config = Configuration()
        config.update_program(Program(number=8, cutoff=10), 3)
        assert decode_configuration(encode_configuration(config)) == config

    def test_out_of_range_global(self):
        config = Configuration(globals=GlobalSettings(midi_channel=17))
        with pytest.raises(ParameterRangeError):
            encode_configuration(config)


class TestDecodeConfiguration:
    """Test cases for All Dump decoding."""

    def test_decode_default(self, all_dump):
        config = decode_configuration(all_dump)
        assert config == Configuration()
        assert [p.number for p in config.programs] == list(range(20))

    def test_round_trip(self, custom_program):
        config = Configuration(
            globals=GlobalSettings(
                midi_channel=0,
                midi_control=MidiControl.SIGNAL,
                device_id=3,
                startup_program=25,
                note_number=48,
                knob_mode=KnobMode.JUMP,
            )
        )
        config.update_program(custom_program, 4)
        config.update_program(Program(resonance=127), 19)

        for mode in ChecksumMode:
            decoded = decode_configuration(encode_configuration(config, mode=mode), mode)
            assert decoded == config
            assert decoded.programs[4].cutoff == custom_program.cutoff
            assert decoded.programs[4].number == 4

    def test_unknown_global_selectors_fall_back(self, all_dump):
        data = bytearray(all_dump)
        data[586] = 0x09  # MIDI control
        data[590] = 0x05  # Knob mode
        data[591] = sum(data[5:591]) & 0x7F
        config = decode_configuration(bytes(data))
        assert config.globals.midi_control is MidiControl.OFF
        assert config.globals.knob_mode is KnobMode.RELATIVE

    def test_checksum_mismatch(self, all_dump):
        data = bytearray(all_dump)
        data[300] ^= 0x01
        with pytest.raises(ChecksumMismatchError):
            decode_configuration(bytes(data))

    def test_wrong_kind(self):
        with pytest.raises(MalformedMessageError, match="Expected an all dump"):
            decode_configuration(encode_program(Program()))

    def test_truncated(self, all_dump):
        with pytest.raises(MalformedMessageError):
            decode_configuration(all_dump[:500] + b"\xF7")
