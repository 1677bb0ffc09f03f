"""Tests for Program Dump encoding and decoding."""

import pytest

from miniworks.errors import ChecksumMismatchError, MalformedMessageError, WrongDeviceError
from miniworks.formats.program_codec import (
    decode_program,
    decode_program_block,
    encode_program,
    encode_program_data,
)
from miniworks.formats.sysex_parser import build_all_dump_request
from miniworks.models.enums import LFOShape, ModulationSource, TriggerMode, TriggerSource
from miniworks.models.program import Program
from miniworks.utils.checksum import ChecksumMode
from miniworks.utils.validation import ParameterRangeError


class TestEncodeProgram:
    """Test cases for program encoding."""

    def test_default_program_bytes(self, program_dump):
        assert encode_program(Program()) == program_dump

    def test_complement_checksum(self, program_dump_complement):
        assert encode_program(Program(), mode=ChecksumMode.COMPLEMENT7) == program_dump_complement

    def test_length_and_header(self):
        data = encode_program(Program(number=12), device_id=9)
        assert len(data) == 37
        assert data[:6] == bytes([0xF0, 0x3E, 0x04, 0x09, 0x00, 0x0C])
        assert data[-1] == 0xF7

    def test_bulk_command(self):
        assert encode_program(Program(), bulk=True)[4] == 0x01

    def test_bulk_checksum_covers_command(self, program_bulk_dump):
        assert encode_program(Program(), bulk=True) == program_bulk_dump

    def test_bulk_complement_checksum(self):
        # (-(1 + 1206)) & 0x7F == 0x49
        assert encode_program(Program(), mode=ChecksumMode.COMPLEMENT7, bulk=True)[-2] == 0x49

    def test_program_data_forms(self, default_params):
        program = Program(number=3)
        assert encode_program_data(program) == bytes([3]) + default_params
        assert encode_program_data(program, for_all_dump=True) == default_params

    def test_wire_order(self):
        program = Program(vcf_env_attack=1, trigger_mode=TriggerMode.SINGLE, cutoff=2, panning=3)
        block = encode_program_data(program, for_all_dump=True)
        assert block[0] == 1
        assert block[22] == 2
        assert block[25] == 3
        assert block[28] == 1

    def test_out_of_range_rejected(self):
        with pytest.raises(ParameterRangeError) as excinfo:
            encode_program(Program(cutoff=128))
        assert excinfo.value.name == "cutoff"

    def test_negative_rejected(self):
        with pytest.raises(ParameterRangeError):
            encode_program(Program(resonance=-1))

    def test_selector_out_of_range_rejected(self):
        with pytest.raises(ParameterRangeError):
            encode_program(Program(lfo_shape=9))

    def test_slot_out_of_range_rejected(self):
        with pytest.raises(ParameterRangeError):
            encode_program(Program(number=40))

    def test_device_id_out_of_range_rejected(self):
        with pytest.raises(ParameterRangeError):
            encode_program(Program(), device_id=127)


class TestDecodeProgram:
    """Test cases for program decoding."""

    def test_decode_default(self, program_dump):
        assert decode_program(program_dump) == Program()

    def test_round_trip(self, custom_program):
        for mode in ChecksumMode:
            decoded = decode_program(encode_program(custom_program, mode=mode), mode)
            assert decoded == custom_program

    def test_enum_fields_decoded(self, custom_program):
        decoded = decode_program(encode_program(custom_program))
        assert decoded.lfo_shape is LFOShape.PULSE
        assert decoded.lfo_speed_mod_source is ModulationSource.MOD_WHEEL
        assert decoded.cutoff_mod_source is ModulationSource.VCF_ENVELOPE
        assert decoded.trigger_source is TriggerSource.MIDI
        assert decoded.trigger_mode is TriggerMode.SINGLE

    def test_number_taken_from_slot_byte(self):
        assert decode_program(encode_program(Program(number=25))).number == 25

    def test_name_not_on_wire(self, custom_program):
        decoded = decode_program(encode_program(custom_program))
        assert decoded.name == ""
        assert decoded == custom_program

    def test_bulk_dump_decodes(self, custom_program):
        assert decode_program(encode_program(custom_program, bulk=True)) == custom_program

    def test_checksum_mismatch(self, program_dump):
        with pytest.raises(ChecksumMismatchError):
            decode_program(program_dump, ChecksumMode.COMPLEMENT7)

    def test_device_mismatch(self, program_dump):
        with pytest.raises(WrongDeviceError):
            decode_program(program_dump, device_id=1)

    def test_wrong_message_kind(self, all_dump):
        with pytest.raises(MalformedMessageError, match="Expected a program dump"):
            decode_program(all_dump)
        with pytest.raises(MalformedMessageError):
            decode_program(build_all_dump_request())

    def test_unknown_selector_falls_back(self, custom_program):
        block = bytearray(encode_program_data(custom_program, for_all_dump=True))
        block[12] = 0x7F  # LFO shape
        block[18] = 0x40  # Cutoff mod source
        block[28] = 0x05  # Trigger mode
        program = decode_program_block(bytes(block), custom_program.number)

        assert program.lfo_shape is LFOShape.SINE
        assert program.cutoff_mod_source is ModulationSource.OFF
        assert program.trigger_mode is TriggerMode.MULTI

        expected = custom_program.copy()
        expected.lfo_shape = LFOShape.SINE
        expected.cutoff_mod_source = ModulationSource.OFF
        expected.trigger_mode = TriggerMode.MULTI
        assert program.parameter_values() == expected.parameter_values()
        assert program == expected

    def test_byte_with_high_bit_rejected(self, default_params):
        body = bytearray([0]) + default_params
        body[1 + 22] = 0x90  # cutoff
        data = bytes([0xF0, 0x3E, 0x04, 0x00, 0x00]) + bytes(body)
        data += bytes([sum(body) & 0x7F, 0xF7])
        with pytest.raises(MalformedMessageError, match="not a MIDI data byte"):
            decode_program(data)

    def test_slot_byte_out_of_range(self, default_params):
        body = bytes([0x50]) + default_params
        data = bytes([0xF0, 0x3E, 0x04, 0x00, 0x00]) + body + bytes([sum(body) & 0x7F, 0xF7])
        with pytest.raises(MalformedMessageError, match="slot"):
            decode_program(data)

    def test_rom_slot_decodes(self):
        assert decode_program(encode_program(Program(number=39))).number == 39


class TestDecodeProgramBlock:
    """Test cases for bare 29-byte blocks."""

    def test_block_number(self, default_params):
        assert decode_program_block(default_params, 11).number == 11

    def test_block_length(self, default_params):
        with pytest.raises(MalformedMessageError):
            decode_program_block(default_params[:28], 0)
        with pytest.raises(MalformedMessageError):
            decode_program_block(default_params + b"\x00", 0)

    def test_block_byte_with_high_bit_rejected(self, default_params):
        block = bytearray(default_params)
        block[3] = 0xFF
        with pytest.raises(MalformedMessageError, match="Program byte 3"):
            decode_program_block(bytes(block), 0)
