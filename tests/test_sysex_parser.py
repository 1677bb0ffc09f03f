"""Tests for MiniWorks SysEx message validation and requests."""

import pytest

from miniworks.errors import (
    ChecksumMismatchError,
    IncompleteMessageError,
    MalformedMessageError,
    UnknownCommandError,
    WrongDeviceError,
    WrongMachineError,
    WrongManufacturerError,
)
from miniworks.formats.sysex_parser import (
    MessageType,
    SysExParser,
    build_all_dump_request,
    build_program_bulk_dump_request,
    build_program_dump_request,
    check_framing,
    classify,
    parse_message,
    split_messages,
)
from miniworks.utils.checksum import ChecksumMode
from miniworks.utils.validation import ParameterRangeError


class TestMessageType:
    """Test cases for message type properties."""

    def test_expected_lengths(self):
        assert MessageType.PROGRAM_DUMP.expected_length == 37
        assert MessageType.PROGRAM_BULK_DUMP.expected_length == 37
        assert MessageType.ALL_DUMP.expected_length == 593
        assert MessageType.PROGRAM_DUMP_REQUEST.expected_length == 7
        assert MessageType.PROGRAM_BULK_DUMP_REQUEST.expected_length == 7
        assert MessageType.ALL_DUMP_REQUEST.expected_length == 6

    def test_request_and_dump(self):
        assert MessageType.ALL_DUMP.is_dump
        assert not MessageType.ALL_DUMP.is_request
        assert MessageType.ALL_DUMP_REQUEST.is_request
        assert MessageType.PROGRAM_DUMP_REQUEST.has_slot
        assert not MessageType.ALL_DUMP.has_slot


class TestFraming:
    """Test cases for envelope checks."""

    def test_valid_framing(self, program_dump):
        assert check_framing(program_dump) == program_dump

    def test_too_short(self):
        with pytest.raises(IncompleteMessageError):
            check_framing(bytes([0xF0, 0x3E, 0x04, 0xF7]))

    def test_missing_start(self, program_dump):
        with pytest.raises(IncompleteMessageError):
            check_framing(b"\x00" + program_dump[1:])

    def test_missing_end(self, program_dump):
        with pytest.raises(IncompleteMessageError):
            check_framing(program_dump[:-1] + b"\x00")

    def test_wrong_manufacturer(self, program_dump):
        data = bytearray(program_dump)
        data[1] = 0x43
        with pytest.raises(WrongManufacturerError) as excinfo:
            check_framing(bytes(data))
        assert excinfo.value.byte == 0x43

    def test_wrong_machine(self, program_dump):
        data = bytearray(program_dump)
        data[2] = 0x05
        with pytest.raises(WrongMachineError):
            check_framing(bytes(data))

    def test_device_id_checked_only_when_given(self, program_dump):
        check_framing(program_dump)
        check_framing(program_dump, device_id=0)
        with pytest.raises(WrongDeviceError) as excinfo:
            check_framing(program_dump, device_id=5)
        assert excinfo.value.expected == 5

    def test_errors_are_value_errors(self, program_dump):
        with pytest.raises(ValueError):
            check_framing(program_dump[:3])


class TestClassify:
    """Test cases for message classification."""

    def test_program_dump(self, program_dump):
        assert classify(program_dump) == MessageType.PROGRAM_DUMP

    def test_all_dump(self, all_dump):
        assert len(all_dump) == 593
        assert classify(all_dump) == MessageType.ALL_DUMP

    def test_requests(self):
        assert classify(build_all_dump_request()) == MessageType.ALL_DUMP_REQUEST
        assert classify(build_program_dump_request(3)) == MessageType.PROGRAM_DUMP_REQUEST
        assert classify(build_program_bulk_dump_request(3)) == MessageType.PROGRAM_BULK_DUMP_REQUEST

    def test_unknown_command(self, program_dump):
        data = bytearray(program_dump)
        data[4] = 0x09
        with pytest.raises(UnknownCommandError) as excinfo:
            classify(bytes(data))
        assert excinfo.value.byte == 0x09

    def test_truncated(self, program_dump):
        with pytest.raises(IncompleteMessageError):
            classify(program_dump[:20] + b"\xF7")

    def test_too_long(self, program_dump):
        with pytest.raises(MalformedMessageError):
            classify(program_dump[:-1] + b"\x00\xF7")

    def test_program_dump_with_all_dump_command(self, program_dump):
        data = bytearray(program_dump)
        data[4] = 0x08
        with pytest.raises(IncompleteMessageError):
            classify(bytes(data))

    def test_byte_with_high_bit_rejected(self, program_dump):
        data = bytearray(program_dump)
        data[6 + 22] = 0x90  # cutoff
        data[-2] = (0x36 - 127 + 0x90) & 0x7F  # keep mask7 checksum consistent
        with pytest.raises(MalformedMessageError, match="not a MIDI data byte"):
            classify(bytes(data))

    def test_high_bit_in_all_dump_globals_rejected(self, all_dump):
        data = bytearray(all_dump)
        data[585] = 0x81
        with pytest.raises(MalformedMessageError, match="Byte 585"):
            classify(bytes(data))

    def test_dump_slot_out_of_range(self, program_dump):
        data = bytearray(program_dump)
        data[5] = 0x50
        data[-2] = (0x36 + 0x50) & 0x7F
        with pytest.raises(MalformedMessageError, match="slot must be 0-39"):
            classify(bytes(data))

    def test_request_slot_out_of_range(self):
        data = bytearray(build_program_dump_request(0))
        data[5] = 40
        with pytest.raises(MalformedMessageError, match="got 40"):
            classify(bytes(data))

    def test_highest_slot_accepted(self):
        assert classify(build_program_bulk_dump_request(39)) == MessageType.PROGRAM_BULK_DUMP_REQUEST


class TestParseMessage:
    """Test cases for full message validation."""

    def test_program_dump_fields(self, program_dump):
        msg = parse_message(program_dump)
        assert msg.message_type == MessageType.PROGRAM_DUMP
        assert msg.device_id == 0
        assert msg.program_number == 0
        assert msg.checksum == 0x36
        assert len(msg.payload) == 31  # command, slot, 29 parameters
        assert len(msg) == 37

    def test_checksum_mismatch(self, program_dump):
        with pytest.raises(ChecksumMismatchError) as excinfo:
            parse_message(program_dump, ChecksumMode.COMPLEMENT7)
        assert excinfo.value.expected == 0x4A
        assert excinfo.value.received == 0x36

    def test_complement_mode(self, program_dump_complement):
        msg = parse_message(program_dump_complement, ChecksumMode.COMPLEMENT7)
        assert msg.checksum == 0x4A

    def test_bulk_dump_checksum_includes_command(self, program_bulk_dump):
        msg = parse_message(program_bulk_dump)
        assert msg.message_type == MessageType.PROGRAM_BULK_DUMP
        assert msg.checksum == 0x37
        assert msg.payload[0] == 0x01

    def test_bulk_dump_with_program_dump_checksum_rejected(self, program_bulk_dump):
        data = program_bulk_dump[:-2] + bytes([0x36, 0xF7])
        with pytest.raises(ChecksumMismatchError) as excinfo:
            parse_message(data)
        assert excinfo.value.expected == 0x37

    def test_all_dump_has_no_slot(self, all_dump):
        msg = parse_message(all_dump)
        assert msg.program_number is None
        assert len(msg.payload) == 586

    def test_request_skips_checksum(self):
        msg = parse_message(build_program_dump_request(12, device_id=3), ChecksumMode.COMPLEMENT7)
        assert msg.is_request
        assert msg.program_number == 12
        assert msg.device_id == 3
        assert msg.checksum is None


class TestRequests:
    """Test cases for dump request builders."""

    def test_program_dump_request(self):
        assert build_program_dump_request(5) == bytes([0xF0, 0x3E, 0x04, 0x00, 0x40, 0x05, 0xF7])

    def test_program_bulk_dump_request(self):
        assert build_program_bulk_dump_request(39, device_id=2) == bytes(
            [0xF0, 0x3E, 0x04, 0x02, 0x41, 0x27, 0xF7]
        )

    def test_all_dump_request(self):
        assert build_all_dump_request(1) == bytes([0xF0, 0x3E, 0x04, 0x01, 0x48, 0xF7])

    def test_slot_out_of_range(self):
        with pytest.raises(ParameterRangeError):
            build_program_dump_request(40)
        with pytest.raises(ParameterRangeError):
            build_program_dump_request(-1)

    def test_device_id_out_of_range(self):
        with pytest.raises(ParameterRangeError):
            build_all_dump_request(127)


class TestSysExParser:
    """Test cases for stream parsing."""

    def test_split_ignores_bytes_outside_frames(self, program_dump):
        stream = b"\x00\x01" + program_dump + b"\x7F" + build_all_dump_request()
        assert split_messages(stream) == [program_dump, build_all_dump_request()]

    def test_parse_mixed_stream(self, program_dump, all_dump):
        parser = SysExParser()
        messages = parser.parse_bytes(program_dump + all_dump + build_all_dump_request())

        assert [m.message_type for m in messages] == [
            MessageType.PROGRAM_DUMP,
            MessageType.ALL_DUMP,
            MessageType.ALL_DUMP_REQUEST,
        ]
        assert parser.errors == []

    def test_bad_message_does_not_stop_parse(self, program_dump):
        bad = bytearray(program_dump)
        bad[-2] ^= 0x01
        parser = SysExParser()
        messages = parser.parse_bytes(bytes(bad) + program_dump)

        assert len(messages) == 1
        assert len(parser.errors) == 1
        assert parser.errors[0].index == 0
        assert isinstance(parser.errors[0].error, ChecksumMismatchError)

    def test_get_messages(self, program_dump, all_dump):
        parser = SysExParser()
        parser.parse_bytes(program_dump + all_dump)
        assert len(parser.get_messages(MessageType.ALL_DUMP)) == 1

    def test_parse_file(self, tmp_path, program_dump):
        path = tmp_path / "p.syx"
        path.write_bytes(program_dump)
        assert len(SysExParser().parse_file(path)) == 1

    def test_device_filter(self, program_dump):
        parser = SysExParser(device_id=4)
        assert parser.parse_bytes(program_dump) == []
        assert isinstance(parser.errors[0].error, WrongDeviceError)
