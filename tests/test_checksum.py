"""Tests for MiniWorks checksum calculation."""

import pytest

from miniworks.utils.checksum import (
    ChecksumMode,
    add_checksum,
    calculate_checksum,
    checksum_payload,
    checksum_start,
    verify_checksum,
    verify_sysex_checksum,
)


class TestCalculateChecksum:
    """Test cases for both checksum algorithms."""

    def test_mask7_keeps_low_bits(self):
        assert calculate_checksum([64, 100, 127], ChecksumMode.MASK7) == 291 & 0x7F

    def test_complement7_negates(self):
        assert calculate_checksum([64, 100, 127], ChecksumMode.COMPLEMENT7) == 93

    def test_default_mode_is_mask7(self):
        assert calculate_checksum([1, 2, 3]) == 6

    def test_empty_payload(self):
        assert calculate_checksum(b"", ChecksumMode.MASK7) == 0
        assert calculate_checksum(b"", ChecksumMode.COMPLEMENT7) == 0

    def test_large_payload_stays_in_range(self):
        payload = bytes([127] * 5000)
        for mode in ChecksumMode:
            assert 0 <= calculate_checksum(payload, mode) <= 127

    def test_complement7_sums_to_zero(self):
        payload = bytes(range(0, 128, 3))
        checksum = calculate_checksum(payload, ChecksumMode.COMPLEMENT7)
        assert (sum(payload) + checksum) & 0x7F == 0

    def test_accepts_bytearray(self):
        assert calculate_checksum(bytearray([10, 20])) == 30


class TestChecksumMode:
    """Test cases for checksum mode parsing."""

    def test_parse_names(self):
        assert ChecksumMode.parse("mask7") is ChecksumMode.MASK7
        assert ChecksumMode.parse(" COMPLEMENT7 ") is ChecksumMode.COMPLEMENT7

    def test_parse_passes_modes_through(self):
        assert ChecksumMode.parse(ChecksumMode.MASK7) is ChecksumMode.MASK7

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown checksum mode"):
            ChecksumMode.parse("xor")


class TestVerifyChecksum:
    """Test cases for checksum verification."""

    def test_verify_payload(self):
        assert verify_checksum([1, 2, 3], 6)
        assert not verify_checksum([1, 2, 3], 7)

    def test_add_checksum(self):
        assert add_checksum([1, 2, 3]) == bytes([1, 2, 3, 6])
        assert add_checksum([1, 2, 3], ChecksumMode.COMPLEMENT7) == bytes([1, 2, 3, 122])

    def test_checksum_start_by_command(self):
        assert checksum_start(0x00) == 4
        assert checksum_start(0x01) == 4
        assert checksum_start(0x08) == 5

    def test_program_payload_includes_command(self, program_bulk_dump):
        payload = checksum_payload(program_bulk_dump)
        assert len(payload) == 31
        assert payload[0] == 0x01  # command
        assert payload[1] == 0  # program number

    def test_all_dump_payload_skips_command(self, all_dump):
        payload = checksum_payload(all_dump)
        assert len(payload) == 586
        assert payload[0] == 64  # first parameter of program 1

    def test_verify_bulk_dump(self, program_bulk_dump):
        assert verify_sysex_checksum(program_bulk_dump)
        shifted = program_bulk_dump[:-2] + bytes([0x36, 0xF7])
        assert not verify_sysex_checksum(shifted)

    def test_verify_program_dump(self, program_dump, program_dump_complement):
        assert verify_sysex_checksum(program_dump, ChecksumMode.MASK7)
        assert not verify_sysex_checksum(program_dump, ChecksumMode.COMPLEMENT7)
        assert verify_sysex_checksum(program_dump_complement, ChecksumMode.COMPLEMENT7)

    def test_verify_all_dump(self, all_dump):
        assert verify_sysex_checksum(all_dump)

    def test_corrupted_byte_detected(self, program_dump):
        corrupted = bytearray(program_dump)
        corrupted[10] ^= 0x01
        assert not verify_sysex_checksum(bytes(corrupted))

    def test_structural_failures_return_false(self):
        assert not verify_sysex_checksum(b"")
        assert not verify_sysex_checksum(bytes([0xF0, 0x3E, 0x04, 0x00]))
        assert not verify_sysex_checksum(bytes([0x00, 0x3E, 0x04, 0x00, 0x00, 0x00, 0x00, 0xF7]))
        assert not verify_sysex_checksum(bytes([0xF0, 0x3E, 0x04, 0x00, 0x00, 0x00, 0x00, 0x00]))
