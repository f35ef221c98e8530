"""Tests for NMEA checksum validation."""

from gpsinfo import ChecksumStatus, validate_checksum
from gpsinfo.nmea.checksum import calculate_xor_checksum, control_checksum
from tests.helpers import GGA_VALID, RMC_VALID, VTG_VALID, stream_of


def _control(sentence: str, start_index: int = 0) -> ChecksumStatus:
    stream = sentence.encode("ascii")
    return control_checksum(stream, len(stream), start_index)


class TestCalculateXorChecksum:
    def test_two_letters(self):
        assert calculate_xor_checksum(b"AB", 0, 2) == 0x03

    def test_range_is_half_open(self):
        assert calculate_xor_checksum(b"$AB*", 1, 3) == 0x03

    def test_empty_range(self):
        assert calculate_xor_checksum(b"AB", 1, 1) == 0


class TestControlChecksum:
    """Tests for control_checksum function."""

    def test_synthetic_sentence_is_valid(self):
        # 'A' ^ 'B' ^ ',' ^ '1' ^ ',' ^ '2' == 0x00
        assert _control("$AB,1,2*00") is ChecksumStatus.VALID

    def test_corrupted_payload_is_invalid(self):
        assert _control("$AB,1,3*00") is ChecksumStatus.INVALID

    def test_missing_suffix_is_not_present(self):
        assert _control("$AB,1,2") is ChecksumStatus.NOT_PRESENT

    def test_hex_letters_are_decoded(self):
        assert _control(GGA_VALID) is ChecksumStatus.VALID
        assert _control(RMC_VALID) is ChecksumStatus.VALID

    def test_lowercase_hex_is_accepted(self):
        assert _control(GGA_VALID[:-2] + "7f") is ChecksumStatus.VALID

    def test_truncated_checksum_is_invalid(self):
        assert _control(GGA_VALID[:-1]) is ChecksumStatus.INVALID

    def test_non_hex_checksum_is_invalid(self):
        assert _control("$AB,1,2*0G") is ChecksumStatus.INVALID

    def test_search_stops_at_line_end(self):
        stream = stream_of("$AB,1,2", "$CD*07")
        assert control_checksum(stream, len(stream), 0) is ChecksumStatus.NOT_PRESENT

    def test_starts_at_given_sentence(self):
        stream = stream_of("$AB,1,2", VTG_VALID)
        start = stream.index(b"$GNVTG")
        assert control_checksum(stream, len(stream), start) is ChecksumStatus.VALID

    def test_size_bounds_the_scan(self):
        stream = RMC_VALID.encode("ascii")
        assert control_checksum(stream, len(stream) - 3, 0) is ChecksumStatus.NOT_PRESENT


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_VALID) is ChecksumStatus.VALID

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(GGA_VALID + "\r\n") is ChecksumStatus.VALID

    def test_accepts_bytes(self):
        assert validate_checksum(GGA_VALID.encode("ascii")) is ChecksumStatus.VALID

    def test_invalid_checksum(self):
        sentence = GGA_VALID[:-2] + "FF"
        assert validate_checksum(sentence) is ChecksumStatus.INVALID

    def test_missing_dollar_sign(self):
        assert validate_checksum(GGA_VALID[1:]) is ChecksumStatus.NOT_PRESENT

    def test_missing_asterisk(self):
        sentence = GGA_VALID.replace("*", "")
        assert validate_checksum(sentence) is ChecksumStatus.NOT_PRESENT

    def test_empty_string(self):
        assert validate_checksum("") is ChecksumStatus.NOT_PRESENT

    def test_truncated_checksum(self):
        assert validate_checksum(GGA_VALID[:-1]) is ChecksumStatus.INVALID

    def test_non_ascii_sentence(self):
        assert validate_checksum("$GNGGA,é*00") is ChecksumStatus.INVALID

    def test_skips_bytes_before_first_sentence(self):
        stream = b"\x00garbage" + stream_of(VTG_VALID, "$AB,1,2*FF")
        assert validate_checksum(stream) is ChecksumStatus.VALID

    def test_only_first_sentence_is_checked(self):
        stream = stream_of("$AB,1,2*FF", VTG_VALID)
        assert validate_checksum(stream) is ChecksumStatus.INVALID
