"""Tests for hex-to-bit conversion and the bit cursor."""

import pytest

from bitsctl.domain.bits import BitCursor, bits_to_hex, hex_to_bits
from bitsctl.domain.errors import InvalidEncoding, TruncatedStream


class TestHexToBits:
    def test_expands_each_digit_msb_first(self) -> None:
        assert hex_to_bits("D2FE28") == "110100101111111000101000"

    def test_case_insensitive(self) -> None:
        assert hex_to_bits("d2fe28") == hex_to_bits("D2FE28")

    @pytest.mark.parametrize("hex_text", ["00", "FF", "38006F45291200", "9C0141080250320F1802104A08"])
    def test_length_is_four_bits_per_digit(self, hex_text: str) -> None:
        assert len(hex_to_bits(hex_text)) == 4 * len(hex_text)

    @pytest.mark.parametrize("hex_text", ["0A", "EE00D40C823060", "c200b40a82"])
    def test_regrouping_recovers_digits(self, hex_text: str) -> None:
        assert bits_to_hex(hex_to_bits(hex_text)) == hex_text.upper()

    def test_rejects_non_hex_character(self) -> None:
        with pytest.raises(InvalidEncoding) as exc_info:
            hex_to_bits("D2FG28")
        assert exc_info.value.code == "INVALID_ENCODING"
        assert exc_info.value.detail == {"offset": 3, "character": "G"}

    def test_rejects_embedded_whitespace(self) -> None:
        with pytest.raises(InvalidEncoding):
            hex_to_bits("D2 FE28")

    def test_rejects_odd_length(self) -> None:
        with pytest.raises(InvalidEncoding, match="odd length"):
            hex_to_bits("D2F")

    def test_rejects_empty(self) -> None:
        with pytest.raises(InvalidEncoding, match="empty"):
            hex_to_bits("")


class TestBitsToHex:
    def test_requires_whole_digits(self) -> None:
        with pytest.raises(ValueError):
            bits_to_hex("101")


class TestBitCursor:
    def test_reads_fields_in_order(self) -> None:
        cursor = BitCursor("110100")
        assert cursor.read(3) == 6
        assert cursor.read(3) == 4
        assert cursor.position == 6
        assert cursor.remaining == 0

    def test_read_flag(self) -> None:
        cursor = BitCursor("10")
        assert cursor.read_flag() is True
        assert cursor.read_flag() is False

    def test_wide_read(self) -> None:
        cursor = BitCursor("000000000011011")
        assert cursor.read(15) == 27

    def test_overread_raises_truncated(self) -> None:
        cursor = BitCursor("1101")
        cursor.read(3)
        with pytest.raises(TruncatedStream) as exc_info:
            cursor.read(3)
        assert exc_info.value.detail == {"position": 3, "requested": 3, "remaining": 1}

    def test_failed_read_does_not_move(self) -> None:
        cursor = BitCursor("11")
        with pytest.raises(TruncatedStream):
            cursor.read(5)
        assert cursor.position == 0
