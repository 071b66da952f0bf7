"""Tests for the CRC-16/CCITT engine."""

import re

import pytest

from qris_amount.crc import crc16_ccitt, crc16_ccitt_hex

HEX4 = re.compile(r"[0-9A-F]{4}")


class TestCrc16:
    def test_empty_string_is_initial_register(self) -> None:
        assert crc16_ccitt_hex("") == "FFFF"

    def test_standard_check_value(self) -> None:
        # CRC-16/CCITT-FALSE catalogue check value.
        assert crc16_ccitt(b"123456789") == 0x29B1
        assert crc16_ccitt_hex("123456789") == "29B1"

    @pytest.mark.parametrize("data", ["a", "123", "test", "QRIS_TEST_STRING", "0103ABC6304"])
    def test_output_is_four_uppercase_hex_digits(self, data: str) -> None:
        assert HEX4.fullmatch(crc16_ccitt_hex(data))

    def test_deterministic(self) -> None:
        assert crc16_ccitt_hex("QRIS_TEST_STRING") == crc16_ccitt_hex("QRIS_TEST_STRING")

    def test_single_byte_change_changes_crc(self) -> None:
        assert crc16_ccitt_hex("ABC") != crc16_ccitt_hex("ABD")
