"""Shared pytest fixtures for qris-amount tests."""

from __future__ import annotations

import pytest

from qris_amount.crc import crc16_ccitt_hex
from qris_amount.tlv import encode_tlv

MERCHANT_ELEMENTS = [
    ("00", "01"),
    ("01", "11"),
    ("26", "0014ID.CO.QRIS.WWW0215ID10200212345670303UMI"),
    ("52", "5812"),
    ("53", "360"),
    ("58", "ID"),
    ("59", "WARUNG MAKAN"),
    ("60", "JAKARTA"),
    ("61", "12345"),
]


def build_payload(elements: list[tuple[str, str]], *, with_crc: bool = True) -> str:
    """Concatenate elements and, optionally, append a valid Tag 63."""
    body = "".join(encode_tlv(tag, value) for tag, value in elements)
    if not with_crc:
        return body
    return f"{body}6304{crc16_ccitt_hex(body + '6304')}"


@pytest.fixture
def static_qris() -> str:
    """A static merchant QRIS with a valid CRC and no amount."""
    return build_payload(MERCHANT_ELEMENTS)


@pytest.fixture
def static_qris_no_crc() -> str:
    return build_payload(MERCHANT_ELEMENTS, with_crc=False)


@pytest.fixture
def qris_with_amount() -> str:
    """Static QRIS already carrying Tag 54 = 10000 ahead of the country code."""
    elements = list(MERCHANT_ELEMENTS)
    elements.insert(5, ("54", "10000"))
    return build_payload(elements)


@pytest.fixture
def qris_with_63_in_name() -> str:
    """Static QRIS whose merchant name contains "63" ahead of the real Tag 63."""
    elements = [(tag, "TOKO 63" if tag == "59" else value) for tag, value in MERCHANT_ELEMENTS]
    return build_payload(elements)
