"""Insert transaction amounts into static QRIS payloads."""
from __future__ import annotations

from .constants import AMOUNT_INSERTION_PRIORITY, QrisTag
from .crc import crc16_ccitt, crc16_ccitt_hex
from .qris_encoder import (
    AmountInserted,
    AmountRejected,
    ErrorKind,
    insert_amount,
    insert_amount_element,
    trailing_crc,
    verify_crc,
)
from .tlv import (
    CrcStripResult,
    ParseError,
    ParseOk,
    TLVElement,
    build_tlv,
    encode_tlv,
    find_insertion_point,
    find_tag,
    parse_tlv,
    remove_element,
    strip_trailing_crc,
)
from .validators import is_ascii_numeric_amount, validate_amount

__version__ = "0.1.0"

__all__ = [
    "AMOUNT_INSERTION_PRIORITY",
    "AmountInserted",
    "AmountRejected",
    "CrcStripResult",
    "ErrorKind",
    "ParseError",
    "ParseOk",
    "QrisTag",
    "TLVElement",
    "build_tlv",
    "crc16_ccitt",
    "crc16_ccitt_hex",
    "encode_tlv",
    "find_insertion_point",
    "find_tag",
    "insert_amount",
    "insert_amount_element",
    "is_ascii_numeric_amount",
    "parse_tlv",
    "remove_element",
    "strip_trailing_crc",
    "trailing_crc",
    "validate_amount",
    "verify_crc",
]
