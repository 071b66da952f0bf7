"""QRIS payload encoder that inserts Tag 54 (Transaction Amount) and recomputes the CRC."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import ClassVar, Sequence, Union

from .constants import (
    AMOUNT_INSERTION_PRIORITY,
    CRC_HEADER,
    CRC_VALUE_LENGTH,
    HEADER_LENGTH,
    MIN_QR_LENGTH,
    QrisTag,
)
from .crc import crc16_ccitt_hex
from .tlv import ParseError, TLVElement, encode_tlv, find_tag, parse_tlv, remove_element, strip_trailing_crc
from .validators import AmountInvalid, validate_amount

logger = logging.getLogger("qris_amount.encoder")


class ErrorKind(str, enum.Enum):
    INPUT_SHAPE = "INPUT_SHAPE"
    AMOUNT_FORMAT = "AMOUNT_FORMAT"
    PARSE = "PARSE"
    INVARIANT = "INVARIANT"


@dataclass(frozen=True, slots=True)
class AmountInserted:
    ok: ClassVar[bool] = True

    payload: str
    crc: str
    previous_amount: str | None = None


@dataclass(frozen=True, slots=True)
class AmountRejected:
    ok: ClassVar[bool] = False

    kind: ErrorKind
    reason: str


InsertAmountResult = Union[AmountInserted, AmountRejected]


def insert_amount_element(
    base_no_crc: str,
    amount: str,
    priority: Sequence[str] = AMOUNT_INSERTION_PRIORITY,
) -> str:
    """Splice Tag 54 in front of the first ``priority`` tag present, or append it.

    Tags are tried in ``priority`` order, not in payload order. A base that
    does not parse structurally also falls back to appending.
    """

    tlv54 = encode_tlv(QrisTag.TRANSACTION_AMOUNT.value, amount)

    parsed = parse_tlv(base_no_crc)
    if isinstance(parsed, ParseError):
        return base_no_crc + tlv54

    for target in priority:
        element = find_tag(parsed.elements, target)
        if element is not None:
            return base_no_crc[: element.start] + tlv54 + base_no_crc[element.start :]

    return base_no_crc + tlv54


def _invariant(reason: str) -> AmountRejected:
    logger.error("amount insertion invariant violated", extra={"reason": reason})
    return AmountRejected(ErrorKind.INVARIANT, reason)


def insert_amount(original_qr: str, amount: str) -> InsertAmountResult:
    """Insert or replace the transaction amount of a static QRIS payload.

    Every failure is returned as ``AmountRejected`` carrying a reason string;
    nothing is raised for bad input.
    """

    if not isinstance(original_qr, str) or len(original_qr) < MIN_QR_LENGTH:
        return AmountRejected(ErrorKind.INPUT_SHAPE, "Input QR must be a non-empty string of TLV data.")

    validation = validate_amount(amount)
    if isinstance(validation, AmountInvalid):
        return AmountRejected(ErrorKind.AMOUNT_FORMAT, f"Invalid amount: {validation.reason}")

    original = parse_tlv(original_qr)
    if isinstance(original, ParseError):
        return AmountRejected(ErrorKind.PARSE, f"Input TLV parse error: {original.reason}")

    base = strip_trailing_crc(original_qr).base
    parsed_base = parse_tlv(base)
    if isinstance(parsed_base, ParseError):
        return AmountRejected(ErrorKind.PARSE, f"TLV parse after stripping CRC failed: {parsed_base.reason}")

    previous_amount = None
    existing = find_tag(parsed_base.elements, QrisTag.TRANSACTION_AMOUNT.value)
    if existing is not None:
        previous_amount = existing.value
        base = remove_element(base, existing)

    new_base = insert_amount_element(base, amount)
    crc = crc16_ccitt_hex(f"{new_base}{CRC_HEADER}")
    final_payload = f"{new_base}{CRC_HEADER}{crc}"

    final = parse_tlv(final_payload)
    if isinstance(final, ParseError):
        return _invariant(f"Final payload TLV malformed after insertion: {final.reason}")

    if trailing_crc(final.elements) is None:
        return _invariant("Final payload does not end with CRC tag 63 length 04 as expected.")

    return AmountInserted(payload=final_payload, crc=crc, previous_amount=previous_amount)


def trailing_crc(elements: Sequence[TLVElement]) -> TLVElement | None:
    """The last element when it is a correctly-shaped Tag 63, else None."""

    if not elements:
        return None
    last = elements[-1]
    if last.tag != QrisTag.CRC.value or last.length != CRC_VALUE_LENGTH:
        return None
    return last


def verify_crc(payload: str) -> bool:
    """Check a payload's terminal Tag 63 against a fresh CRC over everything before it."""

    parsed = parse_tlv(payload)
    if isinstance(parsed, ParseError):
        return False
    crc = trailing_crc(parsed.elements)
    if crc is None:
        return False
    return crc16_ccitt_hex(payload[: crc.start + HEADER_LENGTH]) == crc.value.upper()
