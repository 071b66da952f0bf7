"""Utility helpers to build and parse EMV-style TLV payloads."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Iterable, Sequence, Union

from .constants import HEADER_LENGTH, MAX_VALUE_LENGTH, TAG_LENGTH, QrisTag

_LENGTH_FIELD = re.compile(r"[0-9]{2}")


@dataclass(frozen=True, slots=True)
class TLVElement:
    """One decoded field; ``start``/``end`` span tag, length and value in the source string."""

    tag: str
    length: int
    value: str
    start: int
    end: int

    def serialize(self) -> str:
        return encode_tlv(self.tag, self.value)


@dataclass(frozen=True, slots=True)
class ParseOk:
    ok: ClassVar[bool] = True

    elements: tuple[TLVElement, ...]


@dataclass(frozen=True, slots=True)
class ParseError:
    ok: ClassVar[bool] = False

    reason: str


ParseOutcome = Union[ParseOk, ParseError]


@dataclass(frozen=True, slots=True)
class CrcStripResult:
    base: str
    had_crc: bool
    old_crc: str | None = None


def encode_tlv(tag: str, value: str) -> str:
    """Serialize a single tag/value pair as ``TAG + LL + VALUE``."""

    if len(value) > MAX_VALUE_LENGTH:
        raise ValueError(f"TLV value for tag {tag} is {len(value)} chars, max is {MAX_VALUE_LENGTH}")
    return f"{tag}{len(value):02d}{value}"


def build_tlv(items: Iterable[TLVElement]) -> str:
    """Serialize iterable of TLV elements into EMV string."""

    return "".join(item.serialize() for item in items)


def parse_tlv(payload: str) -> ParseOutcome:
    """Parse a flat TLV payload into its elements.

    The elements must tile the whole string. Any structural problem yields a
    ``ParseError`` naming the offending tag or position; no partial element
    list is ever returned.
    """

    elements: list[TLVElement] = []
    idx = 0
    total = len(payload)
    try:
        while idx < total:
            if total - idx < HEADER_LENGTH:
                return ParseError(f"Truncated TLV header at position {idx}")

            tag = payload[idx : idx + TAG_LENGTH]
            length_field = payload[idx + TAG_LENGTH : idx + HEADER_LENGTH]
            if not _LENGTH_FIELD.fullmatch(length_field):
                return ParseError(f"Invalid length field for tag {tag} at position {idx + TAG_LENGTH}")

            length = int(length_field)
            value_start = idx + HEADER_LENGTH
            value_end = value_start + length
            if value_end > total:
                return ParseError(
                    f"Value for tag {tag} exceeds string length (expected end at {value_end}, total length {total})"
                )

            elements.append(
                TLVElement(tag=tag, length=length, value=payload[value_start:value_end], start=idx, end=value_end)
            )
            idx = value_end
    except Exception as exc:  # noqa: BLE001 - parse faults are reported, not raised
        return ParseError(f"Exception parsing TLV: {exc}")

    return ParseOk(elements=tuple(elements))


def find_tag(elements: Sequence[TLVElement], tag: str) -> TLVElement | None:
    """Return the first element carrying ``tag``."""

    return next((element for element in elements if element.tag == tag), None)


def remove_element(payload: str, element: TLVElement) -> str:
    """Splice ``element``'s span out of the string it was parsed from."""

    return payload[: element.start] + payload[element.end :]


def strip_trailing_crc(payload: str) -> CrcStripResult:
    """Remove Tag 63 (CRC) when it is the terminal element.

    This is a loose scan on the raw string rather than a structural parse,
    so it can run on payloads that may or may not carry a checksum yet.
    """

    crc_tag = QrisTag.CRC.value
    crc_idx = payload.find(crc_tag)
    if crc_idx == -1:
        return CrcStripResult(base=payload, had_crc=False)

    header_end = crc_idx + HEADER_LENGTH
    if header_end > len(payload):
        return CrcStripResult(base=payload, had_crc=False)

    length_field = payload[crc_idx + TAG_LENGTH : header_end]
    if not _LENGTH_FIELD.fullmatch(length_field):
        return CrcStripResult(base=payload, had_crc=False)

    value_end = header_end + int(length_field)
    # Only a terminal Tag 63 is the real checksum.
    if value_end != len(payload):
        return CrcStripResult(base=payload, had_crc=False)

    return CrcStripResult(base=payload[:crc_idx], had_crc=True, old_crc=payload[header_end:value_end])


def find_insertion_point(payload: str, tag: str) -> int:
    """Index of the first ``tag`` occurrence followed by a numeric length field, else -1."""

    tag_idx = payload.find(tag)
    if tag_idx == -1:
        return -1

    length_field = payload[tag_idx + TAG_LENGTH : tag_idx + HEADER_LENGTH]
    if _LENGTH_FIELD.fullmatch(length_field):
        return tag_idx
    return -1
