"""Pydantic schemas for API contracts."""
from __future__ import annotations

from pydantic import BaseModel, Field

# Printable ASCII only; the CRC is defined over ASCII bytes.
_PAYLOAD_PATTERN = r"^[\x20-\x7E]+$"


class InsertAmountRequest(BaseModel):
    payload: str = Field(min_length=1, pattern=_PAYLOAD_PATTERN, description="Static QRIS payload string")
    amount: str = Field(description="Whole Rupiah amount, e.g. '10000'")


class InsertAmountResponse(BaseModel):
    payload: str
    crc: str
    amount: str
    previous_amount: str | None = None


class InspectRequest(BaseModel):
    payload: str = Field(min_length=1, pattern=_PAYLOAD_PATTERN)


class TLVElementSchema(BaseModel):
    tag: str
    length: int
    value: str
    start: int
    end: int


class InspectResponse(BaseModel):
    elements: list[TLVElementSchema]
    had_crc: bool
    crc: str | None = None
    crc_valid: bool
