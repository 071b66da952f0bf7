"""Shared service error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str
    status_code: int = 400

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


def err_bad_payload(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_BAD_PAYLOAD", message=message or "Invalid QRIS payload", status_code=400)


def err_bad_amount(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_BAD_AMOUNT", message=message or "Invalid amount", status_code=422)


def err_tlv_parse(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_TLV_PARSE", message=message or "Malformed TLV payload", status_code=422)


def err_invariant(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_INVARIANT", message=message or "Payload failed post-insertion checks", status_code=500)
