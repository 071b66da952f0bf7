"""Amount insertion and payload inspection services."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..monitoring import record_insertion
from ..qris_encoder import AmountRejected, ErrorKind, insert_amount, trailing_crc, verify_crc
from ..tlv import ParseError, TLVElement, parse_tlv
from .errors import ServiceError, err_bad_amount, err_bad_payload, err_invariant, err_tlv_parse

logger = logging.getLogger("qris_amount.service")

_ERROR_FACTORIES = {
    ErrorKind.INPUT_SHAPE: err_bad_payload,
    ErrorKind.AMOUNT_FORMAT: err_bad_amount,
    ErrorKind.PARSE: err_tlv_parse,
    ErrorKind.INVARIANT: err_invariant,
}


@dataclass(slots=True)
class AmountResult:
    payload: str
    crc: str
    amount: str
    previous_amount: str | None


@dataclass(slots=True)
class InspectResult:
    elements: tuple[TLVElement, ...]
    had_crc: bool
    crc: str | None
    crc_valid: bool


def rejection_to_error(rejection: AmountRejected) -> ServiceError:
    return _ERROR_FACTORIES[rejection.kind](rejection.reason)


class AmountService:
    def apply_amount(self, *, payload: str, amount: str) -> AmountResult:
        result = insert_amount(payload, amount)
        if isinstance(result, AmountRejected):
            record_insertion(result.kind.value)
            logger.info(
                "amount insertion rejected",
                extra={"kind": result.kind.value, "payload_length": len(payload)},
            )
            raise rejection_to_error(result)

        record_insertion("ok")
        logger.info(
            "amount inserted",
            extra={
                "payload_length": len(result.payload),
                "crc": result.crc,
                "replaced": result.previous_amount is not None,
            },
        )
        return AmountResult(
            payload=result.payload,
            crc=result.crc,
            amount=amount,
            previous_amount=result.previous_amount,
        )

    def inspect(self, *, payload: str) -> InspectResult:
        parsed = parse_tlv(payload)
        if isinstance(parsed, ParseError):
            raise err_tlv_parse(parsed.reason)

        crc = trailing_crc(parsed.elements)
        return InspectResult(
            elements=parsed.elements,
            had_crc=crc is not None,
            crc=crc.value if crc is not None else None,
            crc_valid=verify_crc(payload),
        )
