"""Amount validation for Tag 54 (Transaction Amount)."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Union

from .constants import MAX_AMOUNT_LENGTH

_DIGITS = re.compile(r"[0-9]+")

AMOUNT_RULES_REASON = (
    f"Amount must be digits only (integers), length 1..{MAX_AMOUNT_LENGTH}, no leading zeros. "
    "QRIS Indonesia does not support decimal amounts."
)


@dataclass(frozen=True, slots=True)
class AmountValid:
    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class AmountInvalid:
    ok: ClassVar[bool] = False

    reason: str


AmountValidation = Union[AmountValid, AmountInvalid]


def is_ascii_numeric_amount(amount: str) -> bool:
    """Whole Rupiah amount: ASCII digits, 1-13 long, no leading zero except "0" itself."""

    if not amount or len(amount) > MAX_AMOUNT_LENGTH:
        return False
    if not _DIGITS.fullmatch(amount):
        return False
    return len(amount) == 1 or amount[0] != "0"


def validate_amount(amount: str) -> AmountValidation:
    if not is_ascii_numeric_amount(amount):
        return AmountInvalid(AMOUNT_RULES_REASON)
    return AmountValid()
