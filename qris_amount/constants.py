"""QRIS tag identifiers and field-size constants."""
from __future__ import annotations

import enum
from typing import Final


class QrisTag(str, enum.Enum):
    MERCHANT_CATEGORY_CODE = "52"
    TRANSACTION_CURRENCY = "53"
    TRANSACTION_AMOUNT = "54"
    TIP_INDICATOR = "55"
    CONVENIENCE_FEE_FIXED = "56"
    CONVENIENCE_FEE_PERCENTAGE = "57"
    COUNTRY_CODE = "58"
    MERCHANT_NAME = "59"
    MERCHANT_CITY = "60"
    POSTAL_CODE = "61"
    CRC = "63"


TAG_LENGTH: Final = 2
LENGTH_FIELD_SIZE: Final = 2
HEADER_LENGTH: Final = TAG_LENGTH + LENGTH_FIELD_SIZE
MAX_VALUE_LENGTH: Final = 99

CRC_VALUE_LENGTH: Final = 4
CRC_HEADER: Final = f"{QrisTag.CRC.value}{CRC_VALUE_LENGTH:02d}"

# Shortest string worth treating as a TLV payload.
MIN_QR_LENGTH: Final = 10
# Rupiah amounts are whole numbers; 13 digits is the QRIS ceiling.
MAX_AMOUNT_LENGTH: Final = 13

# Tag 54 goes in front of the first of these found, in this order.
AMOUNT_INSERTION_PRIORITY: Final[tuple[str, ...]] = (
    QrisTag.TIP_INDICATOR.value,
    QrisTag.CONVENIENCE_FEE_FIXED.value,
    QrisTag.CONVENIENCE_FEE_PERCENTAGE.value,
    QrisTag.COUNTRY_CODE.value,
    QrisTag.MERCHANT_NAME.value,
    QrisTag.MERCHANT_CITY.value,
)
