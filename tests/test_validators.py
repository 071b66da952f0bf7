"""Tests for Tag 54 amount validation."""

import pytest

from qris_amount.validators import AmountInvalid, AmountValid, is_ascii_numeric_amount, validate_amount


@pytest.mark.parametrize("amount", ["0", "1", "100", "1000", "999999999", "9999999999999"])
def test_accepts_whole_amounts(amount: str) -> None:
    assert is_ascii_numeric_amount(amount) is True
    assert isinstance(validate_amount(amount), AmountValid)


@pytest.mark.parametrize(
    "amount",
    [
        "",
        "100.50",
        "0.00",
        "50.5",
        "0100",
        "00",
        "-100",
        "+100",
        "1e5",
        "abc",
        " 100",
        "10 000",
        "12345678901234",
        "١٢٣",
    ],
)
def test_rejects_malformed_amounts(amount: str) -> None:
    assert is_ascii_numeric_amount(amount) is False
    result = validate_amount(amount)
    assert isinstance(result, AmountInvalid)
    assert result.ok is False


def test_reason_mentions_decimal_support() -> None:
    result = validate_amount("100.50")
    assert isinstance(result, AmountInvalid)
    assert "does not support decimal amounts" in result.reason
    assert "length 1..13" in result.reason
