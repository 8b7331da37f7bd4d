"""Unit tests for currency conversion at the boundary"""

import pytest
from decimal import Decimal
from settleup_gateway.utils.money import to_cents, from_cents
from settleup_gateway.domain.exceptions import InvalidAmountError


def test_to_cents_from_decimal_and_str():
    assert to_cents(Decimal("12.34")) == 1234
    assert to_cents("0.01") == 1
    assert to_cents(100) == 10000


def test_to_cents_float_uses_decimal_repr():
    """0.1 + 0.2 style float noise must not leak into cents"""
    assert to_cents(0.1) == 10
    assert to_cents(19.99) == 1999


def test_to_cents_accepts_trailing_zeros():
    assert to_cents(Decimal("1.500")) == 150
    assert to_cents("-0.10") == -10


@pytest.mark.parametrize("value", [Decimal("33.335"), "0.001", -0.005, 19.999])
def test_to_cents_rejects_sub_cent_precision(value):
    with pytest.raises(InvalidAmountError):
        to_cents(value)


@pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", True])
def test_to_cents_rejects_non_amounts(value):
    with pytest.raises(InvalidAmountError):
        to_cents(value)


def test_from_cents_two_places():
    assert from_cents(5000) == Decimal("50.00")
    assert str(from_cents(5000)) == "50.00"
    assert str(from_cents(-1)) == "-0.01"
    assert str(from_cents(0)) == "0.00"
