from decimal import Decimal

import pytest

from models.bonus import BONUS_TIERS, bonus_rate_for
from models.money import format_money, to_decimal, to_money


def test_to_money_rounds_half_up():
    assert to_money(Decimal("0.075")) == Decimal("0.08")
    assert to_money(Decimal("-0.075")) == Decimal("-0.08")
    assert to_money(Decimal("0.074")) == Decimal("0.07")


def test_float_input_goes_through_str():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_money(1.005) == Decimal("1.01")


@pytest.mark.parametrize("bad", ["abc", "", "NaN", "Infinity", True, None])
def test_to_decimal_rejects_non_numbers(bad):
    with pytest.raises(ValueError):
        to_decimal(bad)


def test_format_money_always_two_decimals():
    assert format_money(Decimal("82500")) == "82500.00"
    assert format_money(Decimal("0")) == "0.00"


def test_bonus_tiers():
    assert BONUS_TIERS == {4: Decimal("0.15"), 3: Decimal("0.10"), 2: Decimal("0.05")}
    for rating in (1, 0, -3, 5, 100):
        assert bonus_rate_for(rating) == Decimal("0.00")


def test_to_money_handles_more_digits_than_the_context():
    assert to_money(Decimal("-7.5E+32")) == Decimal("-750000000000000000000000000000000.00")
    assert to_money(Decimal("1E+40")).as_tuple().exponent == -2
