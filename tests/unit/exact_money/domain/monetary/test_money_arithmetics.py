from __future__ import annotations

from decimal import Decimal

import pytest

from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_registry import EUR, USD
from exact_money.domain.monetary.errors import CurrencyMismatchError, InvalidArgumentError
from exact_money.domain.monetary.money import Money
from tests.helpers.helper_money import eur, usd


# region Construction


def test_of_decimal_round_trips() -> None:
    assert Money.of(Decimal("351.31"), EUR).to_decimal() == Decimal("351.31")
    assert Money.of(Decimal("351.31"), EUR).amount == 35131


def test_of_truncates_sub_minor_digits() -> None:
    assert Money.of(1.999, EUR).amount == 199
    assert Money.of(1.999, EUR).to_decimal() == Decimal("1.99")
    assert Money.of(Decimal("-1.999"), EUR).amount == -199


def test_of_float_uses_shortest_repr() -> None:
    assert Money.of(0.1, EUR).amount == 10
    assert Money.of(999.99, EUR).amount == 99999
    assert Money.of(481.73, EUR).amount == 48173


def test_of_int_and_str() -> None:
    assert Money.of(1000, EUR).amount == 100000
    assert Money.of("12.34", USD).amount == 1234


def test_of_keeps_large_values_exact() -> None:
    testee = Money.of(Decimal("123456789012345678901234567890.12"), EUR)
    assert testee.amount == 12345678901234567890123456789012
    assert testee.to_decimal() == Decimal("123456789012345678901234567890.12")


@pytest.mark.parametrize("value", ["abc", Decimal("NaN"), float("inf"), None, True])
def test_of_rejects_unconvertible_values(value) -> None:
    with pytest.raises(ValueError):
        Money.of(value, EUR)


def test_of_rejects_non_currency() -> None:
    with pytest.raises(TypeError):
        Money.of(1, "EUR")


def test_zero() -> None:
    testee = Money.zero(USD)
    assert testee.amount == 0
    assert testee.currency is USD
    assert testee.to_decimal() == Decimal(0)
    assert testee.is_zero()
    assert not testee


def test_of_minor_requires_int() -> None:
    assert Money.of_minor(1999, EUR).to_decimal() == Decimal("19.99")
    with pytest.raises(TypeError):
        Money.of_minor(19.99, EUR)


# endregion

# region Plus / minus


def test_plus() -> None:
    result = eur(100.32).plus(eur(250.99))
    assert result.to_decimal() == Decimal("351.31")


def test_plus_int_and_float() -> None:
    assert eur(452).plus(eur(119.60)).to_decimal() == Decimal("571.60")


def test_plus_is_commutative_and_associative() -> None:
    a, b, c = eur("0.01"), eur("10.10"), eur("-3.33")
    assert a.plus(b) == b.plus(a)
    assert a.plus(b).plus(c) == a.plus(b.plus(c))


def test_plus_currency_mismatch() -> None:
    with pytest.raises(CurrencyMismatchError) as exc_info:
        usd(1200.00).plus(eur(3450.99))
    assert exc_info.value.left == USD
    assert exc_info.value.right == EUR


def test_minus() -> None:
    assert eur(5000.39).minus(eur(424.70)).to_decimal() == Decimal("4575.69")
    assert eur(4950).minus(eur(823.45)).to_decimal() == Decimal("4126.55")


def test_minus_currency_mismatch() -> None:
    with pytest.raises(CurrencyMismatchError):
        usd(800).minus(eur(500))


def test_minus_can_go_negative() -> None:
    result = eur(100).minus(eur(200))
    assert result.is_negative()
    assert result.to_decimal() == Decimal("-100")


def test_operands_are_not_mutated() -> None:
    a, b = eur(1), eur(2)
    a.plus(b)
    a.minus(b)
    a.multiply(3)
    a.divide(2)
    assert a.amount == 100
    assert b.amount == 200


def test_attributes_are_read_only() -> None:
    testee = eur(1)
    with pytest.raises(AttributeError):
        testee.amount = 5
    with pytest.raises(AttributeError):
        testee.currency = USD
    assert testee.amount == 100


def test_plus_accepts_same_code_in_other_case() -> None:
    lower_eur = Currency("eur", 2, "de_DE", "Euro")
    assert Money.of(1, lower_eur).plus(eur(1)).amount == 200


# endregion

# region Multiply / divide


def test_multiply() -> None:
    assert eur(481.73).multiply(16).to_decimal() == Decimal("7707.68")
    assert eur(1).multiply(-3).amount == -300
    assert eur(1).multiply(0).is_zero()


def test_multiply_rejects_non_int() -> None:
    with pytest.raises(TypeError):
        eur(1).multiply(1.5)


def test_divide() -> None:
    assert eur(100).divide(8).to_decimal() == Decimal("12.50")


@pytest.mark.parametrize(
    "amount, divisor, expected",
    [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (1, 3, 0),
    ],
)
def test_divide_truncates_toward_zero(amount: int, divisor: int, expected: int) -> None:
    assert Money.of_minor(amount, EUR).divide(divisor).amount == expected


def test_divide_by_zero() -> None:
    with pytest.raises(InvalidArgumentError):
        eur(100).divide(0)


def test_operators() -> None:
    assert eur(1) + eur(2) == eur(3)
    assert eur(1) - eur(2) == eur(-1)
    assert eur(1) * 3 == eur(3)
    assert 3 * eur(1) == eur(3)
    assert -eur(1) == eur(-1)
    assert abs(eur(-1)) == eur(1)
    with pytest.raises(CurrencyMismatchError):
        eur(1) + usd(1)
    with pytest.raises(TypeError):
        eur(1) + 1
    with pytest.raises(TypeError):
        eur(1) * 1.5


# endregion
