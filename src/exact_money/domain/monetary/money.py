from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.errors import CurrencyMismatchError, InvalidArgumentError
from exact_money.utils.numeric_tools import DecimalLike, as_decimal, shift_decimal_point

logger = logging.getLogger(__name__)


class Money:
    """Represents a monetary amount with currency.

    The amount is stored as an exact integer count of minor units (e.g. cents),
    so there is never a fractional minor unit and no floating-point error.
    Instances are immutable; arithmetic returns new instances.

    Operations combining or ordering two Money values require the same currency
    and raise `CurrencyMismatchError` otherwise. Equality never raises: values in
    different currencies are simply not equal.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: int, currency: Currency):
        """Initialize Money from an integer count of minor units.

        Prefer the factories `of`, `of_minor` and `zero`.

        Args:
            amount (int): Count of minor units.
            currency (Currency): Currency object.

        Raises:
            TypeError: If $amount is not an int or $currency is not a Currency instance.
        """
        # Raise: amount must be a whole number of minor units
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"$amount must be an int count of minor units, but provided value is: {amount!r}")

        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        self._amount = amount
        self._currency = currency

    # region Factories

    @classmethod
    def of(cls, value: DecimalLike, currency: Currency) -> Money:
        """Create Money from a major-unit value.

        The value is multiplied by the currency factor and truncated toward zero,
        so digits below the minor unit are dropped: `Money.of("1.999", EUR)` holds
        199 cents. Floats are converted through their shortest string form first.

        Args:
            value: Amount in major units (Decimal-like scalar).
            currency (Currency): Currency object.

        Returns:
            Money: New instance.

        Raises:
            ValueError: If $value cannot be converted to a finite Decimal.
            TypeError: If $currency is not a Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $value must be convertible to a finite Decimal
        try:
            decimal_value = as_decimal(value)
            minor_value = shift_decimal_point(decimal_value, currency.minor_digits)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot create `Money` because $value ({value!r}) cannot be converted to a finite Decimal") from e

        # int() truncates toward zero
        return cls(int(minor_value), currency)

    @classmethod
    def of_minor(cls, amount: int, currency: Currency) -> Money:
        """Create Money directly from a count of minor units."""
        return cls(amount, currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Create Money with zero amount in $currency."""
        return cls(0, currency)

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '1000.50 EUR'.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
            UnknownCurrencyError: If the currency code is not supported.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            logger.debug(f"Rejected $value_str '{value_str}': expected 'value currency_code'")
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, currency_part = parts

        try:
            value = Decimal(value_part)
        except InvalidOperation as e:
            logger.debug(f"Rejected $value_str '{value_str}': invalid value part '{value_part}'")
            raise ValueError(f"Invalid value part '{value_part}' in string '{value_str}'") from e

        return cls.of(value, Currency.of(currency_part))

    # endregion

    # region Properties

    @property
    def amount(self) -> int:
        """Get the amount as a count of minor units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    # endregion

    # region Arithmetic

    def plus(self, other: Money) -> Money:
        """Return the sum of $self and $other.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        return Money(self._amount + other._amount, self._currency)

    def minus(self, other: Money) -> Money:
        """Return $self minus $other. The result may be negative.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        return Money(self._amount - other._amount, self._currency)

    def multiply(self, n: int) -> Money:
        """Return Money with the minor-unit amount multiplied by integer $n."""
        self._check_int_operand(n, "n")
        return Money(self._amount * n, self._currency)

    def divide(self, n: int) -> Money:
        """Return Money with the minor-unit amount divided by integer $n.

        The quotient is truncated toward zero (-7 cents / 2 is -3 cents), unlike
        Python's floor division.

        Raises:
            InvalidArgumentError: If $n is zero.
        """
        self._check_int_operand(n, "n")
        if n == 0:
            raise InvalidArgumentError(f"Cannot divide `Money` by zero: {self!r}")

        quotient = abs(self._amount) // abs(n)
        if (self._amount < 0) != (n < 0):
            quotient = -quotient
        return Money(quotient, self._currency)

    # endregion

    # region Comparison

    def is_same_currency(self, other: Money) -> bool:
        """Check if $other has the same currency as $self."""
        return self._currency.is_same_currency(other.currency)

    def compare_to(self, other: Money) -> int:
        """Compare amounts of two Money objects with the same currency.

        Returns:
            int: -1, 0 or 1 when $self is less than, equal to, or greater than $other.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        if self._amount < other._amount:
            return -1
        if self._amount > other._amount:
            return 1
        return 0

    def is_less_than(self, other: Money) -> bool:
        """Check if $self is strictly less than $other (same currency required)."""
        return self.compare_to(other) < 0

    def is_greater_than(self, other: Money) -> bool:
        """Check if $self is strictly greater than $other (same currency required)."""
        return self.compare_to(other) > 0

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Args:
            other (Money): The other Money object.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")
        if not self.is_same_currency(other):
            raise CurrencyMismatchError(self._currency, other.currency)

    @staticmethod
    def _check_int_operand(value: int, name: str) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"${name} must be an int, but provided value is: {value!r}")

    # endregion

    # region Derived values

    def is_negative(self) -> bool:
        """Check if the amount is below zero."""
        return self._amount < 0

    def is_zero(self) -> bool:
        """Check if the amount is exactly zero."""
        return self._amount == 0

    def to_decimal(self) -> Decimal:
        """Return the exact major-unit value as Decimal (e.g. 1999 cents -> Decimal("19.99"))."""
        if self._amount == 0:
            return Decimal(0)
        return self._exact_decimal()

    def beautify(self) -> str:
        """Return the amount formatted for display, like "EUR 1.000,00".

        The format is "<symbol> <number>", where the number uses the grouping and
        decimal separator of the currency's locale and exactly $minor_digits
        fraction digits.
        """
        return f"{self._currency.symbol} {self._currency.format_decimal(self.to_decimal())}"

    def _exact_decimal(self) -> Decimal:
        return shift_decimal_point(Decimal(self._amount), -self._currency.minor_digits)

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        """Check equality with another Money object. Never raises on currency mismatch."""
        if not isinstance(other, Money):
            return False
        return self.is_same_currency(other) and self._amount == other._amount

    def __hash__(self) -> int:
        """Hash based on amount and upper-cased currency code."""
        return hash((self._amount, self._currency.code.upper()))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other):
        """Multiply Money by an int (returns Money)."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: int * Money."""
        return self.__mul__(other)

    def __neg__(self) -> Money:
        return Money(-self._amount, self._currency)

    def __pos__(self) -> Money:
        return Money(self._amount, self._currency)

    def __abs__(self) -> Money:
        return Money(abs(self._amount), self._currency)

    def __bool__(self) -> bool:
        return self._amount != 0

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '1000.50 EUR'."""
        return f"{self._exact_decimal()} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, EUR)'."""
        return f"{self.__class__.__name__}({self._exact_decimal()}, {self._currency.code})"

    # endregion
