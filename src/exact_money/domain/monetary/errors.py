"""Errors raised by the monetary domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exact_money.domain.monetary.currency import Currency


class UnknownCurrencyError(ValueError):
    """Raised when a currency code is not present in the built-in currency table.

    Attributes:
        code (str): The rejected currency code.
    """

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Currency with $code '{code}' is not supported")


class CurrencyMismatchError(ValueError):
    """Raised when two Money values with different currencies are combined or ordered.

    Attributes:
        left (Currency): Currency of the receiver.
        right (Currency): Currency of the other operand.
    """

    def __init__(self, left: Currency, right: Currency):
        self.left = left
        self.right = right
        super().__init__(f"Cannot operate on different currencies: {left} and {right}")


class InvalidArgumentError(ValueError):
    """Raised when an argument has a value the operation cannot accept (e.g. zero divisor)."""
