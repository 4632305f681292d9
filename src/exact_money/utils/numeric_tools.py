from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Floats are converted via their shortest string form, so `0.1` becomes
    `Decimal("0.1")` and not the full binary expansion.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool or not a supported scalar type.
        decimal.InvalidOperation: If a string cannot be parsed as a number.
    """
    if isinstance(value, Decimal):
        return value

    # bool is an int subclass, but True is not an amount
    if isinstance(value, bool) or not isinstance(value, (int, str, float)):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is: {value!r}")

    if isinstance(value, int):
        return Decimal(value)

    return Decimal(str(value).strip())


def shift_decimal_point(value: Decimal, places: int) -> Decimal:
    """Returns $value multiplied by 10 ** $places without any context rounding.

    The digits are kept as they are and only the exponent moves, so the result
    is exact for any number of digits.

    Args:
        value: Finite decimal value.
        places: Number of places to move the point right (negative moves left).

    Returns:
        Exact shifted `Decimal`.

    Raises:
        ValueError: If $value is not finite.
    """
    if not value.is_finite():
        raise ValueError(f"$value must be a finite number, but provided value is: {value}")

    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))
