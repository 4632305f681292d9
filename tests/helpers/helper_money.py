from __future__ import annotations

from exact_money.domain.monetary.currency_registry import EUR, USD
from exact_money.domain.monetary.money import Money


def eur(value) -> Money:
    """Create EUR Money from a major-unit value."""
    return Money.of(value, EUR)


def usd(value) -> Money:
    """Create USD Money from a major-unit value."""
    return Money.of(value, USD)
