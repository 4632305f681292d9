__version__ = "0.1.0"

from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_registry import EUR, GBP, USD
from exact_money.domain.monetary.errors import CurrencyMismatchError, InvalidArgumentError, UnknownCurrencyError
from exact_money.domain.monetary.money import Money

__all__ = [
    "Currency",
    "CurrencyMismatchError",
    "EUR",
    "GBP",
    "InvalidArgumentError",
    "Money",
    "USD",
    "UnknownCurrencyError",
]
