from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from exact_money.domain.monetary.currency import Currency


# Supported currencies
EUR = Currency("EUR", 2, "de_DE", "Euro")
USD = Currency("USD", 2, "en_US", "US Dollar")
GBP = Currency("GBP", 2, "en_GB", "British Pound")

# Read-only lookup table used by `Currency.of`
BUILTIN_CURRENCIES: Mapping[str, Currency] = MappingProxyType({currency.code: currency for currency in (EUR, USD, GBP)})
