from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from exact_money.domain.monetary.errors import UnknownCurrencyError

logger = logging.getLogger(__name__)


class Currency:
    """Represents a currency with code, minor-unit digits, and display locale.

    Instances are immutable. Two currencies are the same when their codes match
    case-insensitively; all other attributes are derived from the code by the
    built-in currency table.

    Attributes:
        code (str): Three-letter currency code (e.g. "EUR").
        minor_digits (int): Number of decimal digits of the minor unit.
        factor (int): Scaling factor between major and minor units, `10 ** minor_digits`.
        locale (Locale): Babel locale controlling grouping and decimal separators.
        name (str): Full currency name.
    """

    __slots__ = ("_code", "_minor_digits", "_factor", "_locale", "_name")

    def __init__(self, code: str, minor_digits: int, locale: str | Locale, name: str):
        """Initialize a Currency instance.

        Prefer `Currency.of` over calling this directly.

        Args:
            code (str): Three-letter currency code.
            minor_digits (int): Number of decimal digits of the minor unit (0-18).
            locale (str | Locale): Locale identifier (e.g. "de_DE") or Babel `Locale`.
            name (str): Full currency name.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If parameters have the wrong type.
        """
        if not isinstance(code, str) or len(code.strip()) != 3 or not code.strip().isalpha():
            raise ValueError(f"$code must be a three-letter string, but provided value is: '{code}'")

        if isinstance(minor_digits, bool) or not isinstance(minor_digits, int) or minor_digits < 0 or minor_digits > 18:
            raise ValueError(f"$minor_digits must be an integer between 0 and 18, but provided value is: {minor_digits}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if isinstance(locale, str):
            try:
                locale = Locale.parse(locale)
            except (ValueError, UnknownLocaleError) as e:
                raise ValueError(f"$locale '{locale}' is not a known locale identifier") from e
        elif not isinstance(locale, Locale):
            raise TypeError(f"$locale must be a str or babel.Locale, but provided value is: {locale}")

        self._code = code.strip().upper()
        self._minor_digits = minor_digits
        self._factor = 10**minor_digits
        self._locale = locale
        self._name = name.strip()

    # region Lookup

    @classmethod
    def of(cls, code: str) -> Currency:
        """Get a built-in currency by its code.

        The match is exact and case-sensitive ("EUR", not "eur").

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The shared built-in instance.

        Raises:
            TypeError: If $code is not a string.
            UnknownCurrencyError: If $code is not in the built-in table.
        """
        # Imported here because the registry module builds Currency instances at import time
        from exact_money.domain.monetary.currency_registry import BUILTIN_CURRENCIES

        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        currency = BUILTIN_CURRENCIES.get(code)
        if currency is None:
            logger.debug(f"Rejected currency $code '{code}'; available: {list(BUILTIN_CURRENCIES)}")
            raise UnknownCurrencyError(code)

        return currency

    # endregion

    # region Properties

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def minor_digits(self) -> int:
        """Get the number of decimal digits of the minor unit."""
        return self._minor_digits

    @property
    def factor(self) -> int:
        """Get the scaling factor between major and minor units."""
        return self._factor

    @property
    def locale(self) -> Locale:
        """Get the display locale."""
        return self._locale

    @property
    def locale_id(self) -> str:
        """Get the display locale identifier, e.g. "de_DE"."""
        return str(self._locale)

    @property
    def symbol(self) -> str:
        """Get the display symbol used by `Money.beautify`. Same as the code."""
        return self._code

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    # endregion

    # region Formatting

    def currency_format(self) -> str:
        """Return the number pattern used to format amounts of this currency.

        The pattern groups the integer part and pins the fraction to exactly
        $minor_digits digits, e.g. "#,##0.00". Grouping and decimal separator
        glyphs come from $locale when the pattern is applied.

        Returns:
            str: CLDR number pattern.
        """
        if self._minor_digits == 0:
            return "#,##0"
        return "#,##0." + "0" * self._minor_digits

    def format_decimal(self, value: Decimal) -> str:
        """Format $value with this currency's number pattern and locale.

        Args:
            value (Decimal): Amount in major units.

        Returns:
            str: Locale-formatted number without any currency symbol.
        """
        # Babel quantizes under the ambient context, so precision must cover every digit
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + self._minor_digits + 28)
            return format_decimal(value, format=self.currency_format(), locale=self._locale)

    # endregion

    # region Identity

    def is_same_currency(self, other: Currency) -> bool:
        """Check whether $other has the same code, ignoring case.

        Args:
            other (Currency): Currency to compare with.

        Returns:
            bool: True if both codes match case-insensitively.
        """
        return self._code.upper() == other.code.upper()

    def __eq__(self, other) -> bool:
        """Check equality with another Currency (same as `is_same_currency`)."""
        if not isinstance(other, Currency):
            return False
        return self.is_same_currency(other)

    def __hash__(self) -> int:
        """Hash based on the upper-cased currency code."""
        return hash(self._code.upper())

    # endregion

    def __str__(self) -> str:
        """Return string representation."""
        return self._code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self._code}', {self._minor_digits}, '{self.locale_id}')"
