"""
MoneyFactory -- construction conveniences for Money.

Every entry point validates the currency code first, so an unrecognized
code is reported even when the value is also bad. Currency defaults to USD.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from money_kernel.domain.currency import CurrencyRegistry
from money_kernel.domain.decimal_number import DecimalNumber
from money_kernel.domain.money import Money
from money_kernel.domain.transfer import MoneyRecord
from money_kernel.exceptions import InvalidTypeError

DEFAULT_CURRENCY = "USD"

_ANY_EXPECTED = "int, float, str, Decimal, DecimalNumber, MoneyRecord or {amount, currency} mapping"


class MoneyFactory:
    """Static constructors for Money from the shapes callers typically hold."""

    @staticmethod
    def from_record(record: MoneyRecord | Mapping[str, Any]) -> Money:
        return Money.from_record(record)

    @staticmethod
    def from_number(value: int | float, currency_code: str = DEFAULT_CURRENCY) -> Money:
        """
        Money from a native int or float.

        Raises:
            InvalidCurrencyError: Unrecognized currency code.
            InvalidTypeError: value is not an int or float.
            InvalidNumberError: value is NaN or infinite.
        """
        CurrencyRegistry.validate(currency_code)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidTypeError(value, "int or float")
        return Money(value, currency_code)

    @staticmethod
    def from_string(value: str, currency_code: str = DEFAULT_CURRENCY) -> Money:
        """
        Money from a decimal string such as "100.50" or "1e3".

        Raises:
            InvalidCurrencyError: Unrecognized currency code.
            InvalidTypeError: value is not a str.
            InvalidFormatError: value does not parse as a finite decimal.
        """
        CurrencyRegistry.validate(currency_code)
        if not isinstance(value, str):
            raise InvalidTypeError(value, "str")
        return Money(value, currency_code)

    @staticmethod
    def from_any(value: Any, currency_code: str = DEFAULT_CURRENCY) -> Money:
        """
        Dispatch on the input shape.

        Records and {amount, currency} mappings carry their own currency,
        which wins over currency_code. None and every other shape are
        rejected with InvalidTypeError.
        """
        CurrencyRegistry.validate(currency_code)
        if isinstance(value, bool):
            raise InvalidTypeError(value, _ANY_EXPECTED)
        if isinstance(value, (int, float)):
            return MoneyFactory.from_number(value, currency_code)
        if isinstance(value, str):
            return MoneyFactory.from_string(value, currency_code)
        if isinstance(value, (Decimal, DecimalNumber)):
            return Money(value, currency_code)
        if isinstance(value, MoneyRecord):
            return Money.from_record(value)
        if (
            isinstance(value, Mapping)
            and "currency" in value
            and isinstance(value.get("amount"), str)
        ):
            return Money.from_record(value)
        raise InvalidTypeError(value, _ANY_EXPECTED)

    @staticmethod
    def zero(currency_code: str = DEFAULT_CURRENCY) -> Money:
        return Money.zero(currency_code)

    @staticmethod
    def from_cents(cents: int | float, currency_code: str = DEFAULT_CURRENCY) -> Money:
        return Money.from_cents(cents, currency_code)
