"""Currency -- the closed set of recognized currency codes."""

from dataclasses import dataclass
from typing import Any, ClassVar

from money_kernel.exceptions import InvalidCurrencyError


@dataclass(frozen=True)
class CurrencyInfo:
    """Information about a single recognized currency."""

    code: str
    name: str


class CurrencyRegistry:
    """Registry of currency codes Money may be tagged with."""

    _CURRENCIES: ClassVar[dict[str, CurrencyInfo]] = {
        # Europe
        "PLN": CurrencyInfo("PLN", "Polish Zloty"),
        "EUR": CurrencyInfo("EUR", "Euro"),
        "GBP": CurrencyInfo("GBP", "Pound Sterling"),
        "CHF": CurrencyInfo("CHF", "Swiss Franc"),
        "CZK": CurrencyInfo("CZK", "Czech Koruna"),
        "DKK": CurrencyInfo("DKK", "Danish Krone"),
        "SEK": CurrencyInfo("SEK", "Swedish Krona"),
        "NOK": CurrencyInfo("NOK", "Norwegian Krone"),
        "HUF": CurrencyInfo("HUF", "Hungarian Forint"),
        "RON": CurrencyInfo("RON", "Romanian Leu"),
        "BGN": CurrencyInfo("BGN", "Bulgarian Lev"),
        "UAH": CurrencyInfo("UAH", "Ukrainian Hryvnia"),
        "TRY": CurrencyInfo("TRY", "Turkish Lira"),
        # Americas
        "USD": CurrencyInfo("USD", "US Dollar"),
        "CAD": CurrencyInfo("CAD", "Canadian Dollar"),
        "BRL": CurrencyInfo("BRL", "Brazilian Real"),
        "MXN": CurrencyInfo("MXN", "Mexican Peso"),
        # Asia-Pacific
        "JPY": CurrencyInfo("JPY", "Japanese Yen"),
        "CNY": CurrencyInfo("CNY", "Chinese Yuan"),
        "AUD": CurrencyInfo("AUD", "Australian Dollar"),
        "NZD": CurrencyInfo("NZD", "New Zealand Dollar"),
        "INR": CurrencyInfo("INR", "Indian Rupee"),
        "KRW": CurrencyInfo("KRW", "South Korean Won"),
        "SGD": CurrencyInfo("SGD", "Singapore Dollar"),
        "HKD": CurrencyInfo("HKD", "Hong Kong Dollar"),
        "THB": CurrencyInfo("THB", "Thai Baht"),
        "IDR": CurrencyInfo("IDR", "Indonesian Rupiah"),
        "MYR": CurrencyInfo("MYR", "Malaysian Ringgit"),
        "PHP": CurrencyInfo("PHP", "Philippine Peso"),
        # Middle East and Africa
        "ZAR": CurrencyInfo("ZAR", "South African Rand"),
        "SAR": CurrencyInfo("SAR", "Saudi Riyal"),
        "KWD": CurrencyInfo("KWD", "Kuwaiti Dinar"),
        "QAR": CurrencyInfo("QAR", "Qatari Riyal"),
        "OMR": CurrencyInfo("OMR", "Omani Rial"),
        "AED": CurrencyInfo("AED", "UAE Dirham"),
        "BHD": CurrencyInfo("BHD", "Bahraini Dinar"),
        "IQD": CurrencyInfo("IQD", "Iraqi Dinar"),
        "SYP": CurrencyInfo("SYP", "Syrian Pound"),
        "EGP": CurrencyInfo("EGP", "Egyptian Pound"),
    }

    @classmethod
    def is_valid(cls, code: Any) -> bool:
        """Check membership. Codes are matched exactly (uppercase, no padding)."""
        if not code or not isinstance(code, str):
            return False
        return code in cls._CURRENCIES

    @classmethod
    def get_info(cls, code: str) -> CurrencyInfo | None:
        """Get currency information by code."""
        if not cls.is_valid(code):
            return None
        return cls._CURRENCIES[code]

    @classmethod
    def validate(cls, code: Any) -> str:
        """
        Return *code* unchanged if recognized.

        Raises:
            InvalidCurrencyError: If code is not a recognized currency.
        """
        if not cls.is_valid(code):
            raise InvalidCurrencyError(code)
        return code

    @classmethod
    def all_codes(cls) -> frozenset[str]:
        """Get all recognized currency codes."""
        return frozenset(cls._CURRENCIES.keys())

    @classmethod
    def all_currencies(cls) -> dict[str, CurrencyInfo]:
        """Get all currency information."""
        return dict(cls._CURRENCIES)
