"""
Money Kernel

An immutable, currency-tagged decimal value type for monetary amounts:
- Exact addition, subtraction and multiplication
- Half-away-from-zero rounding at an explicit or context-local default scale
- Currency-checked comparison and aggregation
- Lossless string transfer records and minor-unit (cents) conversion
"""

from money_kernel.domain import (
    DEFAULT_SCALE,
    CurrencyRegistry,
    DecimalNumber,
    Money,
    MoneyFactory,
    MoneyRecord,
    default_scale,
    get_default_scale,
    is_money,
    reset_default_scale,
    set_default_scale,
)

__version__ = "0.1.0"

__all__ = [
    "CurrencyRegistry",
    "DEFAULT_SCALE",
    "DecimalNumber",
    "Money",
    "MoneyFactory",
    "MoneyRecord",
    "default_scale",
    "get_default_scale",
    "is_money",
    "reset_default_scale",
    "set_default_scale",
]
