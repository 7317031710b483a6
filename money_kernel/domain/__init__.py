"""
Pure domain layer.

Value objects and the registry they validate against, with NO dependencies
on configuration, storage or I/O beyond structured logging.

All domain objects are immutable and deterministic.
"""

from money_kernel.domain.currency import CurrencyInfo, CurrencyRegistry
from money_kernel.domain.decimal_number import DecimalNumber
from money_kernel.domain.factory import MoneyFactory
from money_kernel.domain.money import Money, is_money
from money_kernel.domain.precision import (
    DEFAULT_SCALE,
    default_scale,
    get_default_scale,
    reset_default_scale,
    set_default_scale,
)
from money_kernel.domain.transfer import MoneyRecord

__all__ = [
    "CurrencyInfo",
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
