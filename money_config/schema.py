"""
MoneyKernelConfig schema.

Typed, frozen form of the YAML configuration. The loader parses YAML into
these types; ``money_config.apply_config`` hands them to the kernel.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RoundingConfig:
    """Default rounding applied when a caller passes no explicit scale."""

    default_scale: int = 20


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingConfig:
    """Level for the money_kernel logger hierarchy."""

    level: str = "INFO"


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MoneyKernelConfig:
    """Complete kernel configuration plus the checksum of its source data."""

    rounding: RoundingConfig = field(default_factory=RoundingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    checksum: str = ""
