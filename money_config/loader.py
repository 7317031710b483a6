"""
Configuration Loader (``money_config.loader``).

Responsibility
--------------
Loads the YAML configuration file and parses it into the typed
``money_config.schema`` dataclasses. Runtime callers go through
``money_config.get_active_config()`` instead of calling this directly.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Invalid values  -> ``ValueError`` with the offending key in the message.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from money_config.schema import LoggingConfig, MoneyKernelConfig, RoundingConfig

_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Postconditions:
        - Returns a ``dict`` (possibly empty if the YAML is empty).
    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' must be a mapping, got {type(value).__name__}")
    return value


def parse_rounding(data: dict[str, Any]) -> RoundingConfig:
    """Parse the ``rounding`` section. Raises ValueError on a bad scale."""
    scale = data.get("default_scale", RoundingConfig.default_scale)
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
        raise ValueError(
            f"rounding.default_scale must be a non-negative integer, got {scale!r}"
        )
    return RoundingConfig(default_scale=scale)


def parse_logging(data: dict[str, Any]) -> LoggingConfig:
    """Parse the ``logging`` section. Raises ValueError on an unknown level."""
    level = data.get("level", LoggingConfig.level)
    if not isinstance(level, str) or level.upper() not in _LEVELS:
        raise ValueError(
            f"logging.level must be one of {sorted(_LEVELS)}, got {level!r}"
        )
    return LoggingConfig(level=level.upper())


def parse_config(data: dict[str, Any]) -> MoneyKernelConfig:
    """
    Parse a loaded YAML mapping into a MoneyKernelConfig.

    Missing sections and keys fall back to the documented defaults.

    Raises:
        ValueError: if the document or any value is invalid.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")
    return MoneyKernelConfig(
        rounding=parse_rounding(_section(data, "rounding")),
        logging=parse_logging(_section(data, "logging")),
        checksum=compute_checksum(data),
    )


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Postconditions:
        - Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()


def level_number(config: LoggingConfig) -> int:
    """Numeric stdlib logging level for the configured name."""
    return logging.getLevelName(config.level)
