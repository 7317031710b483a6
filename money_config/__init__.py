"""
money_config -- YAML configuration for the money kernel.

Responsibility:
    Provides ``get_active_config()`` to load the configuration and
    ``apply_config()`` to push it into the kernel (default rounding scale
    and logging).

Architecture position:
    Configuration -- sits above ``money_kernel``. The kernel MUST NEVER
    import from ``money_config``; ``apply_config`` is the bridge.

Failure modes:
    - ``FileNotFoundError`` -- the requested file does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ValueError`` -- a value fails validation.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``MONEY_CONFIG_TRACE`` log entry carrying the checksum and the
    effective settings.
"""

from __future__ import annotations

from pathlib import Path

from money_config.loader import level_number, load_yaml_file, parse_config
from money_config.schema import LoggingConfig, MoneyKernelConfig, RoundingConfig
from money_kernel.domain.precision import set_default_scale
from money_kernel.logging_config import LogContext, configure_logging, get_logger

_logger = get_logger("config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults" / "money.yaml"

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "MoneyKernelConfig",
    "RoundingConfig",
    "apply_config",
    "get_active_config",
]


def get_active_config(path: Path | None = None) -> MoneyKernelConfig:
    """Load and validate the configuration.

    Args:
        path: YAML file to load. Defaults to the shipped
            ``money_config/defaults/money.yaml``.

    Returns:
        A frozen ``MoneyKernelConfig``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If configuration validation fails.
    """
    source = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    config = parse_config(load_yaml_file(source))

    _logger.info(
        "MONEY_CONFIG_TRACE",
        extra={
            "trace_type": "MONEY_CONFIG_TRACE",
            "config_path": str(source),
            "checksum": config.checksum,
            "default_scale": config.rounding.default_scale,
            "log_level": config.logging.level,
        },
    )
    return config


def apply_config(config: MoneyKernelConfig) -> None:
    """Bridge: set the kernel's default scale and configure logging.

    The default scale is process-wide, so threads started before or after
    this call round with it. Scoped ``default_scale()`` overrides that are
    active in other threads or tasks keep precedence until they exit.
    """
    with LogContext.bind(operation="apply_config"):
        configure_logging(level=level_number(config.logging))
        set_default_scale(config.rounding.default_scale)
        _logger.info(
            "money_config_applied",
            extra={
                "checksum": config.checksum,
                "default_scale": config.rounding.default_scale,
                "log_level": config.logging.level,
            },
        )
