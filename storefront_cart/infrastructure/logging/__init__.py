"""
Logging Infrastructure

Structured logging setup and performance timing.
"""

from .logging_config import (
    CartJsonFormatter,
    ColoredFormatter,
    LoggingConfig,
    LoggingConfigOptions,
    PerformanceLogger,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "CartJsonFormatter",
    "ColoredFormatter",
    "LoggingConfig",
    "LoggingConfigOptions",
    "PerformanceLogger",
    "get_structured_logger",
    "setup_logging",
]
