"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for the UI harness.

The `logging` section of config/config.yaml controls level, format and an
optional rotating log file. Environment variables override as usual
(LOGGING_LEVEL, LOGGING_FILE).

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    format_str: Optional[str] = None,
    config: Optional[ConfigLoader] = None,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Safe to call more than once; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
        config: ConfigLoader to read from. Defaults to the shared instance.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logging_section = (config or ConfigLoader()).section("logging")
    log_level = str(level or logging_section.get("level", "INFO")).upper()
    log_format = format_str or logging_section.get("format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = logging_section.get("file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=logging_section.get("rotation", "10 MB"),
            retention=logging_section.get("retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def reset_logger() -> None:
    """Allow init_logger() to reconfigure sinks again (used by tests)."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
    "DEFAULT_LOG_FORMAT",
]
