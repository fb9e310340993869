#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

# Standard library imports
import logging
import os
import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from logging.handlers import RotatingFileHandler

# Local application imports
import constants as const


# Module-level logger
logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

# Optional minus, digits with "." thousands separators, optional ",decimals"
NORDNET_NUMBER = re.compile(r"^-?\d[\d.]*(,\d+)?$")


def setup_logger(name: str | None = None, level: str | None = None, console: bool = True, log_file: str | None = None) -> logging.Logger:
    """
    Setup a logger with file and optional console output.

    Args:
        name: Logger name (use __name__ from calling module). If None, configures root logger.
        level: Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO or env LOG_LEVEL.
        console: Whether to also log to console (default True for the CLI)
        log_file: Custom log filename (defaults to const.LOG_FILE)

    Returns:
        logging.Logger: Configured logger instance

    Example:
        # For the CLI entry point:
        util.setup_logger(name=None, level='INFO', console=True)
        logger = logging.getLogger(__name__)

        # For library modules, no setup needed:
        logger = logging.getLogger(__name__)
    """
    # Determine log level from parameter, environment, or default to INFO
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")
    level = level.upper()

    numeric_level = getattr(logging, level, logging.INFO)

    # Get or create logger
    logger = logging.getLogger(name) if name else logging.getLogger()

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(numeric_level)

    # Include logger name and module info for better tracking
    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%H:%M:%S"
    )

    # Use custom log file or default
    log_filename = log_file if log_file else const.LOG_FILE

    # File handler with rotation (don't delete on startup)
    file_handler = RotatingFileHandler(
        filename=log_filename,
        maxBytes=const.MAX_LOG_SIZE,
        backupCount=const.BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setFormatter(detailed_formatter)
    file_handler.setLevel(logging.DEBUG)  # Capture everything to file
    logger.addHandler(file_handler)

    # Console handler (optional, with less verbose format)
    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(numeric_level)  # Respect configured level
        logger.addHandler(console_handler)

    return logger


def set_log_level(level: str) -> None:
    """
    Dynamically change log level for the root logger and its console handlers.
    The file handler stays at DEBUG.

    Args:
        level: Log level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Example:
        util.set_log_level('DEBUG')  # Enable debug logging
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(numeric_level)


def nordnet_to_decimal(input_str: str) -> Decimal:
    """
    Convert a Nordnet number ('1.234,50', '-15,00') to a Decimal.

    '.' is the thousands separator and ',' the decimal separator. Blank cells
    are zero. Raises decimal.InvalidOperation for anything else, including
    'NaN', 'Infinity' and exponent forms that Decimal itself would accept.
    """
    input_str = input_str.strip()
    if input_str == "":
        return Decimal("0")

    if not NORDNET_NUMBER.match(input_str):
        raise InvalidOperation(f"Not a Nordnet number: '{input_str}'")

    input_str = input_str.replace(".", "")
    input_str = input_str.replace(",", ".")

    return Decimal(input_str)


def to_dinero_amount(amount: Decimal) -> str:
    # Two decimals, decimal comma, no thousands separator: Decimal('-1015') -> '-1015,00'
    quantized = amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    if quantized.is_zero():
        quantized = abs(quantized)
    return f"{quantized:f}".replace(".", ",")


def to_dinero_date(d: date) -> str:
    return d.strftime(const.DINERO_DATE_FMT)
