"""
Centralized logging configuration for the delivery persistence layer.

This module provides a standardized logging setup for all package modules.
Logs are formatted consistently and can be configured via environment variables.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .config import LOG_LEVEL, LOG_TO_FILE, LOG_DIR


def setup_logging(
    log_level: str = LOG_LEVEL,
    log_file: Optional[Union[str, Path]] = None,
    enable_file_logging: bool = LOG_TO_FILE
) -> None:
    """
    Configure logging for the package.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (defaults to LOG_DIR/delivery.log)
        enable_file_logging: Whether to enable file logging
    """
    # Convert string level to logging constant
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Configure the package logger only; the host application owns the root logger
    package_logger = logging.getLogger("delivery")
    package_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()

    # Console handler (always enabled)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(simple_formatter)
    package_logger.addHandler(console_handler)

    if enable_file_logging:
        log_path = Path(log_file) if log_file is not None else LOG_DIR / "delivery.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # File gets all logs
        file_handler.setFormatter(detailed_formatter)
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


# Initialize logging on module import
setup_logging()
