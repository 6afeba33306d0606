"""
Logging utilities for the line balancing toolkit.
Provides consistent logging across parsing, summarizing and solving with
console and optional file handlers.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import colorlog


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
    colorize: bool = True
) -> logging.Logger:
    """
    Set up a logger with a console handler and an optional file handler.

    Args:
        name: Logger name (typically __name__ of the calling module)
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        colorize: Whether to colorize console output

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger(__name__, log_file="logs/solver.log")
        >>> logger.info("Solving 12 tasks at cycle time 50")
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    file_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if colorize:
        console_formatter = colorlog.ColoredFormatter(
            '%(log_color)s' + LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        )
    else:
        console_formatter = file_formatter

    # Log to stderr so JSON written to stdout by the CLI stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger, setting up its top-level package logger on first use.

    Handlers live on the package logger (e.g. ``linebalance``); module
    loggers propagate to it, so reconfiguring the package logger once
    reconfigures every module.

    Args:
        name: Logger name

    Returns:
        Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Dropping duplicate task id 'A'")
    """
    package_name = name.split('.')[0]

    if not logging.getLogger(package_name).handlers:
        setup_logger(package_name)

    return logging.getLogger(name)
