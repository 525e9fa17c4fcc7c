"""Logging configuration for ubiquitous-variants.

Log output goes to stderr so that stdout carries only the variant lines.
"""

import logging

LOGGER_NAME = "ubiquitous_variants"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger.

    Args:
        verbose: Log DEBUG messages (per-sample statistics) instead of INFO

    Returns:
        The configured package logger
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def reset_logging() -> None:
    """Remove package handlers (mainly for testing)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
