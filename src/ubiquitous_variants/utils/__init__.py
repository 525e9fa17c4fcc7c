"""Utility functions."""

from ubiquitous_variants.utils.logging_config import configure_logging, reset_logging

__all__ = [
    'configure_logging',
    'reset_logging',
]
