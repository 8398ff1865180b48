"""
Utilities Module
================

Logging helpers.
"""

from .logger import setup_logging, get_logger

__all__ = [
    'setup_logging',
    'get_logger',
]
