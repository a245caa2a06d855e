"""
Core module containing configuration, logging, database and DI utilities.
"""

from .config import Settings, get_settings
from .logger import get_logger, logger, setup_logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "setup_logger",
    "get_logger",
]
