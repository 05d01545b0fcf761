"""Logging module for screengraph."""

from .logger import NavigationLogger, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "NavigationLogger",
]
