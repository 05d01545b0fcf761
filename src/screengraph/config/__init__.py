"""Configuration package.

Settings are read from ``SCREENGRAPH_*`` environment variables and an optional
``.env`` file.

Usage:
    from screengraph.config import get_settings

    settings = get_settings()
    timeout = settings.element_timeout
"""

from .settings import ScreenGraphSettings, TestSettings, get_settings, reset_settings

__all__ = [
    "ScreenGraphSettings",
    "TestSettings",
    "get_settings",
    "reset_settings",
]
