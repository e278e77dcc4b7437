"""
Configuration package.

Usage:
    from cms.config import get_settings

    settings = get_settings()
    print(settings.mysql_database)
"""

from cms.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
