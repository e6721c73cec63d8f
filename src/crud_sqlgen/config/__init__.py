"""Configuration management for crud-sqlgen.

Usage:
    >>> from crud_sqlgen.config import get_settings
    >>> settings = get_settings()
    >>> settings.named_params
    False
"""

from crud_sqlgen.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
