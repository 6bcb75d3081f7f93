"""
Configuration package for the Travel Coordination Hub.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DatabaseSettings,
    CoordinationSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DatabaseSettings",
    "CoordinationSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
