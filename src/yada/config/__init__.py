"""Configuration for the yada data files and defaults."""

from __future__ import annotations

from yada.config.settings import (
    LogConfig,
    ProfileDefaultsConfig,
    Settings,
    StorageConfig,
    get_settings,
    reload_settings,
)

__all__ = [
    "LogConfig",
    "ProfileDefaultsConfig",
    "Settings",
    "StorageConfig",
    "get_settings",
    "reload_settings",
]
