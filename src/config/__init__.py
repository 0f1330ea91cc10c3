"""Configuration management with runtime settings broker.

Responsibilities:
- Singleton settings manager for global configuration access
- Settings loading from environment variables
- Thread-safe configuration management
"""

from .settings_manager import (
    ApplicationSettings,
    L10NSettings,
    UrlSettings,
    Environment,
    SettingsManager,
    get_settings,
)

__all__ = [
    "SettingsManager",
    "ApplicationSettings",
    "L10NSettings",
    "UrlSettings",
    "Environment",
    "get_settings",
]
