"""Settings manager with runtime configuration support.

This module provides a centralized settings broker that can:
- Load from environment variables
- Be modified at runtime
- Validate settings
- Support different environments (dev, test, prod)
"""

import os
from dataclasses import asdict, dataclass
from enum import Enum
from threading import Lock
from typing import Any, Dict, List, Optional

from loguru import logger


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class Settings:
    """Base class for settings dataclasses."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)


@dataclass
class ApplicationSettings(Settings):
    """Application-level settings."""

    name: str = "settings-registry"
    version: str = "test"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True
    log_level: str = "DEBUG"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data["environment"] = self.environment.value  # Convert Enum to string
        return data


@dataclass
class L10NSettings(Settings):
    """Localization settings."""

    default_language: str = "en"


@dataclass
class UrlSettings(Settings):
    """URL generation settings."""

    base_url: str = "http://localhost"
    webroot: str = ""


class SettingsManager:
    """Centralized settings manager with runtime configuration support.

    Features:
    - Singleton pattern for global access
    - Thread-safe operations
    - Runtime configuration changes
    - Environment variable loading
    - Validation

    Usage:
        # Get instance
        settings = SettingsManager.get_instance()

        # Access settings
        webroot = settings.url.webroot

        # Update at runtime
        settings.l10n.default_language = "de"
    """

    _instance: Optional["SettingsManager"] = None
    _lock: Lock = Lock()

    def __init__(self):
        """Initialize settings manager.

        Note: Use get_instance() instead of direct instantiation.
        """
        self.application = ApplicationSettings()
        self.l10n = L10NSettings()
        self.url = UrlSettings()
        self._change_lock = Lock()

    @classmethod
    def get_instance(cls) -> "SettingsManager":
        """Get or create the singleton instance.

        Returns:
            SettingsManager instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    cls._instance.load_from_env()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (mainly for testing)."""
        with cls._lock:
            cls._instance = None

    def load_from_env(self, prefix: str = "") -> None:
        """Load settings from environment variables.

        Args:
            prefix: Optional prefix for environment variables (e.g., "REGISTRY_")
        """
        with self._change_lock:

            env_vars = os.environ

            logger.info(
                "Loading settings from environment variables" + (f" with prefix={prefix}" if prefix else "")
            )

            # Application settings
            app_mapping = {
                f"{prefix}APP_NAME": "name",
                f"{prefix}APP_VERSION": "version",
                f"{prefix}APP_ENVIRONMENT": "environment",
                f"{prefix}APP_DEBUG": "debug",
                f"{prefix}APP_LOG_LEVEL": "log_level",
            }

            for env_key, attr_name in app_mapping.items():
                if env_key in env_vars:
                    value = env_vars[env_key]
                    if attr_name == "environment":
                        value = Environment(value.lower())
                    elif attr_name == "debug":
                        value = value.lower() in ["true", "1", "yes"]
                    setattr(self.application, attr_name, value)

            # Localization settings
            l10n_mapping = {
                f"{prefix}L10N_DEFAULT_LANGUAGE": "default_language",
            }
            for env_key, attr_name in l10n_mapping.items():
                if env_key in env_vars:
                    setattr(self.l10n, attr_name, env_vars[env_key])

            # URL settings
            url_mapping = {
                f"{prefix}URL_BASE": "base_url",
                f"{prefix}URL_WEBROOT": "webroot",
            }
            for env_key, attr_name in url_mapping.items():
                if env_key in env_vars:
                    setattr(self.url, attr_name, env_vars[env_key])

            logger.info("Settings successfully loaded from environment")

    def export_settings(self) -> Dict[str, Any]:
        """Export all settings as a dictionary."""
        return {
            "application": self.application.to_dict(),
            "l10n": self.l10n.to_dict(),
            "url": self.url.to_dict(),
        }

    def validate(self) -> Dict[str, List[str]]:
        """Validate current settings.

        Returns:
            Dictionary with validation errors by category
        """
        errors: Dict[str, List[str]] = {
            "application": [],
            "l10n": [],
            "url": [],
        }

        # Application validation
        if not self.application.name:
            errors["application"].append("Application name is required")
        if self.application.log_level not in [
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ]:
            errors["application"].append("Invalid log level")

        # Localization validation
        if not self.l10n.default_language:
            errors["l10n"].append("Default language is required")

        # URL validation
        if not self.url.base_url.startswith(("http://", "https://")):
            errors["url"].append("Base URL must start with http:// or https://")
        if self.url.webroot and not self.url.webroot.startswith("/"):
            errors["url"].append("Webroot must be empty or start with '/'")

        # Remove empty error lists
        errors = {k: v for k, v in errors.items() if v}

        return errors

    def is_development(self) -> bool:
        """Check if current environment is development."""
        return self.application.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if current environment is testing."""
        return self.application.environment == Environment.TESTING

    def is_production(self) -> bool:
        """Check if current environment is production."""
        return self.application.environment == Environment.PRODUCTION

# Convenience function for global access
def get_settings() -> SettingsManager:
    """Get the global settings manager instance.

    Returns:
        SettingsManager singleton instance
    """
    return SettingsManager.get_instance()
