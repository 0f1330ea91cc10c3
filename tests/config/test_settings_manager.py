"""Unit tests for the SettingsManager singleton and configuration broker.

Tests cover:
- Singleton pattern and global access
- Loading settings from environment variables
- Runtime configuration updates
- Settings validation and export
- Thread safety
"""

import pytest
import os
from unittest.mock import patch

from src.config import (
    SettingsManager,
    Environment,
    get_settings,
)


@pytest.fixture(autouse=True)
def reset_singleton():
    """Reset singleton before each test."""
    # clears any leftover state from previous tests
    SettingsManager.reset_instance()
    yield  # test runs here
    # clean up after test
    SettingsManager.reset_instance()

def test_environment_enum_backward_compatibility():
    """Test that Environment enum values remain stable."""
    assert hasattr(Environment, 'DEVELOPMENT')
    assert hasattr(Environment, 'TESTING')
    assert hasattr(Environment, 'PRODUCTION')

def test_settings_structure():
    """Test that settings structure remains compatible."""
    settings = get_settings()

    # Verify critical settings exist
    assert hasattr(settings, 'application')
    assert hasattr(settings, 'l10n')
    assert hasattr(settings, 'url')

    assert hasattr(settings.l10n, 'default_language')
    assert hasattr(settings.url, 'base_url')
    assert hasattr(settings.url, 'webroot')

    # Verify environment methods
    assert callable(settings.is_development)
    assert callable(settings.is_testing)
    assert callable(settings.is_production)


def test_singleton_pattern():
    """Test that SettingsManager is a singleton."""
    settings1 = SettingsManager.get_instance()
    settings2 = SettingsManager.get_instance()

    assert settings1 is settings2


def test_get_settings_convenience():
    """Test convenience function."""
    settings1 = get_settings()
    settings2 = SettingsManager.get_instance()

    assert settings1 is settings2


def test_load_from_env():
    """Test loading settings from environment variables."""
    env_vars = {
        "APP_ENVIRONMENT": "production",
        "APP_DEBUG": "false",
        "APP_LOG_LEVEL": "INFO",

        "L10N_DEFAULT_LANGUAGE": "de",

        "URL_BASE": "https://cloud.example.com",
        "URL_WEBROOT": "/nc",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        SettingsManager.reset_instance()
        settings = SettingsManager.get_instance()

        assert settings.application.environment == Environment.PRODUCTION
        assert settings.application.debug is False
        assert settings.application.log_level == "INFO"

        assert settings.l10n.default_language == "de"

        assert settings.url.base_url == "https://cloud.example.com"
        assert settings.url.webroot == "/nc"


def test_load_from_env_with_prefix():
    """Test loading with environment variable prefix."""
    env_vars = {
        "FOO_URL_WEBROOT": "/prefixed",
        "FOO_L10N_DEFAULT_LANGUAGE": "fr",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        settings = SettingsManager.get_instance()
        settings.load_from_env(prefix="FOO_")

        assert settings.url.webroot == "/prefixed"
        assert settings.l10n.default_language == "fr"


def test_update_runtime():
    """Test updating settings at runtime."""
    settings = SettingsManager.get_instance()

    assert settings.url.webroot != "/newroot"

    settings.url.webroot = "/newroot"

    assert settings.url.webroot == "/newroot"


def test_export_settings():
    """Test exporting settings."""
    settings = SettingsManager.get_instance()
    settings.application.environment = Environment.TESTING
    settings.url.webroot = "/nc"

    exported = settings.export_settings()

    assert set(exported) == {"application", "l10n", "url"}
    assert exported["application"]["environment"] == "testing"
    assert exported["url"]["webroot"] == "/nc"


def test_validate_settings():
    """Test settings validation."""
    settings = SettingsManager()

    # Valid settings
    errors = settings.validate()
    assert len(errors) == 0

    # Invalid settings
    settings.url.base_url = "cloud.example.com"
    settings.url.webroot = "nc"
    settings.l10n.default_language = ""

    errors = settings.validate()

    assert "url" in errors
    assert len(errors["url"]) == 2
    assert "l10n" in errors


def test_environment_checks():
    """Test environment check methods."""
    settings = SettingsManager.get_instance()

    # Save current environment
    original_env = settings.application.environment

    try:
        # Test environment changes
        settings.application.environment = Environment.DEVELOPMENT
        assert settings.is_development() is True
        assert settings.is_production() is False
        assert settings.is_testing() is False

        settings.application.environment = Environment.TESTING
        assert settings.is_development() is False
        assert settings.is_testing() is True
        assert settings.is_production() is False

        settings.application.environment = Environment.PRODUCTION
        assert settings.is_development() is False
        assert settings.is_testing() is False
        assert settings.is_production() is True
    finally:
        # Restore original environment
        settings.application.environment = original_env


def test_thread_safety():
    """Test thread-safe operations."""
    import threading

    settings = SettingsManager.get_instance()
    results = []

    def update_settings(value):
        settings.url.webroot = f"/root{value}"
        results.append(settings.url.webroot)

    threads = [threading.Thread(target=update_settings, args=(i,)) for i in range(10)]

    for thread in threads:
        thread.start()

    for thread in threads:
        thread.join()

    # All updates should have completed
    assert len(results) == 10
