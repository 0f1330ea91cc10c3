import pytest
from unittest.mock import MagicMock

from src.settings import SettingsRegistry
from .test_utilities import ContainerMockBuilder, L10NFactoryMockBuilder


@pytest.fixture
def container_builder():
    """Provide a builder for a mocked container."""
    return ContainerMockBuilder()


@pytest.fixture
def l10n_factory():
    """Provide a localization factory returning an echoing translator."""
    return L10NFactoryMockBuilder().build()


@pytest.fixture
def url_generator():
    """Provide a URL generator building predictable image paths."""
    url = MagicMock()
    url.image_path.side_effect = lambda app, image: f"/{app}/img/{image}"
    return url


@pytest.fixture
def registry(container_builder, l10n_factory, url_generator):
    """Provide an empty registry wired to mocked collaborators."""
    return SettingsRegistry(
        logger=MagicMock(),
        l10n_factory=l10n_factory,
        url_generator=url_generator,
        container=container_builder.build(),
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Configure logging for tests."""
    from loguru import logger
    import sys
    
    # Remove default handlers
    logger.remove()
    
    # Add test-specific handler with appropriate level
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )
    
    yield
    
    # Cleanup
    logger.remove()
