from dataclasses import dataclass
from functools import lru_cache

from loguru import logger

from .interfaces import Audience
from .registry import SettingsRegistry
from ..config import SettingsManager
from ..services import Container, L10NFactory, URLGenerator


@dataclass(frozen=True)
class DefaultSection:
    """Definition of a section shipped with the server."""

    audience: Audience
    section_id: str
    label: str
    priority: int
    icon: str


# Built-in navigation sections
DEFAULT_SECTIONS = []
for (audience, section_id, label, priority, icon) in [
    (Audience.ADMIN,    'overview',      'Overview',            0,  'actions/info.svg'),
    (Audience.ADMIN,    'server',        'Basic settings',      1,  'actions/settings-dark.svg'),
    (Audience.ADMIN,    'sharing',       'Sharing',             5,  'actions/share.svg'),
    (Audience.ADMIN,    'security',      'Security',            10, 'actions/password.svg'),
    (Audience.ADMIN,    'groupware',     'Groupware',           50, 'places/contacts.svg'),

    (Audience.PERSONAL, 'personal-info', 'Personal info',       0,  'actions/info.svg'),
    (Audience.PERSONAL, 'security',      'Security',            5,  'actions/password.svg'),
    (Audience.PERSONAL, 'sync-clients',  'Mobile & desktop',    15, 'clients/phone.svg'),
    (Audience.PERSONAL, 'additional',    'Additional settings', 98, 'actions/settings-dark.svg'),
]:
    DEFAULT_SECTIONS.append(
        DefaultSection(
            audience=audience,
            section_id=section_id,
            label=label,
            priority=priority,
            icon=icon,
    ))


def create_registry(
    settings: SettingsManager | None = None,
    container: Container | None = None,
    sections: list[DefaultSection] | None = DEFAULT_SECTIONS,
) -> SettingsRegistry:
    """Build a registry wired to the server's collaborators.

    Args:
        settings: Configuration, defaults to the global settings manager
        container: Container used to resolve registered types
        sections: Built-in sections to register

    Returns:
        SettingsRegistry with the built-in sections registered
    """
    settings = settings or SettingsManager.get_instance()
    registry = SettingsRegistry(
        logger=logger,
        l10n_factory=L10NFactory(settings),
        url_generator=URLGenerator(settings),
        container=container or Container(),
    )
    for section in sections or []:
        registry.register_builtin_section(
            audience=section.audience,
            section_id=section.section_id,
            label=section.label,
            priority=section.priority,
            icon=section.icon,
        )
    logger.info(f"Initialized SettingsRegistry with {len(sections or [])} built-in sections")
    return registry


@lru_cache(maxsize=1)
def get_registry() -> SettingsRegistry:
    """Get or create the process-wide registry."""
    return create_registry()


def reset_registry() -> None:
    """Drop the cached registry (mainly for testing)."""
    get_registry.cache_clear()
