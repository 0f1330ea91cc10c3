from .exceptions import InvalidAudienceError, ResolutionError
from .interfaces import Audience, SectionProvider, SettingsProvider, SubAdminSettings
from .registry import SettingsRegistry
from .section import Section

__all__ = [
    "Audience",
    "InvalidAudienceError",
    "ResolutionError",
    "Section",
    "SectionProvider",
    "SettingsProvider",
    "SettingsRegistry",
    "SubAdminSettings",
]
