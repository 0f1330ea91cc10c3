from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from .exceptions import InvalidAudienceError


class Audience(str, Enum):
    """Settings scope a section or setting is shown in."""

    ADMIN = "admin"
    PERSONAL = "personal"

    @classmethod
    def parse(cls, value: "str | Audience") -> "Audience":
        """Coerce a raw value into an Audience.

        Raises:
            InvalidAudienceError: If the value is not a known audience
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidAudienceError(
                f"Unknown settings audience {value!r}, expected one of "
                f"{[a.value for a in cls]}"
            ) from None


class SectionProvider(ABC):
    """A navigation entry grouping related settings."""

    @abstractmethod
    def get_id(self) -> str:
        """Section key settings are registered under, e.g. 'sharing'."""
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def get_name(self) -> str:
        """Translated label shown in the navigation."""
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def get_priority(self) -> int:
        """Sort weight, lower values are listed first."""
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def get_icon(self) -> str:
        """URL of the navigation icon."""
        raise NotImplementedError("Subclasses must implement this method.")


class SettingsProvider(ABC):
    """A single settings panel contributed to a section."""

    @abstractmethod
    def get_priority(self) -> int:
        """Position of the panel within its section, lower values first."""
        raise NotImplementedError("Subclasses must implement this method.")

    def get_name(self) -> str:
        return self.__class__.__name__

    def get_form(self) -> dict[str, Any]:
        """Template payload rendered by the UI."""
        return {}


class SubAdminSettings(SettingsProvider):
    """Admin settings panel that may be shown to sub-administrators."""

    @abstractmethod
    def is_sub_admin_allowed(self) -> bool:
        raise NotImplementedError("Subclasses must implement this method.")
