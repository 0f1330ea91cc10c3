"""Registry of admin and personal settings sections.

Application modules register section and settings provider types at startup.
Lookups resolve those types through the injected container on every call and
bucket the resulting instances by their declared priority.
"""

from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Hashable

from .exceptions import ResolutionError
from .interfaces import Audience, SectionProvider, SettingsProvider, SubAdminSettings
from .section import Section

L10N_DOMAIN = "lib"
ICON_APP = "core"


@dataclass(frozen=True)
class BuiltinSection:
    """Server-shipped section with an untranslated label."""

    id: str
    label: str
    priority: int
    icon: str


class SettingsRegistry:
    """Priority-bucketed registry of settings sections and providers.

    Usage:
        registry = SettingsRegistry(logger, l10n_factory, url_generator, container)
        registry.register_section("admin", SharingSection)
        registry.register_setting("admin", "sharing", SharingSettings)

        registry.get_admin_sections()          # {priority: [section, ...]}
        registry.get_admin_settings("sharing") # {priority: [provider, ...]}
    """

    def __init__(
        self,
        logger: Any,
        l10n_factory: Any,
        url_generator: Any,
        container: Any,
        l10n: Any | None = None,
    ):
        self.logger = logger
        self.l10n_factory = l10n_factory
        self.url_generator = url_generator
        self.container = container
        self._l10n = l10n

        # dicts double as insertion-ordered sets
        self._sections: dict[Audience, dict[Hashable, None]] = {a: {} for a in Audience}
        self._settings: dict[Audience, dict[str, dict[Hashable, None]]] = {a: {} for a in Audience}
        self._builtin_sections: dict[Audience, dict[str, BuiltinSection]] = {a: {} for a in Audience}
        self._lock = Lock()

    # Registration

    def register_section(self, audience: str | Audience, section_provider_type: Hashable) -> None:
        """Register a section type for an audience.

        Args:
            audience: "admin" or "personal"
            section_provider_type: Container identifier resolving to a SectionProvider

        Raises:
            InvalidAudienceError: If the audience is unknown
        """
        audience = Audience.parse(audience)
        with self._lock:
            sections = self._sections[audience]
            if section_provider_type in sections:
                self.logger.debug(f"Section {section_provider_type!r} already registered for {audience.value}")
                return
            sections[section_provider_type] = None
        self.logger.debug(f"Registered {audience.value} section {section_provider_type!r}")

    def register_setting(
        self,
        audience: str | Audience,
        section_key: str,
        setting_provider_type: Hashable,
    ) -> None:
        """Register a settings provider type under a section key.

        Args:
            audience: "admin" or "personal"
            section_key: Key of the section the provider belongs to
            setting_provider_type: Container identifier resolving to a SettingsProvider

        Raises:
            InvalidAudienceError: If the audience is unknown
        """
        audience = Audience.parse(audience)
        with self._lock:
            settings = self._settings[audience].setdefault(section_key, {})
            if setting_provider_type in settings:
                self.logger.debug(
                    f"Setting {setting_provider_type!r} already registered for {audience.value}/{section_key}"
                )
                return
            settings[setting_provider_type] = None
        self.logger.debug(f"Registered {audience.value} setting {setting_provider_type!r} in {section_key}")

    def register_builtin_section(
        self,
        audience: str | Audience,
        section_id: str,
        label: str,
        priority: int,
        icon: str,
    ) -> None:
        """Register a section shipped by the server itself.

        The label is translated and the icon turned into a URL at lookup time.
        """
        audience = Audience.parse(audience)
        with self._lock:
            builtins = self._builtin_sections[audience]
            if section_id in builtins:
                self.logger.debug(f"Built-in section {section_id!r} already registered for {audience.value}")
                return
            builtins[section_id] = BuiltinSection(section_id, label, priority, icon)
        self.logger.debug(f"Registered built-in {audience.value} section {section_id!r}")

    # Lookup

    def get_admin_sections(self) -> dict[int, list[SectionProvider]]:
        return self.get_sections(Audience.ADMIN)

    def get_personal_sections(self) -> dict[int, list[SectionProvider]]:
        return self.get_sections(Audience.PERSONAL)

    def get_admin_settings(
        self,
        section_key: str,
        is_sub_admin: bool = False,
    ) -> dict[int, list[SettingsProvider]]:
        """Resolve the admin settings of a section grouped by priority.

        Args:
            section_key: Section the providers were registered under
            is_sub_admin: Only keep providers that allow sub-administrators

        Returns:
            Mapping of priority to providers in registration order
        """
        return self.get_settings(Audience.ADMIN, section_key, is_sub_admin=is_sub_admin)

    def get_personal_settings(self, section_key: str) -> dict[int, list[SettingsProvider]]:
        return self.get_settings(Audience.PERSONAL, section_key)

    def get_sections(self, audience: str | Audience) -> dict[int, list[SectionProvider]]:
        """Resolve all sections of an audience grouped by their priority."""
        audience = Audience.parse(audience)
        with self._lock:
            builtins = list(self._builtin_sections[audience].values())
            section_types = list(self._sections[audience])

        sections: list[SectionProvider] = [self._build_section(b) for b in builtins]
        sections.extend(self._resolve(t) for t in section_types)
        return self._group_by_priority(sections)

    def get_settings(
        self,
        audience: str | Audience,
        section_key: str,
        is_sub_admin: bool = False,
    ) -> dict[int, list[SettingsProvider]]:
        """Resolve the settings registered under a section grouped by priority.

        Sub-admin filtering only applies to the admin audience.
        """
        audience = Audience.parse(audience)
        with self._lock:
            setting_types = list(self._settings[audience].get(section_key, {}))

        accept: Callable[[SettingsProvider], bool] = lambda _: True
        if is_sub_admin and audience is Audience.ADMIN:
            accept = self._allowed_for_sub_admin

        providers = []
        for setting_type in setting_types:
            provider = self._resolve(setting_type)
            if accept(provider):
                providers.append(provider)
            else:
                self.logger.debug(f"Hiding {setting_type!r} in {section_key} from sub-admin")
        return self._group_by_priority(providers)

    def get_section(self, audience: str | Audience, section_id: str) -> SectionProvider | None:
        """Find a resolved section of an audience by its id."""
        for sections in self.get_sections(audience).values():
            for section in sections:
                if section.get_id() == section_id:
                    return section
        return None

    # Helpers

    def _resolve(self, identifier: Hashable) -> Any:
        try:
            return self.container.query(identifier)
        except ResolutionError as e:
            self.logger.error(f"Could not resolve settings component {identifier!r}: {e}")
            raise

    def _build_section(self, builtin: BuiltinSection) -> Section:
        l10n = self._get_l10n()
        return Section(
            id=builtin.id,
            name=l10n.t(builtin.label),
            priority=builtin.priority,
            icon=self.url_generator.image_path(ICON_APP, builtin.icon),
        )

    def _get_l10n(self) -> Any:
        if self._l10n is None:
            self._l10n = self.l10n_factory.get(L10N_DOMAIN)
        return self._l10n

    @staticmethod
    def _allowed_for_sub_admin(provider: SettingsProvider) -> bool:
        return isinstance(provider, SubAdminSettings) and bool(provider.is_sub_admin_allowed())

    @staticmethod
    def _group_by_priority(items: list[Any]) -> dict[int, list[Any]]:
        grouped: dict[int, list[Any]] = {}
        for item in items:
            grouped.setdefault(item.get_priority(), []).append(item)
        return grouped
