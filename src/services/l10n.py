from threading import Lock

from loguru import logger

from ..config import SettingsManager


class L10N:
    """Translations of one domain in one language."""

    def __init__(self, language: str, catalogue: dict[str, str] | None = None):
        self.language = language
        self.catalogue = catalogue if catalogue is not None else {}

    def t(self, text: str, *parameters) -> str:
        """Translate text, falling back to the source string.

        Parameters are applied with %-formatting, e.g. t("%s files", 3).
        """
        translated = self.catalogue.get(text, text)
        if parameters:
            return translated % parameters
        return translated

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} language={self.language} entries={len(self.catalogue)}>"


class L10NFactory:
    """Hands out cached L10N instances per domain and language."""

    def __init__(self, settings: SettingsManager | None = None):
        self.settings = settings or SettingsManager.get_instance()
        self._catalogues: dict[tuple[str, str], dict[str, str]] = {}
        self._instances: dict[tuple[str, str], L10N] = {}
        self._lock = Lock()

    def get(self, domain: str, language: str | None = None) -> L10N:
        """Get the translator for a domain.

        Args:
            domain: Translation domain, e.g. "lib"
            language: Language code, defaults to the configured default language
        """
        language = language or self.settings.l10n.default_language
        key = (domain, language)
        with self._lock:
            if key not in self._instances:
                logger.debug(f"Loading translations for domain={domain} language={language}")
                self._instances[key] = L10N(language, self._catalogues.setdefault(key, {}))
            return self._instances[key]

    def add_translations(self, domain: str, language: str, translations: dict[str, str]) -> None:
        """Extend the catalogue of a domain, visible to existing translators."""
        with self._lock:
            self._catalogues.setdefault((domain, language), {}).update(translations)
