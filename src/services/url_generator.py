from ..config import SettingsManager


class URLGenerator:
    """Builds URLs relative to the configured webroot."""

    def __init__(self, settings: SettingsManager | None = None):
        self.settings = settings or SettingsManager.get_instance()

    @property
    def webroot(self) -> str:
        return self.settings.url.webroot.rstrip("/")

    def image_path(self, app: str, image: str) -> str:
        """Path of an image shipped by an app, e.g. ("core", "actions/share.svg")."""
        return f"{self.webroot}/{app}/img/{image.lstrip('/')}"

    def get_absolute_url(self, path: str) -> str:
        base = self.settings.url.base_url.rstrip("/")
        return f"{base}{self.webroot}/{path.lstrip('/')}"
