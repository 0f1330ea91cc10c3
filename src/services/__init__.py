from .container import Container
from .l10n import L10N, L10NFactory
from .url_generator import URLGenerator

__all__ = [
    "Container",
    "L10N",
    "L10NFactory",
    "URLGenerator",
]
