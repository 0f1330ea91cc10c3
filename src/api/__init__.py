from .health import health
from .navigation import navigation

__all__ = [
    "health",
    "navigation",
]
