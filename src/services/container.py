from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, Hashable

from loguru import logger

from ..settings.exceptions import ResolutionError


@dataclass
class _Registration:
    factory: Callable[[], Any]
    shared: bool = False
    instance: Any = None
    built: bool = False


class Container:
    """Minimal dependency container resolving identifiers to instances.

    Identifiers are usually classes or dotted names. A class that was never
    registered is instantiated without arguments.
    """

    def __init__(self):
        self._registrations: dict[Hashable, _Registration] = {}
        self._lock = RLock()

    def register(self, identifier: Hashable, factory: Callable[[], Any], shared: bool = False) -> None:
        """Register a factory for an identifier.

        Args:
            identifier: Key used by query()
            factory: Zero-argument callable building the instance
            shared: Build once and return the same instance afterwards
        """
        with self._lock:
            self._registrations[identifier] = _Registration(factory=factory, shared=shared)
        logger.debug(f"Registered {identifier!r} in container (shared={shared})")

    def register_instance(self, identifier: Hashable, instance: Any) -> None:
        with self._lock:
            self._registrations[identifier] = _Registration(
                factory=lambda: instance, shared=True, instance=instance, built=True,
            )

    def has(self, identifier: Hashable) -> bool:
        return identifier in self._registrations or isinstance(identifier, type)

    def query(self, identifier: Hashable) -> Any:
        """Resolve an identifier into an instance.

        Raises:
            ResolutionError: If nothing is registered for the identifier or building it fails
        """
        registration = self._registrations.get(identifier)
        if registration is None:
            if not isinstance(identifier, type):
                raise ResolutionError(identifier)
            registration = _Registration(factory=identifier)

        if registration.shared:
            with self._lock:
                if not registration.built:
                    registration.instance = self._build(identifier, registration.factory)
                    registration.built = True
            return registration.instance

        return self._build(identifier, registration.factory)

    @staticmethod
    def _build(identifier: Hashable, factory: Callable[[], Any]) -> Any:
        try:
            return factory()
        except Exception as e:
            raise ResolutionError(identifier, f"Could not build {identifier!r}: {e}") from e
