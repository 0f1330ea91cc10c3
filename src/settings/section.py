from dataclasses import dataclass

from .interfaces import SectionProvider


@dataclass(frozen=True)
class Section(SectionProvider):
    """Plain section used for the server's built-in navigation entries."""

    id: str
    name: str
    priority: int
    icon: str = ""

    def get_id(self) -> str:
        return self.id

    def get_name(self) -> str:
        return self.name

    def get_priority(self) -> int:
        return self.priority

    def get_icon(self) -> str:
        return self.icon
