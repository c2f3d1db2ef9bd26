"""
Demo records and the catalog that holds them.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class DemoCategoryDefinition:
    """Descriptive metadata for one demo category."""
    key: str
    name: str
    description: str = ""
    duration: str = ""
    capacity: str = ""


@dataclass(frozen=True)
class DemoRecord:
    """A scheduled product demonstration."""
    id: str
    location: str  # category key
    attendees: int = 0

    def __post_init__(self):
        if self.attendees < 0:
            raise ValueError(f"Attendee count cannot be negative, got {self.attendees}")

    @property
    def category_key(self) -> str:
        return self.location.lower()


@dataclass(frozen=True)
class DemoCatalog:
    """
    Immutable snapshot of demo records plus the category taxonomy.

    Demo order is preserved as given.
    """
    demos: tuple = ()
    categories: Mapping[str, DemoCategoryDefinition] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "demos", tuple(self.demos))
        if not self.categories:
            from .taxonomy import DEFAULT_DEMO_CATEGORIES
            object.__setattr__(self, "categories", dict(DEFAULT_DEMO_CATEGORIES))

    def with_demos(self, demos: Iterable[DemoRecord]) -> "DemoCatalog":
        return DemoCatalog(demos=tuple(self.demos) + tuple(demos), categories=self.categories)

    def get_demo(self, demo_id: str) -> Optional[DemoRecord]:
        for demo in self.demos:
            if demo.id == demo_id:
                return demo
        return None

    def demos_in_category(self, key: str) -> list[DemoRecord]:
        key = key.lower()
        return [demo for demo in self.demos if demo.category_key == key]

    def category_label(self, key: str) -> str:
        """Display name for a category key, falling back to the key itself."""
        definition = self.categories.get(key.lower())
        return definition.name if definition else key
