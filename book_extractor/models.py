"""Data models for books."""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Meta:
    """Nested metadata carried by a book record."""
    states: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Book:
    """Book record as returned by the books API."""
    id: int
    display_name: str
    parent_name: Optional[str]
    meta: Meta

    @property
    def states_str(self) -> str:
        """Format state codes as comma-separated string."""
        return ", ".join(self.meta.states)

    def has_any_state(self, states) -> bool:
        """Check whether any of the given state codes is attached to the book."""
        return any(state in self.meta.states for state in states)
