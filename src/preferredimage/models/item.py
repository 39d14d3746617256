"""Media item data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ItemKind(Enum):
    """Kinds of library items the selector distinguishes."""

    MOVIE = "movie"
    SERIES = "series"
    SEASON = "season"
    OTHER = "other"


@dataclass
class MediaItem:
    """Read-only view of a library item's descriptive metadata."""

    name: str  # Display name, diagnostics only
    kind: ItemKind = ItemKind.OTHER
    studios: list[str] = field(default_factory=list)  # Networks / production companies
    tags: list[str] = field(default_factory=list)
    genres: list[str] = field(default_factory=list)
    production_locations: list[str] = field(default_factory=list)
    original_title: Optional[str] = None
    preferred_metadata_language: Optional[str] = None
    series: Optional["MediaItem"] = None  # Parent series (seasons only)

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.series is not None:
            return f"{self.series.name} / {self.name} ({self.kind.value})"
        return f"{self.name} ({self.kind.value})"
