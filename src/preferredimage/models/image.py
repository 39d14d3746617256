"""Candidate image data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ImageType(Enum):
    """Artwork types handled by the selector."""

    PRIMARY = "primary"
    LOGO = "logo"
    THUMB = "thumb"
    BACKDROP = "backdrop"


DEFAULT_IMAGE_TYPES = [
    ImageType.PRIMARY,
    ImageType.LOGO,
    ImageType.THUMB,
    ImageType.BACKDROP,
]


@dataclass(frozen=True)
class RemoteImage:
    """One candidate image returned by an upstream image source."""

    type: ImageType
    url: Optional[str] = None
    provider_name: Optional[str] = None
    thumbnail_url: Optional[str] = None
    language: Optional[str] = None  # ISO-ish code, free text or absent
    vote_count: Optional[int] = None
    community_rating: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def votes(self) -> int:
        """Vote count with absent treated as zero."""
        return self.vote_count or 0

    @property
    def pixel_area(self) -> int:
        """Width times height with absent dimensions treated as zero."""
        return (self.width or 0) * (self.height or 0)

    def __str__(self) -> str:
        """Human-readable representation."""
        return (
            f"{self.type.value} [{self.language or 'unknown'}] "
            f"{self.width or 0}x{self.height or 0}, {self.votes} votes"
        )
