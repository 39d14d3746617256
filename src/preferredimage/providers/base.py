"""Abstract interface for upstream image sources."""

from abc import ABC, abstractmethod

from preferredimage.models.image import RemoteImage
from preferredimage.models.item import MediaItem


class ImageSource(ABC):
    """Abstract base class for sources of candidate images."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name, unique among registered sources."""

    def supports(self, item: MediaItem) -> bool:
        """Whether this source can provide images for the item."""
        return True

    @abstractmethod
    async def get_images(self, item: MediaItem) -> list[RemoteImage]:
        """Fetch candidate images for an item.

        Args:
            item: Media item to fetch images for

        Returns:
            Candidate images of any type
        """
