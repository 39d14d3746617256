"""In-memory image source over a fixed candidate list."""

from typing import Iterable

from preferredimage.models.image import RemoteImage
from preferredimage.models.item import MediaItem
from preferredimage.providers.base import ImageSource


class StaticImageSource(ImageSource):
    """Image source that always returns the same candidates.

    Used to feed candidates that were gathered elsewhere (request payloads,
    files) through the same aggregation path as live sources.
    """

    def __init__(self, name: str, images: Iterable[RemoteImage]):
        self._name = name
        self.images = list(images)

    @property
    def name(self) -> str:
        return self._name

    async def get_images(self, item: MediaItem) -> list[RemoteImage]:
        return list(self.images)
