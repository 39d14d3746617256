"""Concurrent aggregation of candidate images from several sources."""

import asyncio
from typing import Iterable, Optional

from preferredimage.models.image import RemoteImage
from preferredimage.models.item import MediaItem
from preferredimage.providers.base import ImageSource
from preferredimage.utils.logger import get_logger

logger = get_logger(__name__)


class ImageAggregator:
    """Collect candidate images from all applicable sources."""

    def __init__(
        self,
        sources: Iterable[ImageSource],
        exclude_name: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ):
        """Initialize image aggregator.

        Args:
            sources: Registered image sources
            exclude_name: Source name to skip (the caller's own provider)
            timeout_seconds: Per-source timeout; None waits indefinitely
        """
        self.sources = list(sources)
        self.exclude_name = exclude_name
        self.timeout_seconds = timeout_seconds

    def applicable_sources(self, item: MediaItem) -> list[ImageSource]:
        """Sources that support the item, minus the excluded one."""
        excluded = self.exclude_name.casefold() if self.exclude_name else None
        return [
            source
            for source in self.sources
            if (excluded is None or source.name.casefold() != excluded)
            and source.supports(item)
        ]

    async def collect(self, item: MediaItem) -> list[RemoteImage]:
        """Query all applicable sources concurrently.

        A source that fails or times out contributes no candidates; the
        others are unaffected. Results keep source registration order.

        Args:
            item: Media item to collect images for

        Returns:
            Candidate images from every source that answered
        """
        sources = self.applicable_sources(item)
        if not sources:
            logger.info("No image sources available", item=item.name)
            return []

        logger.debug(
            "Querying image sources",
            item=item.name,
            sources=[source.name for source in sources],
        )

        results = await asyncio.gather(
            *(self._fetch_from_source(source, item) for source in sources)
        )
        images = [image for result in results for image in result]

        logger.info(
            "Collected candidate images",
            item=item.name,
            sources=len(sources),
            images=len(images),
        )
        return images

    async def _fetch_from_source(
        self, source: ImageSource, item: MediaItem
    ) -> list[RemoteImage]:
        """Fetch from one source, converting any failure into no images."""
        try:
            if self.timeout_seconds is not None:
                images = await asyncio.wait_for(
                    source.get_images(item), timeout=self.timeout_seconds
                )
            else:
                images = await source.get_images(item)

            images = list(images)
            logger.debug(
                "Source returned images",
                source=source.name,
                item=item.name,
                count=len(images),
            )
            return images

        except asyncio.TimeoutError:
            logger.warning(
                "Image source timed out",
                source=source.name,
                item=item.name,
                timeout_seconds=self.timeout_seconds,
            )
            return []
        except Exception as e:
            logger.error(
                "Error getting images from source",
                source=source.name,
                item=item.name,
                error=str(e),
                exc_info=True,
            )
            return []
