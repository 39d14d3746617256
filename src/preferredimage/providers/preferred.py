"""Preferred image provider: aggregate other sources, keep the best per type."""

from typing import Iterable, Optional

from preferredimage.config import Config
from preferredimage.core.orchestrator import SelectionOrchestrator
from preferredimage.models.image import ImageType, RemoteImage
from preferredimage.models.item import ItemKind, MediaItem
from preferredimage.providers.aggregator import ImageAggregator
from preferredimage.providers.base import ImageSource
from preferredimage.utils.logger import get_logger

logger = get_logger(__name__)


class PreferredImageProvider(ImageSource):
    """Image source that proxies every other source and re-ranks their images."""

    # Runs ahead of the sources it proxies
    order = 1

    def __init__(
        self,
        sources: Iterable[ImageSource],
        config: Optional[Config] = None,
        orchestrator: Optional[SelectionOrchestrator] = None,
    ):
        """Initialize preferred image provider.

        Args:
            sources: Upstream image sources (may include this provider)
            config: Application configuration (defaults if None)
            orchestrator: Selection orchestrator (built from config if None)
        """
        self.config = config or Config.from_defaults()
        self._name = self.config.providers.provider_name
        self.aggregator = ImageAggregator(
            sources,
            exclude_name=self._name,
            timeout_seconds=self.config.providers.source_timeout_seconds,
        )
        self.orchestrator = orchestrator or SelectionOrchestrator(
            supported_types=self.config.image_types,
            default_metadata_language=self.config.metadata_language,
        )

    @property
    def name(self) -> str:
        return self._name

    def supports(self, item: MediaItem) -> bool:
        return item.kind in (ItemKind.MOVIE, ItemKind.SERIES)

    def supported_images(self, item: Optional[MediaItem] = None) -> list[ImageType]:
        """Image types this provider selects, in output order."""
        return list(self.orchestrator.supported_types)

    async def get_images(self, item: MediaItem) -> list[RemoteImage]:
        """Collect candidates from all other sources and select the best.

        Args:
            item: Media item to fetch images for

        Returns:
            At most one image per supported type; empty on any failure
        """
        try:
            logger.info("Processing images for item", item=item.name)

            candidates = await self.aggregator.collect(item)
            if not candidates:
                logger.info("No images available from other sources", item=item.name)
                return []

            return self.orchestrator.select_images_for_item(
                item, candidates, self.supported_images(item)
            )

        except Exception as e:
            logger.exception("Error getting images for item", item=item.name, error=str(e))
            return []
