"""Per-item selection orchestrator."""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from preferredimage.core.detector import LanguageDetector
from preferredimage.core.selector import ImageSelector
from preferredimage.models.image import DEFAULT_IMAGE_TYPES, ImageType, RemoteImage
from preferredimage.models.item import MediaItem
from preferredimage.utils.language import DEFAULT_LANGUAGE, normalize_tag
from preferredimage.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SelectionResult:
    """Outcome of selecting images for one item."""

    original_language: str
    metadata_language: str
    candidates: int = 0
    images: list[RemoteImage] = field(default_factory=list)


class SelectionOrchestrator:
    """Detect an item's language once and pick the best image per type."""

    def __init__(
        self,
        detector: Optional[LanguageDetector] = None,
        selector: Optional[ImageSelector] = None,
        supported_types: Sequence[ImageType] = DEFAULT_IMAGE_TYPES,
        default_metadata_language: str = DEFAULT_LANGUAGE,
    ):
        """Initialize selection orchestrator.

        Args:
            detector: Language detector (a default one if None)
            selector: Image selector (a default one if None)
            supported_types: Image types to select, in output order
            default_metadata_language: Used when the item has no preference
        """
        self.detector = detector or LanguageDetector()
        self.selector = selector or ImageSelector()
        self.supported_types = list(supported_types)
        self.default_metadata_language = (
            normalize_tag(default_metadata_language) or DEFAULT_LANGUAGE
        )

    def resolve_metadata_language(self, item: MediaItem) -> str:
        """Resolve the preferred metadata language for an item.

        Args:
            item: Media item

        Returns:
            The item's own non-empty preference, else the configured default
        """
        language = normalize_tag(item.preferred_metadata_language)
        if language:
            logger.debug("Using item metadata language", item=item.name, language=language)
            return language

        logger.debug(
            "No metadata language on item, using default",
            item=item.name,
            language=self.default_metadata_language,
        )
        return self.default_metadata_language

    def select(
        self,
        item: MediaItem,
        candidate_images: Iterable[RemoteImage],
        supported_types: Optional[Sequence[ImageType]] = None,
    ) -> SelectionResult:
        """Select at most one image per type and report the languages used.

        Never raises: a fault is logged and yields a result without images.

        Args:
            item: Media item the candidates belong to
            candidate_images: Candidates of any type, from all sources
            supported_types: Overrides the orchestrator's types when given

        Returns:
            SelectionResult with images in the order of the supported types
        """
        types = list(supported_types) if supported_types is not None else self.supported_types
        result = SelectionResult(
            original_language=DEFAULT_LANGUAGE,
            metadata_language=self.default_metadata_language,
        )

        try:
            result.original_language = self.detector.detect_original_language(item)
            result.metadata_language = self.resolve_metadata_language(item)

            candidates = list(candidate_images)
            result.candidates = len(candidates)

            for image_type in types:
                images_of_type = [image for image in candidates if image.type == image_type]
                if not images_of_type:
                    logger.debug(
                        "No images of type",
                        item=item.name,
                        image_type=image_type.value,
                    )
                    continue

                best = self.selector.select_best_image(
                    images_of_type,
                    result.original_language,
                    result.metadata_language,
                    item_name=item.name,
                )
                if best is not None:
                    result.images.append(best)

            logger.info(
                "Selected images for item",
                item=item.name,
                original_language=result.original_language,
                metadata_language=result.metadata_language,
                candidates=result.candidates,
                selected=len(result.images),
            )

        except Exception as e:
            logger.exception(
                "Error selecting images for item",
                item=getattr(item, "name", None),
                error=str(e),
            )
            result.images = []

        return result

    def select_images_for_item(
        self,
        item: MediaItem,
        candidate_images: Iterable[RemoteImage],
        supported_types: Optional[Sequence[ImageType]] = None,
    ) -> list[RemoteImage]:
        """Select at most one image per supported type.

        Args:
            item: Media item the candidates belong to
            candidate_images: Candidates of any type, from all sources
            supported_types: Overrides the orchestrator's types when given

        Returns:
            Selected images in the order of the supported types
        """
        return self.select(item, candidate_images, supported_types).images
