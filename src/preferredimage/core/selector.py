"""Image ranking and selection by language tier, votes and resolution."""

from enum import IntEnum
from typing import Iterable, Optional

from preferredimage.models.image import RemoteImage
from preferredimage.utils.language import (
    DEFAULT_LANGUAGE,
    is_english_or_unspecified,
    normalize_tag,
)
from preferredimage.utils.logger import get_logger

logger = get_logger(__name__)


class LanguageTier(IntEnum):
    """Priority bucket of an image relative to the item's languages."""

    OTHER = 1
    ENGLISH = 2
    METADATA = 3
    ORIGINAL = 4

    @property
    def label(self) -> str:
        """Human-readable label used in logs."""
        return _TIER_LABELS[self]


_TIER_LABELS = {
    LanguageTier.ORIGINAL: "original language",
    LanguageTier.METADATA: "metadata language",
    LanguageTier.ENGLISH: "English",
    LanguageTier.OTHER: "other language",
}


def language_tier(
    image: RemoteImage,
    original_language: Optional[str],
    metadata_language: Optional[str] = DEFAULT_LANGUAGE,
) -> LanguageTier:
    """Classify an image's language against the item's languages.

    Args:
        image: Candidate image
        original_language: Detected original language of the item
        metadata_language: Preferred metadata language of the item

    Returns:
        LanguageTier of the image
    """
    language = normalize_tag(image.language)

    # An untagged image never matches a missing item language
    if language and language == normalize_tag(original_language):
        return LanguageTier.ORIGINAL
    if language and language == normalize_tag(metadata_language):
        return LanguageTier.METADATA
    if is_english_or_unspecified(language):
        return LanguageTier.ENGLISH
    return LanguageTier.OTHER


class ImageSelector:
    """Select the best image from a set of candidates of one type."""

    def rank_images(
        self,
        images: Iterable[RemoteImage],
        original_language: Optional[str],
        metadata_language: Optional[str] = DEFAULT_LANGUAGE,
    ) -> list[RemoteImage]:
        """Order candidates from best to worst.

        Ranking key, all descending: language tier, vote count, pixel area.
        The sort is stable, so candidates tied on every key keep their
        input order.

        Args:
            images: Candidate images
            original_language: Detected original language of the item
            metadata_language: Preferred metadata language of the item

        Returns:
            New list of the same images, best first
        """
        return sorted(
            images,
            key=lambda image: (
                language_tier(image, original_language, metadata_language),
                image.votes,
                image.pixel_area,
            ),
            reverse=True,
        )

    def select_best_image(
        self,
        images: Iterable[RemoteImage],
        original_language: Optional[str],
        metadata_language: Optional[str] = DEFAULT_LANGUAGE,
        item_name: Optional[str] = None,
    ) -> Optional[RemoteImage]:
        """Select the highest-ranked image.

        Never raises: a fault while ranking is logged and yields None.

        Args:
            images: Candidate images (usually all of one type)
            original_language: Detected original language of the item
            metadata_language: Preferred metadata language of the item
            item_name: Item name for logging

        Returns:
            Best image, or None if there are no candidates
        """
        try:
            ranked = self.rank_images(images, original_language, metadata_language)
            if not ranked:
                logger.info("No images available", item=item_name)
                return None

            best = ranked[0]
            tier = language_tier(best, original_language, metadata_language)
            logger.info(
                "Selected image",
                item=item_name,
                image_type=best.type.value,
                language_type=tier.label,
                language=best.language or "unknown",
                votes=best.votes,
                resolution=f"{best.width or 0}x{best.height or 0}",
                provider=best.provider_name,
                candidates=len(ranked),
            )
            return best

        except Exception as e:
            logger.exception(
                "Error selecting best image",
                item=item_name,
                error=str(e),
            )
            return None
