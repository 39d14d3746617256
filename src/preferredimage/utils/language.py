"""Language code utilities."""

from typing import Optional

# Fallback original language when nothing in the metadata points elsewhere
DEFAULT_LANGUAGE = "en"

# Every code the detector is able to produce
SUPPORTED_LANGUAGES = ("ja", "ko", "zh", "es", "fr", "de", "it", "en")

# Image language tags that count as English / language-neutral artwork
ENGLISH_TAGS = ("en", "english")

# ISO 639-1 code to English display name
LANGUAGE_NAMES = {
    "en": "English",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
}


def normalize_tag(tag: Optional[str]) -> str:
    """Normalize an image or item language tag for comparison.

    Args:
        tag: Language tag as supplied by an image source (may be None)

    Returns:
        Lower-cased, stripped tag; empty string when absent
    """
    if not tag:
        return ""
    return tag.strip().lower()


def is_english_or_unspecified(tag: Optional[str]) -> bool:
    """Check whether a tag means English or carries no language at all."""
    normalized = normalize_tag(tag)
    return not normalized or normalized in ENGLISH_TAGS


def language_name(code: Optional[str]) -> str:
    """Convert a language code to its display name.

    Args:
        code: 2-letter language code (e.g., 'ja')

    Returns:
        Display name (e.g., 'Japanese'), or the code itself if unknown
    """
    normalized = normalize_tag(code)
    if not normalized:
        return "unknown"
    return LANGUAGE_NAMES.get(normalized, normalized)
