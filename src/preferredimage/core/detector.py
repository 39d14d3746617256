"""Original-language detection from media item metadata.

Detection is an ordered cascade of independent methods. Each method looks at
one slice of the item's metadata and either returns a language code or None;
the first method that returns a code wins and later methods never run. When
nothing matches the detector falls back to English.

The keyword and script rules are plain data so each table can be audited and
tested on its own.
"""

from typing import Callable, Iterable, Optional, Sequence

from preferredimage.models.item import ItemKind, MediaItem
from preferredimage.utils.language import DEFAULT_LANGUAGE
from preferredimage.utils.logger import get_logger

logger = get_logger(__name__)

# (language, keywords) rows; row order is match precedence within a value
KeywordTable = Sequence[tuple[str, tuple[str, ...]]]

# Networks and studios with a strong regional identity
STUDIO_KEYWORDS: KeywordTable = (
    (
        "ja",
        (
            "nhk",
            "fuji",
            "toei",
            "mappa",
            "kyoto animation",
            "studio ghibli",
            "madhouse",
            "bones",
            "shaft",
        ),
    ),
    ("ko", ("sbs", "kbs", "mbc", "tvn", "jtbc", "ocn")),
    ("zh", ("cctv", "youku", "iqiyi", "tencent", "bilibili")),
)

TAG_KEYWORDS: KeywordTable = (
    ("ja", ("japanese", "japan")),
    ("ko", ("korean", "korea")),
    ("zh", ("chinese", "china", "mandarin")),
    ("es", ("spanish", "spain")),
    ("fr", ("french", "france")),
    ("de", ("german", "germany")),
    ("it", ("italian", "italy")),
)

GENRE_KEYWORDS: KeywordTable = (
    ("ja", ("anime", "j-drama")),
    ("ko", ("k-drama", "korean")),
    ("zh", ("c-drama", "chinese")),
)

LOCATION_KEYWORDS: KeywordTable = (
    ("ja", ("japan",)),
    ("ko", ("south korea", "korea")),
    ("zh", ("china", "hong kong", "taiwan")),
    ("en", ("united states", "usa", "america")),
    ("en", ("united kingdom", "uk", "britain")),
    ("es", ("spain",)),
    ("fr", ("france",)),
    ("de", ("germany",)),
    ("it", ("italy",)),
)

# Inclusive code point ranges per script class
HANGUL_RANGES = (
    (0xAC00, 0xD7AF),  # Hangul Syllables
    (0x1100, 0x11FF),  # Hangul Jamo
    (0x3130, 0x318F),  # Hangul Compatibility Jamo
    (0xA960, 0xA97F),  # Hangul Jamo Extended-A
    (0xD7B0, 0xD7FF),  # Hangul Jamo Extended-B
)

KANA_RANGES = (
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x31F0, 0x31FF),  # Katakana Phonetic Extensions
)

HAN_RANGES = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # CJK Extension A
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0x20000, 0x2A6DF),  # CJK Extension B
    (0x2A700, 0x2B73F),  # CJK Extension C
    (0x2B740, 0x2B81F),  # CJK Extension D
    (0x2B820, 0x2CEAF),  # CJK Extension E
)

# Korean before Japanese before Chinese: kana and hangul are unambiguous,
# han ideographs also occur in Japanese titles.
SCRIPT_RULES = (
    ("ko", HANGUL_RANGES),
    ("ja", KANA_RANGES),
    ("zh", HAN_RANGES),
)


def match_keywords(values: Optional[Iterable[str]], table: KeywordTable) -> Optional[str]:
    """Return the language of the first value containing a table keyword.

    Values are scanned in order; for each value the table rows are tried in
    order. Matching is case-insensitive substring containment.

    Args:
        values: Free-form strings (studios, tags, genres, locations)
        table: Keyword table to consult

    Returns:
        Language code of the first match, or None
    """
    if not values:
        return None

    for value in values:
        if not value:
            continue
        normalized = value.lower()
        for language, keywords in table:
            if any(keyword in normalized for keyword in keywords):
                return language
    return None


def _in_ranges(char: str, ranges) -> bool:
    code_point = ord(char)
    return any(low <= code_point <= high for low, high in ranges)


def detect_script(text: Optional[str]) -> Optional[str]:
    """Detect the language implied by the script of a title.

    Args:
        text: Title text, possibly in a non-Latin script

    Returns:
        'ko', 'ja' or 'zh' for the first script class present, or None
    """
    if not text:
        return None

    for language, ranges in SCRIPT_RULES:
        if any(_in_ranges(char, ranges) for char in text):
            return language
    return None


def language_from_studios(item: MediaItem) -> Optional[str]:
    """Map the first regionally identifiable studio or network."""
    language = match_keywords(item.studios, STUDIO_KEYWORDS)
    if language:
        logger.info(
            "Mapped studio to language",
            item=item.name,
            studios=item.studios,
            language=language,
        )
    return language


def language_from_tags(item: MediaItem) -> Optional[str]:
    """Map the first tag naming a language or country."""
    return match_keywords(item.tags, TAG_KEYWORDS)


def language_from_genres(item: MediaItem) -> Optional[str]:
    """Map regional genres such as anime or k-drama."""
    return match_keywords(item.genres, GENRE_KEYWORDS)


def language_from_metadata(item: MediaItem) -> Optional[str]:
    """Try studios, then tags, then genres."""
    return (
        language_from_studios(item)
        or language_from_tags(item)
        or language_from_genres(item)
    )


def language_from_production_locations(item: MediaItem) -> Optional[str]:
    """Map the first recognised production country."""
    if not item.production_locations:
        logger.debug("No production locations", item=item.name)
        return None

    logger.debug(
        "Checking production locations",
        item=item.name,
        locations=item.production_locations,
    )
    return match_keywords(item.production_locations, LOCATION_KEYWORDS)


def language_from_original_title(item: MediaItem) -> Optional[str]:
    """Infer the language from the script of the original title."""
    language = detect_script(item.original_title)
    if language:
        logger.info(
            "Detected script in original title",
            item=item.name,
            original_title=item.original_title,
            language=language,
        )
    return language


DetectionMethod = Callable[[MediaItem], Optional[str]]

DETECTION_METHODS: tuple[tuple[str, DetectionMethod], ...] = (
    ("metadata", language_from_metadata),
    ("production_locations", language_from_production_locations),
    ("original_title", language_from_original_title),
)


class LanguageDetector:
    """Detect the original production language of a media item."""

    def __init__(
        self,
        methods: Sequence[tuple[str, DetectionMethod]] = DETECTION_METHODS,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        """Initialize language detector.

        Args:
            methods: Ordered (name, method) pairs; first non-empty result wins
            default_language: Code returned when no method produces one
        """
        self.methods = tuple(methods)
        self.default_language = default_language

    def detect_original_language(self, item: MediaItem) -> str:
        """Detect the original language of a media item.

        Seasons with a parent series always take the series' language.
        Never raises: any fault while inspecting the item yields the default.

        Args:
            item: Media item to inspect

        Returns:
            Language code (e.g., 'en', 'ja', 'zh')
        """
        try:
            logger.debug("Detecting language", item=item.name, kind=item.kind.value)

            if item.kind == ItemKind.SEASON and item.series is not None:
                logger.debug(
                    "Using parent series for season language",
                    season=item.name,
                    series=item.series.name,
                )
                return self.detect_original_language(item.series)

            for method_name, method in self.methods:
                language = method(item)
                if language:
                    logger.info(
                        "Detected original language",
                        item=item.name,
                        language=language,
                        method=method_name,
                    )
                    return language

            logger.info(
                "Could not detect original language, using default",
                item=item.name,
                language=self.default_language,
            )
            return self.default_language

        except Exception as e:
            logger.exception(
                "Error detecting language",
                item=getattr(item, "name", None),
                error=str(e),
            )
            return self.default_language
