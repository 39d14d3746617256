"""Unit tests for original-language detection."""

import pytest

from preferredimage.core.detector import (
    GENRE_KEYWORDS,
    LOCATION_KEYWORDS,
    STUDIO_KEYWORDS,
    TAG_KEYWORDS,
    LanguageDetector,
    detect_script,
    language_from_metadata,
    language_from_original_title,
    language_from_production_locations,
    match_keywords,
)
from preferredimage.models.item import ItemKind, MediaItem
from preferredimage.utils.language import SUPPORTED_LANGUAGES


@pytest.fixture
def detector():
    return LanguageDetector()


class TestKeywordTables:
    """Test the generic first-match routine against each table."""

    @pytest.mark.parametrize(
        "studio, expected",
        [
            ("NHK", "ja"),
            ("Fuji TV", "ja"),
            ("Kyoto Animation", "ja"),
            ("Studio Ghibli", "ja"),
            ("JTBC", "ko"),
            ("tvN", "ko"),
            ("Tencent Video", "zh"),
            ("bilibili", "zh"),
            ("HBO", None),
        ],
    )
    def test_studio_table(self, studio, expected):
        assert match_keywords([studio], STUDIO_KEYWORDS) == expected

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("Japanese Culture", "ja"),
            ("set in korea", "ko"),
            ("Mandarin", "zh"),
            ("Spain", "es"),
            ("french new wave", "fr"),
            ("Germany", "de"),
            ("italian", "it"),
            ("based on novel", None),
        ],
    )
    def test_tag_table(self, tag, expected):
        assert match_keywords([tag], TAG_KEYWORDS) == expected

    @pytest.mark.parametrize(
        "genre, expected",
        [
            ("Anime", "ja"),
            ("J-Drama", "ja"),
            ("K-Drama", "ko"),
            ("C-Drama", "zh"),
            ("Drama", None),
        ],
    )
    def test_genre_table(self, genre, expected):
        assert match_keywords([genre], GENRE_KEYWORDS) == expected

    @pytest.mark.parametrize(
        "location, expected",
        [
            ("Japan", "ja"),
            ("South Korea", "ko"),
            ("Hong Kong", "zh"),
            ("Taiwan", "zh"),
            ("United States of America", "en"),
            ("United Kingdom", "en"),
            ("Spain", "es"),
            ("France", "fr"),
            ("Germany", "de"),
            ("Italy", "it"),
            ("Brazil", None),
        ],
    )
    def test_location_table(self, location, expected):
        assert match_keywords([location], LOCATION_KEYWORDS) == expected

    def test_first_value_wins(self):
        """Earlier values take precedence over later ones."""
        assert match_keywords(["HBO", "KBS", "NHK"], STUDIO_KEYWORDS) == "ko"

    def test_row_order_within_value(self):
        """A value matching two rows maps to the earlier row."""
        assert match_keywords(["japan korea"], TAG_KEYWORDS) == "ja"

    def test_empty_and_blank_values(self):
        assert match_keywords(None, TAG_KEYWORDS) is None
        assert match_keywords([], TAG_KEYWORDS) is None
        assert match_keywords(["", None], TAG_KEYWORDS) is None

    def test_tables_only_produce_supported_codes(self):
        for table in (STUDIO_KEYWORDS, TAG_KEYWORDS, GENRE_KEYWORDS, LOCATION_KEYWORDS):
            for language, keywords in table:
                assert language in SUPPORTED_LANGUAGES
                assert keywords


class TestScriptDetection:
    """Test script-based detection on original titles."""

    def test_hangul(self):
        assert detect_script("오징어 게임") == "ko"

    def test_hangul_wins_over_han(self):
        assert detect_script("大長今 대장금") == "ko"

    def test_kana(self):
        assert detect_script("となりのトトロ") == "ja"

    def test_kana_with_kanji(self):
        assert detect_script("進撃の巨人") == "ja"

    def test_kanji_only_is_chinese(self):
        """Kanji-only Japanese titles are indistinguishable from Chinese."""
        assert detect_script("映画") == "zh"

    def test_han_extension_b(self):
        assert detect_script("\U00020000") == "zh"

    def test_compatibility_ideograph(self):
        assert detect_script("豈") == "zh"

    def test_latin_only(self):
        assert detect_script("Amélie") is None

    def test_empty(self):
        assert detect_script("") is None
        assert detect_script(None) is None


class TestDetectionMethods:
    """Test each detection method in isolation."""

    def test_metadata_prefers_studios_over_tags(self):
        item = MediaItem(name="x", studios=["SBS"], tags=["japanese"], genres=["anime"])
        assert language_from_metadata(item) == "ko"

    def test_metadata_prefers_tags_over_genres(self):
        item = MediaItem(name="x", tags=["french"], genres=["anime"])
        assert language_from_metadata(item) == "fr"

    def test_metadata_falls_back_to_genres(self):
        item = MediaItem(name="x", studios=["Netflix"], tags=["revenge"], genres=["C-Drama"])
        assert language_from_metadata(item) == "zh"

    def test_metadata_nothing(self):
        item = MediaItem(name="x", studios=["Netflix"], genres=["Drama"])
        assert language_from_metadata(item) is None

    def test_locations_empty(self):
        assert language_from_production_locations(MediaItem(name="x")) is None

    def test_locations_first_match(self):
        item = MediaItem(name="x", production_locations=["Brazil", "France", "Japan"])
        assert language_from_production_locations(item) == "fr"

    def test_original_title(self):
        item = MediaItem(name="x", original_title="기생충")
        assert language_from_original_title(item) == "ko"


class TestLanguageDetector:
    """Test the full detection cascade."""

    def test_scenario_studio_nhk(self, detector):
        item = MediaItem(name="Documentary", kind=ItemKind.SERIES, studios=["NHK"])
        assert detector.detect_original_language(item) == "ja"

    def test_scenario_location_south_korea(self, detector, korean_series):
        assert detector.detect_original_language(korean_series) == "ko"

    def test_scenario_kanji_title(self, detector):
        item = MediaItem(name="Eiga", kind=ItemKind.MOVIE, original_title="映画")
        assert detector.detect_original_language(item) == "zh"

    def test_default_is_english(self, detector, english_movie):
        assert detector.detect_original_language(english_movie) == "en"

    def test_metadata_beats_locations(self, detector):
        item = MediaItem(
            name="Co-production",
            studios=["Toei Animation"],
            production_locations=["United States"],
        )
        assert detector.detect_original_language(item) == "ja"

    def test_locations_beat_title(self, detector):
        item = MediaItem(
            name="Remake",
            production_locations=["United States"],
            original_title="오징어 게임",
        )
        assert detector.detect_original_language(item) == "en"

    def test_season_uses_parent_series(self, detector, anime_series):
        season = MediaItem(
            name="Season 1",
            kind=ItemKind.SEASON,
            tags=["korean"],
            production_locations=["South Korea"],
            original_title="시즌",
            series=anime_series,
        )
        assert detector.detect_original_language(season) == "ja"
        assert detector.detect_original_language(season) == detector.detect_original_language(
            anime_series
        )

    def test_season_without_series_uses_own_metadata(self, detector):
        season = MediaItem(name="Season 1", kind=ItemKind.SEASON, tags=["Italy"])
        assert detector.detect_original_language(season) == "it"

    def test_series_reference_ignored_for_non_seasons(self, detector, anime_series):
        movie = MediaItem(name="Film", kind=ItemKind.MOVIE, series=anime_series)
        assert detector.detect_original_language(movie) == "en"

    def test_first_successful_method_stops_cascade(self):
        calls = []

        def first(item):
            calls.append("first")
            return "de"

        def second(item):
            calls.append("second")
            return "fr"

        detector = LanguageDetector(methods=[("first", first), ("second", second)])

        assert detector.detect_original_language(MediaItem(name="x")) == "de"
        assert calls == ["first"]

    def test_fault_maps_to_english(self):
        def broken(item):
            raise RuntimeError("boom")

        detector = LanguageDetector(methods=[("broken", broken)])

        assert detector.detect_original_language(MediaItem(name="x")) == "en"

    def test_malformed_item_maps_to_english(self, detector):
        item = MediaItem(name="x", studios=[42])
        assert detector.detect_original_language(item) == "en"

    def test_result_always_supported(self, detector, anime_series, korean_series, english_movie):
        for item in (anime_series, korean_series, english_movie):
            assert detector.detect_original_language(item) in SUPPORTED_LANGUAGES
