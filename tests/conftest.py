"""Shared pytest fixtures for preferredimage tests."""

import pytest

from preferredimage.config import Config, LoggingConfig
from preferredimage.models.image import ImageType, RemoteImage
from preferredimage.models.item import ItemKind, MediaItem


@pytest.fixture
def default_config():
    """Create a default configuration for testing."""
    return Config(logging=LoggingConfig(format="text", level="critical"))


@pytest.fixture
def anime_series():
    """Japanese anime series identified by its studio."""
    return MediaItem(
        name="Attack on Titan",
        kind=ItemKind.SERIES,
        studios=["MAPPA", "Wit Studio"],
        genres=["Animation", "Action"],
        production_locations=["Japan"],
        original_title="進撃の巨人",
    )


@pytest.fixture
def korean_series():
    """Korean drama identified by production location only."""
    return MediaItem(
        name="Squid Game",
        kind=ItemKind.SERIES,
        production_locations=["South Korea"],
    )


@pytest.fixture
def english_movie():
    """Movie with no regional hints at all."""
    return MediaItem(name="The Office Movie", kind=ItemKind.MOVIE)


@pytest.fixture
def sample_posters():
    """Posters in several languages for a Japanese title."""
    return [
        RemoteImage(
            type=ImageType.PRIMARY,
            url="https://img.example/en.jpg",
            provider_name="TheMovieDb",
            language="en",
            vote_count=50,
            width=2000,
            height=3000,
        ),
        RemoteImage(
            type=ImageType.PRIMARY,
            url="https://img.example/ja.jpg",
            provider_name="TheMovieDb",
            language="ja",
            vote_count=5,
            width=1000,
            height=1500,
        ),
        RemoteImage(
            type=ImageType.PRIMARY,
            url="https://img.example/fr.jpg",
            provider_name="Fanart",
            language="fr",
            vote_count=80,
            width=2000,
            height=3000,
        ),
    ]


@pytest.fixture
def mixed_candidates(sample_posters):
    """Candidates of every type except thumbs."""
    return sample_posters + [
        RemoteImage(type=ImageType.LOGO, language="en", vote_count=3, width=800, height=310),
        RemoteImage(type=ImageType.LOGO, language="ja", vote_count=1, width=400, height=155),
        RemoteImage(type=ImageType.BACKDROP, language=None, vote_count=12, width=3840, height=2160),
        RemoteImage(type=ImageType.BACKDROP, language="ko", vote_count=40, width=1920, height=1080),
    ]
