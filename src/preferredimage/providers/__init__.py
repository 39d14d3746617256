"""Image sources and the aggregating preferred-image provider."""

from preferredimage.providers.aggregator import ImageAggregator
from preferredimage.providers.base import ImageSource
from preferredimage.providers.preferred import PreferredImageProvider
from preferredimage.providers.static import StaticImageSource

__all__ = [
    "ImageAggregator",
    "ImageSource",
    "PreferredImageProvider",
    "StaticImageSource",
]
