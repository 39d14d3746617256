"""Data models for media items and candidate images."""

from preferredimage.models.image import DEFAULT_IMAGE_TYPES, ImageType, RemoteImage
from preferredimage.models.item import ItemKind, MediaItem

__all__ = [
    "DEFAULT_IMAGE_TYPES",
    "ImageType",
    "ItemKind",
    "MediaItem",
    "RemoteImage",
]
