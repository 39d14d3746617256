"""Pydantic models for API requests and responses."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from preferredimage.models.image import ImageType, RemoteImage
from preferredimage.models.item import ItemKind, MediaItem
from preferredimage.providers.static import StaticImageSource

# Source name given to candidates sent without a source group
REQUEST_SOURCE_NAME = "request"


class SeriesPayload(BaseModel):
    """Parent series metadata of a season."""

    name: str
    studios: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    productionLocations: List[str] = Field(default_factory=list)
    originalTitle: Optional[str] = None
    preferredMetadataLanguage: Optional[str] = None

    def to_item(self) -> MediaItem:
        """Convert to a series MediaItem."""
        return MediaItem(
            name=self.name,
            kind=ItemKind.SERIES,
            studios=list(self.studios),
            tags=list(self.tags),
            genres=list(self.genres),
            production_locations=list(self.productionLocations),
            original_title=self.originalTitle,
            preferred_metadata_language=self.preferredMetadataLanguage,
        )


class ItemPayload(BaseModel):
    """Media item metadata as sent by the host application."""

    name: str
    kind: ItemKind = ItemKind.OTHER
    studios: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    productionLocations: List[str] = Field(default_factory=list)
    originalTitle: Optional[str] = None
    preferredMetadataLanguage: Optional[str] = None
    series: Optional[SeriesPayload] = None

    def to_item(self) -> MediaItem:
        """Convert to a MediaItem."""
        return MediaItem(
            name=self.name,
            kind=self.kind,
            studios=list(self.studios),
            tags=list(self.tags),
            genres=list(self.genres),
            production_locations=list(self.productionLocations),
            original_title=self.originalTitle,
            preferred_metadata_language=self.preferredMetadataLanguage,
            series=self.series.to_item() if self.series else None,
        )


class ImagePayload(BaseModel):
    """Candidate image as returned by an upstream source."""

    type: ImageType
    url: Optional[str] = None
    providerName: Optional[str] = None
    thumbnailUrl: Optional[str] = None
    language: Optional[str] = None
    voteCount: Optional[int] = Field(default=None, ge=0)
    communityRating: Optional[float] = None
    width: Optional[int] = Field(default=None, ge=0)
    height: Optional[int] = Field(default=None, ge=0)

    def to_image(self) -> RemoteImage:
        """Convert to a RemoteImage."""
        return RemoteImage(
            type=self.type,
            url=self.url,
            provider_name=self.providerName,
            thumbnail_url=self.thumbnailUrl,
            language=self.language,
            vote_count=self.voteCount,
            community_rating=self.communityRating,
            width=self.width,
            height=self.height,
        )

    @classmethod
    def from_image(cls, image: RemoteImage) -> "ImagePayload":
        """Build from a RemoteImage."""
        return cls(
            type=image.type,
            url=image.url,
            providerName=image.provider_name,
            thumbnailUrl=image.thumbnail_url,
            language=image.language,
            voteCount=image.vote_count,
            communityRating=image.community_rating,
            width=image.width,
            height=image.height,
        )


class DetectRequest(BaseModel):
    """Language detection request."""

    item: ItemPayload


class DetectResponse(BaseModel):
    """Language detection response."""

    item: str
    originalLanguage: str


class SelectRequest(BaseModel):
    """Image selection request."""

    item: ItemPayload
    images: List[ImagePayload] = Field(default_factory=list)
    sources: Dict[str, List[ImagePayload]] = Field(
        default_factory=dict, description="Candidates grouped by upstream source"
    )
    types: Optional[List[ImageType]] = Field(
        default=None, description="Image types to select (configured types if omitted)"
    )

    def image_sources(self) -> List[StaticImageSource]:
        """One static source per named group, plus the ungrouped images."""
        sources = [
            StaticImageSource(name, [image.to_image() for image in images])
            for name, images in self.sources.items()
        ]
        if self.images:
            sources.append(
                StaticImageSource(REQUEST_SOURCE_NAME, [image.to_image() for image in self.images])
            )
        return sources


class SelectResponse(BaseModel):
    """Image selection response."""

    item: str
    originalLanguage: str
    metadataLanguage: str
    candidates: int
    selected: List[ImagePayload]


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy"]
    version: str
    uptime_seconds: int
