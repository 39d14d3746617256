"""API routes for language detection and image selection."""

import time

from fastapi import APIRouter, Request

from preferredimage import __version__
from preferredimage.api.models import (
    DetectRequest,
    DetectResponse,
    HealthResponse,
    ImagePayload,
    SelectRequest,
    SelectResponse,
)
from preferredimage.providers.aggregator import ImageAggregator
from preferredimage.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """Health check endpoint."""
    app_state = request.app.state.preferredimage
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=int(time.time() - app_state.start_time),
    )


@router.post("/detect", response_model=DetectResponse)
async def detect_language(request: Request, payload: DetectRequest):
    """Detect the original language of an item.

    Args:
        request: FastAPI request
        payload: Item metadata

    Returns:
        Detected language code
    """
    orchestrator = request.app.state.preferredimage.orchestrator
    item = payload.item.to_item()

    language = orchestrator.detector.detect_original_language(item)

    return DetectResponse(item=item.name, originalLanguage=language)


@router.post("/select", response_model=SelectResponse)
async def select_images(request: Request, payload: SelectRequest):
    """Select the best image per type for an item.

    Candidates from every source group are gathered concurrently before
    ranking; a failing source contributes nothing.

    Args:
        request: FastAPI request
        payload: Item metadata and candidate images

    Returns:
        Detected languages and the selected images
    """
    app_state = request.app.state.preferredimage
    orchestrator = app_state.orchestrator
    item = payload.item.to_item()

    aggregator = ImageAggregator(
        payload.image_sources(),
        timeout_seconds=app_state.config.providers.source_timeout_seconds,
    )
    images = await aggregator.collect(item)

    logger.info(
        "Selection request received",
        item=item.name,
        candidates=len(images),
        types=[t.value for t in payload.types] if payload.types else None,
    )

    result = orchestrator.select(item, images, payload.types)

    return SelectResponse(
        item=item.name,
        originalLanguage=result.original_language,
        metadataLanguage=result.metadata_language,
        candidates=result.candidates,
        selected=[ImagePayload.from_image(image) for image in result.images],
    )
