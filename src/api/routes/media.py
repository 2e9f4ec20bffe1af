"""Media upload and management routes."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from api.routes.auth import verify_token
from core.dependencies import MediaManagerDep, MediaStorageDep, UploadValidatorDep
from core.exceptions import MissingFileError
from models.media import MediaModel
from schemas.common import MessageResponse
from schemas.media import MediaInfo, MediaListResponse, MediaResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/media", tags=["Media"])


def _media_to_info(media: MediaModel) -> MediaInfo:
    return MediaInfo(
        id=media.id,
        filename=media.filename,
        original_name=media.original_name,
        mime_type=media.mime_type,
        size=media.size,
        url=media.url,
        uploaded_at=media.uploaded_at,
        created_at=media.created_at,
        updated_at=media.updated_at,
    )


@router.get("", response_model=MediaListResponse, summary="List uploaded images")
def list_images(
    media_manager: MediaManagerDep,
    claims: Dict[str, Any] = Depends(verify_token),
) -> MediaListResponse:
    images = media_manager.list_media()
    return MediaListResponse(
        count=len(images), data=[_media_to_info(m) for m in images]
    )


@router.get("/{media_id}", response_model=MediaResponse, summary="Get an uploaded image")
def get_image(
    media_id: int,
    media_manager: MediaManagerDep,
    claims: Dict[str, Any] = Depends(verify_token),
) -> MediaResponse:
    return MediaResponse(data=_media_to_info(media_manager.get_media(media_id)))


@router.post(
    "/upload",
    response_model=MediaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload an image",
)
async def upload_image(
    media_manager: MediaManagerDep,
    validator: UploadValidatorDep,
    storage: MediaStorageDep,
    image: Optional[UploadFile] = File(default=None, description="Image file"),
    claims: Dict[str, Any] = Depends(verify_token),
) -> MediaResponse:
    """Validate an image, store it and create its media record.

    If the record cannot be created the stored file is removed again before
    the error propagates.
    """
    if image is None or not image.filename:
        raise MissingFileError()

    # Reject on the spooled size before anything is read into memory
    if image.size is not None:
        validator.validate(image.content_type, image.size)

    # Reading max_size bytes is enough to tell whether the ceiling is reached
    content = await image.read(validator.max_size)
    validator.validate(image.content_type, len(content))

    filename = await run_in_threadpool(storage.save, content, image.filename)
    try:
        media = await run_in_threadpool(
            media_manager.create_media,
            filename=filename,
            original_name=image.filename,
            mime_type=image.content_type,
            size=len(content),
            url=storage.url_for(filename),
        )
    except Exception:
        logger.exception("Failed to record upload %s, removing stored file", filename)
        await run_in_threadpool(storage.remove, filename)
        raise

    logger.info(
        "Image uploaded by %s: %s (%d bytes)",
        claims.get("username"),
        filename,
        media.size,
    )
    return MediaResponse(message="Image uploaded successfully", data=_media_to_info(media))


@router.delete("/{media_id}", response_model=MessageResponse, summary="Delete an image")
def delete_image(
    media_id: int,
    media_manager: MediaManagerDep,
    claims: Dict[str, Any] = Depends(verify_token),
) -> MessageResponse:
    """Delete an image unless a project still uses it.

    Raises:
        MediaNotFoundError: If the image does not exist.
        MediaInUseError: If project images still reference its URL.
    """
    media_manager.delete_media(media_id)
    return MessageResponse(message="Image deleted successfully")
