"""Photo listing endpoint.

Exposes:
- GET /api/photos: image files in the photo folder, naturally sorted
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..content.photos import list_photos
from ..core.models_io import ErrorResponse, PhotoList

router = APIRouter()

NO_STORE = {"Cache-Control": "no-store"}


@router.get(
    "/api/photos",
    response_model=PhotoList,
    responses={500: {"model": ErrorResponse}},
)
def photos(request: Request):
    """Rescan the photo folder on every call; a missing folder is an empty list."""
    settings = request.app.state.settings
    logger = request.app.state.logger
    try:
        files = list_photos(settings.photo_dir, logger)
    except OSError as e:
        logger.error("Failed to list photos in %s", settings.photo_dir, exc_info=True)
        return JSONResponse(
            ErrorResponse(error=str(e)).model_dump(), status_code=500, headers=NO_STORE
        )

    logger.info("/api/photos -> %d files", len(files))
    return JSONResponse(PhotoList(files=files).model_dump(), headers=NO_STORE)
