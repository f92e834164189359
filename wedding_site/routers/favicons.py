"""Fixed-path icon endpoints.

Browsers and crawlers request these at the site root regardless of the
page's <link> tags. The files are produced ahead of time by
`wedding-favicons` (see `wedding_site.favicons`).
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

from ..core.config import APPLE_TOUCH_ICON, FAVICON_ICO, WEBMANIFEST

router = APIRouter()


def _send(request: Request, name: str, media_type: str) -> FileResponse:
    path: Path = request.app.state.settings.favicon_dir / name
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path, media_type=media_type)


@router.get("/favicon.ico", include_in_schema=False)
def favicon(request: Request):
    return _send(request, FAVICON_ICO, "image/x-icon")


@router.get("/apple-touch-icon.png", include_in_schema=False)
def apple_touch_icon(request: Request):
    return _send(request, APPLE_TOUCH_ICON, "image/png")


@router.get("/site.webmanifest", include_in_schema=False)
def webmanifest(request: Request):
    return _send(request, WEBMANIFEST, "application/manifest+json")
