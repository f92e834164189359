"""Home page endpoint.

Exposes:
- GET /, GET /index.html: the site template with title, description and
  preview tags taken from the event config
"""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse

from ..content.meta import derive_meta, inject_meta
from ..content.site_config import load_site_config

router = APIRouter()

NO_STORE = {"Cache-Control": "no-store"}


@router.get("/", include_in_schema=False)
@router.get("/index.html", include_in_schema=False)
def home(request: Request):
    """Render the home page; falls back to the raw template on any failure."""
    settings = request.app.state.settings
    logger = request.app.state.logger
    template = settings.template_file
    try:
        config = load_site_config(settings.config_file, logger)
        html = template.read_text(encoding="utf-8")
        meta = derive_meta(config)
        logger.debug("Injecting meta title=%r description=%r", meta.title, meta.description)
        return HTMLResponse(inject_meta(html, meta), headers=NO_STORE)
    except Exception:
        logger.exception("Failed to render home page; serving raw template")

    if not template.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(template, media_type="text/html", headers=NO_STORE)
