"""App factory and ASGI entrypoint for the wedding site.

- Builds the service logger once and shares it through `app.state`
- Logs every request with status and timing
- Registers the home page, photo listing and favicon routes
- Mounts the static directories (config, photos, favicons, site root)
"""

import platform
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .core.config import Settings
from .core.log import configure_logging, request_logger
from .routers import favicons, home, photos
from .staticfiles import SiteStaticFiles


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logger = configure_logging(settings)

    app = FastAPI(
        title="Wedding Site",
        version=__version__,
        description="Event site with live photo listing and link-preview metadata",
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.logger = logger

    app.middleware("http")(request_logger(logger))

    # Routes take precedence over the static mounts below
    app.include_router(home.router)
    app.include_router(photos.router)
    app.include_router(favicons.router)

    # Directories may not exist yet (no photos uploaded, favicons not generated)
    app.mount("/config", SiteStaticFiles(directory=settings.config_dir, check_dir=False), name="config")
    app.mount("/photos", SiteStaticFiles(directory=settings.photo_dir, check_dir=False), name="photos")
    app.mount("/favicon", SiteStaticFiles(directory=settings.favicon_dir, check_dir=False), name="favicon")
    app.mount("/", SiteStaticFiles(
        directory=settings.site_root, html=True, html_extensions=True, check_dir=False
    ), name="site")

    @app.on_event("startup")
    def _startup_log():
        logger.info("Wedding site running at http://localhost:%d", settings.port)
        logger.info(
            "Environment python=%s platform=%s arch=%s logLevel=%s",
            platform.python_version(),
            platform.system().lower(),
            platform.machine(),
            settings.log_level,
        )
        logger.info(
            "Paths root=%s config=%s photos=%s favicon=%s",
            settings.site_root,
            settings.config_dir,
            settings.photo_dir,
            settings.favicon_dir,
        )

    return app


def main() -> None:
    """Run the server until killed (`wedding-site` console script)."""
    import uvicorn

    # Serve the module-level app rather than building a second one
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="warning")


# ASGI entrypoint (uvicorn: `uvicorn wedding_site.main:app`)
app = create_app()


if __name__ == "__main__":
    main()
