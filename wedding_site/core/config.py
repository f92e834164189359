"""Service-wide configuration.

Settings come from the environment once at process start. Everything
else on disk (site root, config folder, photos, favicons) is laid out
relative to the site root.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field

# Image types listed by /api/photos (compared lowercase)
ALLOWED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".avif"})

CONFIG_FILENAME = "config.json"
TEMPLATE_FILENAME = "index.html"

# Pre-generated favicon assets
FAVICON_SOURCE = "wedding_bell.svg"
FAVICON_ICO = "wedding_bell_favicon.ico"
APPLE_TOUCH_ICON = "apple_touch_icon_180x180.png"
WEBMANIFEST = "site.webmanifest"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime settings; build with `Settings.from_env()`."""

    site_root: Path = Field(default_factory=Path.cwd)
    host: str = "0.0.0.0"
    port: int = 5500
    log_level: str = "info"
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            site_root=Path(os.environ.get("SITE_ROOT") or Path.cwd()),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT") or 5500),
            log_level=(os.environ.get("LOG_LEVEL") or "info").lower(),
            debug=os.environ.get("DEBUG", "").lower() in _TRUTHY,
        )

    @property
    def is_debug(self) -> bool:
        return self.debug or self.log_level.lower() in ("debug", "trace")

    @property
    def config_dir(self) -> Path:
        return self.site_root / "config"

    @property
    def photo_dir(self) -> Path:
        return self.config_dir / "photos"

    @property
    def favicon_dir(self) -> Path:
        return self.site_root / "favicon"

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    @property
    def template_file(self) -> Path:
        return self.site_root / TEMPLATE_FILENAME
