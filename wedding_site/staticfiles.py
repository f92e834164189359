"""Static file serving for the site mounts.

Starlette's StaticFiles already sends ETag/Last-Modified headers and
answers conditional requests with 304. The site root also links pages
without their extension (`/rsvp` for `rsvp.html`), so with
`html_extensions` a miss on an extension-less path is retried with
`.html` appended.
"""

import os
from typing import Any, Optional, Tuple

from starlette.staticfiles import StaticFiles


class SiteStaticFiles(StaticFiles):
    """StaticFiles with optional `.html` extension resolution."""

    def __init__(self, *, html_extensions: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.html_extensions = html_extensions

    def lookup_path(self, path: str) -> Tuple[str, Optional[os.stat_result]]:
        full_path, stat_result = super().lookup_path(path)
        if (
            stat_result is None
            and self.html_extensions
            and path
            and not os.path.splitext(path)[1]
        ):
            return super().lookup_path(path.rstrip("/") + ".html")
        return full_path, stat_result
