"""Link-preview metadata for the home page.

Crawlers that build link previews do not run client-side scripts, so
the title and description have to be in the served HTML. The template
is small and trusted, so the rewrite is a handful of targeted regular
expressions rather than an HTML parser: the template must contain a
well-formed <head> and <title>.
"""

import re
from typing import Any, Dict, Iterable, Optional

from ..core.models_io import MetaRecord

DEFAULT_TITLE = "Wedding"
DEFAULT_DESCRIPTION = "Join us to celebrate our wedding."
DESCRIPTION_LIMIT = 140

# (attribute, key) for each preview tag, in insertion order
PREVIEW_TAGS = (
    ("property", "og:title"),
    ("property", "og:description"),
    ("name", "twitter:title"),
    ("name", "twitter:description"),
)

_TITLE_RE = re.compile(r"<title\b[^>]*>.*?</title\s*>", re.IGNORECASE | re.DOTALL)
_HEAD_RE = re.compile(r"<head\b[^>]*>", re.IGNORECASE)


def _meta_re(key: str, attributes: str = "name|property") -> "re.Pattern[str]":
    # attribute must start its own name (not data-name=); the value may be unquoted
    return re.compile(
        r"<meta\b[^>]*?(?<![\w-])(?:%s)\s*=\s*([\"']?)%s\1(?=[\s>/])[^>]*>"
        % (attributes, re.escape(key)),
        re.IGNORECASE,
    )


_DESCRIPTION_RE = _meta_re("description", "name")


def escape_html(value: str) -> str:
    """Escape the characters that could break out of text or a quoted attribute."""
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _first(values: Iterable[Any]) -> Optional[str]:
    for value in values:
        text = _text(value)
        if text:
            return text
    return None


def derive_meta(config: Dict[str, Any]) -> MetaRecord:
    """
    Pick the page title and description from the event config.

    Title: ui.title, title, coupleNames, then "Wedding".
    Description: the start of the story, else "date • location", else a
    fixed sentence.
    """
    ui = config.get("ui")
    ui_title = ui.get("title") if isinstance(ui, dict) else None
    title = _first([ui_title, config.get("title"), config.get("coupleNames")]) or DEFAULT_TITLE

    story = _text(config.get("story"))
    if story:
        description = story[:DESCRIPTION_LIMIT]
    else:
        parts = [_text(config.get("dateDisplay")), _text(config.get("locationShort"))]
        description = " • ".join(p for p in parts if p) or DEFAULT_DESCRIPTION

    return MetaRecord(title=title, description=description)


def inject_meta(html: str, meta: MetaRecord) -> str:
    """Return `html` with its title, description and preview tags set from `meta`."""
    title = escape_html(meta.title)
    description = escape_html(meta.description)
    description_tag = f'<meta name="description" content="{description}">'

    if _TITLE_RE.search(html):
        html = _TITLE_RE.sub(lambda _: f"<title>{title}</title>", html, count=1)
        if _DESCRIPTION_RE.search(html):
            html = _DESCRIPTION_RE.sub(lambda _: description_tag, html, count=1)
        else:
            end = _TITLE_RE.search(html).end()
            html = html[:end] + "\n" + description_tag + html[end:]

    values = {"title": title, "description": description}
    missing = [
        f'<meta {attr}="{key}" content="{values[key.split(":")[1]]}">'
        for attr, key in PREVIEW_TAGS
        if not _meta_re(key).search(html)
    ]
    head = _HEAD_RE.search(html)
    if missing and head:
        html = html[: head.end()] + "\n" + "\n".join(missing) + html[head.end():]
    return html
