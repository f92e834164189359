"""Pydantic response schemas and shared value types.

The response shapes are what the site's client script expects from
`/api/photos`, so keep field names stable.
"""

from typing import List, NamedTuple

from pydantic import BaseModel


class PhotoList(BaseModel):
    """Photo file names under /photos, naturally sorted."""
    files: List[str]


class ErrorResponse(BaseModel):
    error: str


class MetaRecord(NamedTuple):
    """Title/description pair used for the page head and link previews."""
    title: str
    description: str
