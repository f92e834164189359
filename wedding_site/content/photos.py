"""Live listing of the photo folder.

The filesystem is the only source of truth: every call rescans the
directory, nothing is cached.
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Tuple, Union

from ..core.config import ALLOWED_EXTENSIONS

_DIGITS = re.compile(r"(\d+)")


def natural_key(name: str) -> Tuple[Tuple[Union[str, int], ...], str]:
    """
    Sort key comparing digit runs by value ("img2" < "img10").

    Text runs compare case-insensitively; the raw name breaks ties.
    """
    parts = _DIGITS.split(name)
    # split() keeps captured digit runs at odd indexes
    key = tuple(int(part) if i % 2 else part.casefold() for i, part in enumerate(parts))
    return key, name


def is_allowed(name: str) -> bool:
    return os.path.splitext(name)[1].lower() in ALLOWED_EXTENSIONS


def list_photos(directory: Path, logger: logging.Logger) -> List[str]:
    """
    List image file names in `directory`, naturally sorted.

    A missing directory means "no photos yet" and yields an empty list.
    Any other filesystem error propagates to the caller.
    """
    logger.debug(
        "Listing photos from %s, allowed extensions: %s",
        directory,
        ",".join(sorted(ALLOWED_EXTENSIONS)),
    )
    try:
        with os.scandir(directory) as entries:
            files = [e.name for e in entries if is_allowed(e.name) and e.is_file()]
    except (FileNotFoundError, NotADirectoryError):
        logger.warning("Photos directory not found at %s; returning empty list", directory)
        return []

    files.sort(key=natural_key)
    logger.debug("Found %d photos in %s", len(files), directory)
    return files
