"""Best-effort reader for the site's JSON config.

The home page must always render, so a missing or broken config file
is logged and read as an empty document.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict


def load_site_config(path: Path, logger: logging.Logger) -> Dict[str, Any]:
    """
    Read the event config fresh from disk.

    Args:
        path: JSON file describing the event (title, date, location, story...)
        logger: service logger

    Returns:
        The parsed document, or an empty dict if it is missing or invalid
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("Config file not found at %s; using defaults", path)
        return {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Could not read config %s (%s); using defaults", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object; using defaults", path)
        return {}
    return data
