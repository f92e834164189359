"""Logger construction and request/response logging.

The logger is built once at process start by `configure_logging` and
handed to whatever needs it (see `create_app`).
"""

import logging
import time
from typing import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

from .config import Settings

LOGGER_NAME = "wedding_site"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def resolve_level(settings: Settings) -> int:
    if settings.is_debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings) -> logging.Logger:
    """Return the service logger with its level taken from `settings`."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(settings))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def status_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def request_logger(
    logger: logging.Logger,
) -> Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]:
    """Build an HTTP middleware that logs every request with its timing."""

    async def log_requests(request: Request, call_next) -> Response:
        start = time.perf_counter()
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        client = request.client.host if request.client else "-"
        logger.debug("Incoming request %s %s from %s", request.method, path, client)
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.perf_counter() - start) * 1000)
            logger.error("%s %s -> 500 %dms", request.method, path, duration_ms)
            raise
        duration_ms = round((time.perf_counter() - start) * 1000)
        logger.log(
            status_level(response.status_code),
            "%s %s -> %d %dms",
            request.method,
            path,
            response.status_code,
            duration_ms,
        )
        return response

    return log_requests
