"""
Request logging and last‑resort error handling.

``log_requests`` is installed as an HTTP middleware and reports slow
or failed requests.  ``global_exception_handler`` logs unexpected
exceptions with their traceback and renders the generic error page.
"""

import logging
import time
from typing import Callable

from fastapi import Request, status

from ..web.templating import templates

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = f"{int(start_time * 1000)}-{id(request)}"

    try:
        response = await call_next(request)
    except Exception as exc:
        process_time = time.time() - start_time
        logger.error(
            "[%s] %s %s - ERROR: %s - %.2fs",
            request_id, request.method, request.url.path, exc, process_time,
        )
        raise

    process_time = time.time() - start_time
    # Only slow requests and errors are worth a log line
    if process_time > SLOW_REQUEST_SECONDS or response.status_code >= 400:
        logger.info(
            "[%s] %s %s - %s - %.2fs",
            request_id, request.method, request.url.path, response.status_code, process_time,
        )
    return response


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception in %s %s: %s", request.method, request.url.path, exc,
        exc_info=exc,
    )
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status.HTTP_500_INTERNAL_SERVER_ERROR, "detail": "Something happened..."},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
