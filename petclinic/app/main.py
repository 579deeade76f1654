"""
Main entrypoint for the PetClinic web application.

``create_app`` builds and configures the FastAPI application, which is
then instantiated at module import time as ``app`` so that it can be
served directly, e.g.::

    uvicorn petclinic.app.main:app --reload

The title and version come from ``Settings`` in ``core.config``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .core.middleware import global_exception_handler, log_requests
from .web.router import router as web_router
from .web.templating import templates


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render 404s as an HTML page; every other HTTP error keeps FastAPI's default."""
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return await http_exception_handler(request, exc)
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": exc.status_code, "detail": exc.detail},
        status_code=exc.status_code,
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first so that everything below may log.
    The session middleware carries flash messages across redirects.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.app_version, debug=settings.debug)

    app.add_middleware(SessionMiddleware, secret_key=settings.secret_key)

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(web_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()

    return app


app = create_app()
