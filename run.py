"""Entry point for serving the PetClinic web application.

Starts uvicorn with the application from ``petclinic.app.main``.  Host
and port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``8000``); see ``petclinic.app.core.config``
for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from petclinic.app.core.config import settings
from petclinic.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
