"""Entry point for the Service Catalog API.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``); see ``service_catalog_api/app/core/config.py`` for the
remaining settings, including ``STORE_BACKEND`` and the MongoDB
connection.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from service_catalog_api.app.core.config import BASE_PATH, settings
from service_catalog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Server running at http://localhost:%s%s", settings.port, BASE_PATH
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
