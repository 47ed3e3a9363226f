"""Entry point for the workshop API server.

Builds the FastAPI application and serves it with Uvicorn.  Host and
port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``3000``), read once when the settings
module is imported.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from talleres_api.app.core.config import settings
from talleres_api.app.main import create_app


async def main() -> None:
    """Start the API using Uvicorn."""
    app = create_app(settings)
    logger = logging.getLogger(__name__)
    logger.info("Servidor corriendo en http://localhost:%s", settings.port)
    logger.info("API disponible en http://localhost:%s/api", settings.port)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
