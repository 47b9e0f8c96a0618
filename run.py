"""Entry point for the Student Records API.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``5000``); the data file location comes from ``DATA_FILE``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_records_api.app.core.config import settings
from student_records_api.app.main import app


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
    logging.getLogger(__name__).info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
