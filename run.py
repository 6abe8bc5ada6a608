"""Entry point for the Flight Reports API.

Serves ``flight_reports_api.app.main:app`` with Uvicorn.  Host and
port are read from the ``HOST`` and ``PORT`` environment variables;
every other option comes from ``flight_reports_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server


async def run_api() -> None:
    """Start the API server using Uvicorn.

    Host and port are read from environment variables `HOST` and
    `PORT`. Defaults are `0.0.0.0` and `5174`.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "5174"))
    config = Config(
        app="flight_reports_api.app.main:app",
        host=host,
        port=port,
        reload=False,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")
