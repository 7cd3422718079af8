"""Entry point for the Chat GraphQL API.

This script serves the application with Uvicorn.  It is intended to be
executed from the project root.  Host and port come from the ``HOST``
and ``PORT`` environment variables (defaults ``0.0.0.0`` and ``4000``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from chat_api.app.core.config import settings
from chat_api.app.main import app


async def main() -> None:
    """Run the API server until it is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by ``setup_logging``.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
