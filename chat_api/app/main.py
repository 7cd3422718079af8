"""
Main entrypoint for the Chat GraphQL API.

This module assembles the FastAPI application, sets up logging, seeds
the in‑memory store and mounts the GraphQL router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn chat_api.app.main:app --port 4000

or simply ``python run.py``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api import health
from .core.broker import MessageBroker
from .core.config import settings
from .core.errors import UnknownAuthorError
from .core.logging_config import setup_logging
from .core.seed import create_seeded_store
from .core.store import ChatStore
from .graphql.router import get_graphql_router


def create_app(
    store: Optional[ChatStore] = None,
    broker: Optional[MessageBroker] = None,
    default_author: Optional[str] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ChatStore]
        Data store served by the application.  A freshly seeded store is
        created when omitted, so every call starts from the seed data.
    broker : Optional[MessageBroker]
        Broker feeding ``messageAdded`` subscriptions.  A new one is
        created when omitted.
    default_author : Optional[str]
        Member recorded as the author of messages created through
        ``addMessage``.  Defaults to ``settings.default_author``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    UnknownAuthorError
        If the default author is not a member of the store.  Messages by
        a non‑member would fail to resolve their non‑null ``author``.
    """
    # Initialise logging before anything else so that the setup below can
    # log messages.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    store = store if store is not None else create_seeded_store()
    broker = broker if broker is not None else MessageBroker()
    author = default_author or settings.default_author
    if not any(member.name == author for member in store.members):
        raise UnknownAuthorError(author)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store
    app.state.broker = broker

    app.include_router(get_graphql_router(store, broker, settings, default_author=author), prefix=settings.graphql_path)
    app.include_router(health.router, prefix="/health", tags=["health"])

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Server ready at http://localhost:%s%s", settings.port, settings.graphql_path)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        # Ends open subscription streams so their WebSocket handlers can
        # finish while uvicorn drains connections.
        await broker.aclose()
        logger.info("Message broker closed")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
