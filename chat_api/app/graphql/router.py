"""
FastAPI router serving the GraphQL schema.

Queries and mutations are accepted over HTTP (``POST``, and ``GET`` for
queries).  Subscriptions are served over a WebSocket on the same path
using either the ``graphql-transport-ws`` or the legacy ``graphql-ws``
protocol.
"""

import logging
from typing import Optional

from strawberry.fastapi import GraphQLRouter
from strawberry.subscriptions import GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL

from chat_api.app.core.broker import MessageBroker
from chat_api.app.core.config import Settings
from chat_api.app.core.store import ChatStore
from chat_api.app.graphql.context import ChatContext
from chat_api.app.graphql.schema import schema

logger = logging.getLogger(__name__)


def get_graphql_router(
    store: ChatStore,
    broker: MessageBroker,
    settings: Settings,
    default_author: Optional[str] = None,
) -> GraphQLRouter:
    """Build a router whose resolvers see ``store`` and ``broker`` through their context.

    ``default_author`` overrides ``settings.default_author`` as the author of
    messages created by ``addMessage``.
    """
    author = default_author or settings.default_author

    async def get_context() -> ChatContext:
        return ChatContext(store=store, broker=broker, default_author=author)

    logger.debug("GraphQL router built (graphiql=%s)", settings.graphiql)
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
        subscription_protocols=(GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL),
    )
