"""
GraphQL API for the chat dataset.

Provides:
- Object types for members, channels and messages with their field resolvers
- Query, mutation and subscription root types
- A FastAPI router serving HTTP requests and WebSocket subscriptions
"""

from chat_api.app.graphql.schema import schema
from chat_api.app.graphql.router import get_graphql_router

__all__ = [
    "schema",
    "get_graphql_router",
]
