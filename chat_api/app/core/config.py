"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
reproduce the behaviour of a plain local run: the server listens on
port 4000 and serves GraphQL under ``/graphql``.
"""

import os
from dataclasses import dataclass


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Chat GraphQL API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _as_bool(os.getenv("DEBUG", "false"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Path of the GraphQL endpoint.  Both HTTP requests and WebSocket
    # subscriptions are served here.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")

    # Serve the GraphiQL explorer on GET requests from a browser.
    graphiql: bool = _as_bool(os.getenv("GRAPHIQL", "true"))

    # Member name recorded as the author of every message created through
    # ``addMessage``.  Requests carry no identity, so the author is fixed
    # per deployment.
    default_author: str = os.getenv("DEFAULT_AUTHOR", "Ammiel Yawson")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
