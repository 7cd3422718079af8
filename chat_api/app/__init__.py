"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
The data records live in ``schemas``, the in‑memory store and other
process‑wide plumbing in ``core``, lookup and write logic in
``services`` and the GraphQL schema, resolvers and transport in
``graphql``.
"""

from .main import app, create_app  # noqa: F401
