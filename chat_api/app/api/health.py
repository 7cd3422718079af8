"""
Health endpoint.

Returns a static payload together with the size of the in‑memory
dataset so that a load balancer or a developer can check that the
process is up and seeded.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_health(request: Request) -> Dict[str, Any]:
    """Report liveness and the number of stored members, channels and messages."""
    store = request.app.state.store
    return {
        "status": "ok",
        "members": len(store.members),
        "channels": len(store.channels),
        "messages": sum(1 for _ in store.iter_messages()),
    }
