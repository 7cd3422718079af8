"""
In‑process fan‑out of newly created messages.

Single‑process only.  Every subscriber owns an ``asyncio.Queue``;
``publish`` drops the event into each queue and ``subscribe`` yields
events from its own queue until the broker is closed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, NamedTuple, Set

from chat_api.app.schemas import MessageRecord

logger = logging.getLogger(__name__)


class MessageEvent(NamedTuple):
    channel_name: str
    message: MessageRecord


_CLOSED = object()


class MessageBroker:
    def __init__(self) -> None:
        self._queues: Set[asyncio.Queue] = set()
        self._closed = False

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)

    @property
    def closed(self) -> bool:
        return self._closed

    async def publish(self, channel_name: str, message: MessageRecord) -> None:
        """Deliver a message event to every current subscriber.

        Publishing with no subscribers, or after ``aclose``, does nothing.
        """
        if self._closed:
            return
        event = MessageEvent(channel_name, message)
        for queue in list(self._queues):
            queue.put_nowait(event)
        logger.debug("Published message %s to %d subscriber(s)", message.id, len(self._queues))

    async def subscribe(self) -> AsyncIterator[MessageEvent]:
        """Yield message events published after the call starts iterating."""
        if self._closed:
            return
        queue: asyncio.Queue = asyncio.Queue()
        self._queues.add(queue)
        try:
            while True:
                event = await queue.get()
                if event is _CLOSED:
                    return
                yield event
        finally:
            self._queues.discard(queue)

    async def aclose(self) -> None:
        """End every open subscription and refuse new ones."""
        self._closed = True
        for queue in list(self._queues):
            queue.put_nowait(_CLOSED)
