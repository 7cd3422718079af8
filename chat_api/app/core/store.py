"""
In‑memory data store.

``ChatStore`` owns the member and channel collections for the lifetime
of the process.  One instance is created by ``create_app`` and handed
to the GraphQL layer through the request context, so resolvers never
reach for module‑level state.  Nothing is persisted: the data is
seeded at start and lost on restart.

The store performs no locking.  All access happens on the event loop
and no service awaits between reading and writing a collection.
"""

from typing import Iterator, List, Optional

from chat_api.app.schemas import ChannelRecord, MemberRecord, MessageRecord


class ChatStore:
    """Owner of the member and channel collections."""

    def __init__(
        self,
        members: Optional[List[MemberRecord]] = None,
        channels: Optional[List[ChannelRecord]] = None,
    ) -> None:
        self.members: List[MemberRecord] = list(members or [])
        self.channels: List[ChannelRecord] = list(channels or [])

    def iter_messages(self) -> Iterator[MessageRecord]:
        """Yield every stored message, channel by channel in collection order."""
        for channel in self.channels:
            if channel.messages:
                yield from channel.messages

    def append_message(self, channel: ChannelRecord, message: MessageRecord) -> None:
        if channel.messages is None:
            channel.messages = [message]
        else:
            channel.messages.append(message)
