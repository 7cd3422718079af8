"""
Service layer for channels.

Two lookups exist on purpose.  ``find_channel`` backs the public
``channel(name)`` query and ignores case; ``get_channel`` backs writes
and requires the exact name.
"""

from typing import List, Optional

from chat_api.app.core.store import ChatStore
from chat_api.app.schemas import ChannelRecord, MemberRecord


class ChannelService:
    """Lookups over the channel collection."""

    def __init__(self, store: ChatStore) -> None:
        self.store = store

    async def list_channels(self) -> List[ChannelRecord]:
        """Return every channel in storage order."""
        return self.store.channels

    async def find_channel(self, name: str) -> Optional[ChannelRecord]:
        """Return the first channel whose name matches ``name`` ignoring case."""
        wanted = name.lower()
        for channel in self.store.channels:
            if channel.name.lower() == wanted:
                return channel
        return None

    async def get_channel(self, name: str) -> Optional[ChannelRecord]:
        """Return the channel whose name equals ``name`` exactly, or ``None``."""
        for channel in self.store.channels:
            if channel.name == name:
                return channel
        return None

    async def channels_of_member(self, member: MemberRecord) -> List[ChannelRecord]:
        """Return the channels ``member`` joined, in channel collection order."""
        names = set(member.channels)
        return [channel for channel in self.store.channels if channel.name in names]
