"""
Service layer for members.

Members are read‑only after the store is seeded, so this service only
exposes lookups.  Relation helpers preserve the order of the member
collection rather than the order of the names they are given.
"""

from typing import List, Optional

from chat_api.app.core.store import ChatStore
from chat_api.app.schemas import ChannelRecord, MemberRecord


class MemberService:
    """Lookups over the member collection."""

    def __init__(self, store: ChatStore) -> None:
        self.store = store

    async def list_members(self) -> List[MemberRecord]:
        """Return every member in storage order."""
        return self.store.members

    async def get_member(self, name: str) -> Optional[MemberRecord]:
        """Return the first member whose name equals ``name`` exactly."""
        for member in self.store.members:
            if member.name == name:
                return member
        return None

    async def members_of_channel(self, channel: ChannelRecord) -> List[MemberRecord]:
        """Return the members listed in ``channel``, in member collection order."""
        names = set(channel.members)
        return [member for member in self.store.members if member.name in names]
