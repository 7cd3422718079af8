"""
Pydantic record definitions for the in‑memory data store.

Each entity (members, channels, messages) has its own module.  The
records hold raw stored values such as member and channel names; the
GraphQL layer turns those names into related objects on read.
"""

from .member import MemberRecord
from .channel import ChannelRecord
from .message import MessageRecord, MessageId

__all__ = ["MemberRecord", "ChannelRecord", "MessageRecord", "MessageId"]
