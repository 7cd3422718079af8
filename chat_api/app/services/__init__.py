"""
Service layer abstraction.

Each service encapsulates the lookup and write logic for a domain and
works against a ``ChatStore`` passed in at construction time.  The
GraphQL resolvers only talk to services, never to the store directly.
"""

from .member_service import MemberService
from .channel_service import ChannelService
from .message_service import MessageService

__all__ = ["MemberService", "ChannelService", "MessageService"]
