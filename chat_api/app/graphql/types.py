"""
GraphQL object types and their field resolvers.

Resolvers receive the stored pydantic record as parent and compute
related objects on read: channel membership, message authors and
replies are looked up by name or id every time they are requested.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from chat_api.app.schemas import ChannelRecord, MemberRecord, MessageRecord


async def resolve_member_channels(root: strawberry.Parent[MemberRecord], info: Info) -> Optional[List["Channel"]]:
    return await info.context.channels.channels_of_member(root)


async def resolve_channel_members(root: strawberry.Parent[ChannelRecord], info: Info) -> List["Member"]:
    return await info.context.members.members_of_channel(root)


def resolve_members_count(root: strawberry.Parent[ChannelRecord]) -> int:
    return len(root.members)


async def resolve_message_author(root: strawberry.Parent[MessageRecord], info: Info) -> "Member":
    # An unknown author yields None; GraphQL reports a field error and nulls the
    # nearest nullable parent.
    return await info.context.members.get_member(root.author)


async def resolve_message_reply_to(root: strawberry.Parent[MessageRecord], info: Info) -> Optional["Message"]:
    return await info.context.messages.find_message(root.reply_to)


@strawberry.type(description="A chat participant, identified by name.")
class Member:
    id: strawberry.ID
    name: str
    channels: Optional[List["Channel"]] = strawberry.field(resolver=resolve_member_channels)


@strawberry.type(description="A named chat room with members and messages.")
class Channel:
    id: strawberry.ID
    name: str
    full_name: str
    type: str
    messages: Optional[List["Message"]]
    members: List[Member] = strawberry.field(resolver=resolve_channel_members)
    members_count: int = strawberry.field(resolver=resolve_members_count)


@strawberry.type(description="A message posted to a channel, optionally replying to another one.")
class Message:
    id: strawberry.ID
    content: str
    created_at: str
    author: Member = strawberry.field(resolver=resolve_message_author)
    reply_to: Optional["Message"] = strawberry.field(resolver=resolve_message_reply_to)
