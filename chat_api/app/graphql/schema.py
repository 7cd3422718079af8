"""
Root GraphQL types and the executable schema.

Queries only read the store.  ``addMessage`` is the single write and
``messageAdded`` streams the messages it creates to subscribers.
"""

from typing import AsyncGenerator, List, Optional

import strawberry
from strawberry.types import Info

from chat_api.app.graphql.types import Channel, Member, Message


@strawberry.type
class Query:
    @strawberry.field(description="Every member, in storage order.")
    async def all_members(self, info: Info) -> Optional[List[Member]]:
        return await info.context.members.list_members()

    @strawberry.field(description="Every channel, in storage order.")
    async def all_channels(self, info: Info) -> Optional[List[Channel]]:
        return await info.context.channels.list_channels()

    @strawberry.field(description="Look up a channel by name, ignoring case.")
    async def channel(self, info: Info, name: str) -> Optional[Channel]:
        return await info.context.channels.find_channel(name)


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Post a message to the channel with exactly this name.")
    async def add_message(
        self,
        info: Info,
        channel_name: str,
        content: str,
        reply_to: Optional[str] = None,
    ) -> Optional[Message]:
        context = info.context
        return await context.messages.add_message(
            channel_name,
            content,
            author=context.default_author,
            reply_to=reply_to,
        )


@strawberry.type
class Subscription:
    @strawberry.subscription(description="Messages created after subscribing, optionally for one channel.")
    async def message_added(
        self,
        info: Info,
        channel_name: Optional[str] = None,
    ) -> AsyncGenerator[Message, None]:
        wanted = channel_name.lower() if channel_name else None
        async for event in info.context.broker.subscribe():
            if wanted is None or event.channel_name.lower() == wanted:
                yield event.message


schema = strawberry.Schema(query=Query, mutation=Mutation, subscription=Subscription)
