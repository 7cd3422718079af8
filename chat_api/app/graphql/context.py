"""
Request context handed to every resolver.

The context carries the shared store and broker and builds the
services on top of them, so resolvers can write
``info.context.channels.find_channel(...)``.
"""

from strawberry.fastapi import BaseContext

from chat_api.app.core.broker import MessageBroker
from chat_api.app.core.store import ChatStore
from chat_api.app.services import ChannelService, MemberService, MessageService


class ChatContext(BaseContext):
    def __init__(self, store: ChatStore, broker: MessageBroker, default_author: str) -> None:
        super().__init__()
        self.store = store
        self.broker = broker
        self.default_author = default_author

    @property
    def members(self) -> MemberService:
        return MemberService(self.store)

    @property
    def channels(self) -> ChannelService:
        return ChannelService(self.store)

    @property
    def messages(self) -> MessageService:
        return MessageService(self.store, self.broker)
