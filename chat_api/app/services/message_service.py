"""
Service layer for messages.

Messages are created through ``add_message`` and never updated or
deleted.  A new message gets a generated hex id, the current UTC time
and the configured default author, is appended to its channel and is
then published to the broker for subscribers.

References are not validated.  ``reply_to`` is stored exactly as
given and a dangling reference simply resolves to ``None`` on read.
"""

import logging
import uuid
from typing import Optional

from chat_api.app.core.broker import MessageBroker
from chat_api.app.core.errors import ChannelNotFoundError
from chat_api.app.core.store import ChatStore
from chat_api.app.core.timestamps import utc_now_iso
from chat_api.app.schemas import MessageId, MessageRecord
from chat_api.app.services.channel_service import ChannelService

logger = logging.getLogger(__name__)


class MessageService:
    """Creation and reply lookups for channel messages."""

    def __init__(self, store: ChatStore, broker: Optional[MessageBroker] = None) -> None:
        self.store = store
        self.broker = broker

    async def add_message(
        self,
        channel_name: str,
        content: str,
        author: str,
        reply_to: Optional[MessageId] = None,
    ) -> MessageRecord:
        """Append a new message to the channel named ``channel_name``.

        The channel name must match exactly.  Raises
        ``ChannelNotFoundError`` without touching the store when no
        channel matches.
        """
        channel = await ChannelService(self.store).get_channel(channel_name)
        if channel is None:
            logger.warning("Rejected message for unknown channel %s", channel_name)
            raise ChannelNotFoundError(channel_name)

        message = MessageRecord(
            id=uuid.uuid4().hex,
            content=content,
            created_at=utc_now_iso(),
            author=author,
            reply_to=reply_to,
        )
        self.store.append_message(channel, message)
        logger.info("Added message %s to channel %s", message.id, channel.name)

        if self.broker is not None:
            await self.broker.publish(channel.name, message)
        return message

    async def find_message(self, message_id: Optional[MessageId]) -> Optional[MessageRecord]:
        """Return the first stored message with id ``message_id``.

        Ids are compared in their string form so a reply id received as
        ``"2"`` matches a seeded message with the integer id ``2``.
        """
        # An empty reply id means "not a reply", the same as ``None``.
        if message_id is None or message_id == "":
            return None
        wanted = str(message_id)
        for message in self.store.iter_messages():
            if str(message.id) == wanted:
                return message
        return None
