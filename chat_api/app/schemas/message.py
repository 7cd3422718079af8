"""
Pydantic schema for channel messages.

Seeded messages carry small integer ids while messages created at
runtime carry generated hex strings, so ``id`` and ``reply_to`` accept
either.  ``author`` is a member name and ``reply_to`` the id of another
message; neither reference is checked when a message is stored.
"""

from typing import Optional, Union

from pydantic import BaseModel

MessageId = Union[int, str]


class MessageRecord(BaseModel):
    """Stored representation of a message."""

    id: MessageId
    content: str
    created_at: str
    author: str
    reply_to: Optional[MessageId] = None
