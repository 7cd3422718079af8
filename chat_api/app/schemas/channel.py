"""
Pydantic schema for chat channels.

Channels are identified by ``name``; lookups from queries compare names
case‑insensitively.  ``members`` holds member names.  ``messages`` is
``None`` until the first message is posted, after which it grows in
posting order.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .message import MessageRecord


class ChannelRecord(BaseModel):
    """Stored representation of a channel."""

    id: str = Field("", description="Stable identifier; defaults to the channel name")
    name: str
    full_name: str
    type: str = Field(..., description="Free‑form category label, e.g. 'Battleroyale'")
    members: List[str] = Field(default_factory=list)
    messages: Optional[List[MessageRecord]] = None

    @model_validator(mode="after")
    def default_id(self) -> "ChannelRecord":
        if not self.id:
            self.id = self.name
        return self
