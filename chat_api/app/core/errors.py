"""Domain errors raised by the service layer.

Resolvers let these propagate; the GraphQL layer reports them as
entries of the ``errors`` list in the response envelope.
"""


class ChatError(Exception):
    """Base class for errors raised by the chat services."""


class ChannelNotFoundError(ChatError):
    """Raised when a write targets a channel that does not exist."""

    def __init__(self, channel_name: str) -> None:
        super().__init__(f"Channel {channel_name} not found")
        self.channel_name = channel_name


class UnknownAuthorError(ChatError):
    """Raised at startup when the configured default author is not a member."""

    def __init__(self, author: str) -> None:
        super().__init__(f"Default author {author} is not a member")
        self.author = author
