from enum import Enum

from .channel import Channel
from .status import MessageStatus


class StatusFilter(str, Enum):
    """Status selection for message listings."""
    ALL = "all"
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"

    def matches(self, status: MessageStatus) -> bool:
        return self is StatusFilter.ALL or self.value == status.value


class ChannelFilter(str, Enum):
    """Channel selection for message listings."""
    ALL = "all"
    EMAIL = "email"
    CHAT = "chat"

    @classmethod
    def _missing_(cls, value: object) -> "ChannelFilter | None":
        if isinstance(value, str) and value.lower() == "whatsapp":
            return cls.CHAT
        return None

    def matches(self, channel: Channel) -> bool:
        return self is ChannelFilter.ALL or self.value == channel.value
