from .channel import Channel
from .draft import MessageDraft
from .filters import ChannelFilter, StatusFilter
from .stats import MessageStats, UserStats
from .status import MessageStatus

__all__ = [
    "Channel",
    "ChannelFilter",
    "MessageDraft",
    "MessageStats",
    "MessageStatus",
    "StatusFilter",
    "UserStats",
]
