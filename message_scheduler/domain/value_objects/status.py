from enum import Enum


class MessageStatus(str, Enum):
    """Lifecycle stage of a scheduled message."""
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"
