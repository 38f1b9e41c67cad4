from enum import Enum


class Channel(str, Enum):
    """Supported delivery channels."""
    EMAIL = "email"
    CHAT = "chat"

    @classmethod
    def _missing_(cls, value: object) -> "Channel | None":
        # Legacy dashboards stored chat messages as "whatsapp"
        if isinstance(value, str) and value.lower() == "whatsapp":
            return cls.CHAT
        return None

    @property
    def requires_subject(self) -> bool:
        return self is Channel.EMAIL
