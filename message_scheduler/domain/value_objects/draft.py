from dataclasses import dataclass

from .channel import Channel


@dataclass(frozen=True)
class MessageDraft:
    """Unvalidated input destined to become a Message.

    Date and time arrive as separate form strings (``YYYY-MM-DD`` and
    ``HH:MM``) and are only combined during validation.
    """
    channel: Channel | None
    recipient: str
    body: str
    scheduled_date: str
    scheduled_time: str
    owner_id: str
    subject: str | None = None
