"""Message DTOs.

Free text is stored as submitted, trimmed only, so an edit that sends the
stored text back leaves it unchanged. Escaping belongs to whatever renders
it. Presence rules are left to the domain validator so that callers
receive its error kinds rather than generic schema errors.
"""

from datetime import datetime

from pydantic import BaseModel, field_validator

from ...config import settings
from ...domain.entities import Message
from ...domain.value_objects import Channel, MessageDraft


class MessageDraftDTO(BaseModel):
    """DTO for creating or editing a message."""

    channel: Channel | None = None
    recipient: str = ""
    subject: str | None = None
    body: str = ""
    scheduled_date: str = ""
    scheduled_time: str = ""

    @field_validator("body", mode="after")
    @classmethod
    def limit_body(cls, v: str) -> str:
        """Security: Cap body size."""
        if len(v) > settings.max_body_length:
            raise ValueError(
                f"Message body cannot exceed {settings.max_body_length} characters"
            )
        return v.strip()

    @field_validator("subject", mode="after")
    @classmethod
    def strip_subject(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None

    def to_draft(self, owner_id: str) -> MessageDraft:
        return MessageDraft(
            channel=self.channel,
            recipient=self.recipient,
            subject=self.subject,
            body=self.body,
            scheduled_date=self.scheduled_date,
            scheduled_time=self.scheduled_time,
            owner_id=owner_id,
        )


class MessageResponseDTO(BaseModel):
    """DTO for message response."""

    id: str
    owner_id: str
    channel: Channel
    recipient: str
    subject: str | None = None
    body: str
    scheduled_for: datetime
    status: str
    created_at: datetime
    sent_at: datetime | None = None
    editable: bool

    @classmethod
    def from_entity(cls, message: Message) -> "MessageResponseDTO":
        return cls(
            id=message.id,
            owner_id=message.owner_id,
            channel=message.channel,
            recipient=message.recipient,
            subject=message.subject,
            body=message.body,
            scheduled_for=message.scheduled_for,
            status=message.status.value,
            created_at=message.created_at,
            sent_at=message.sent_at,
            editable=message.is_editable,
        )
