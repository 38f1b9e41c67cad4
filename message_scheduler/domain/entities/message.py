from dataclasses import dataclass
from datetime import datetime

from ..value_objects import Channel, MessageStatus


@dataclass
class Message:
    """Scheduled message aggregate root.

    Instances are produced by ``validate_and_build``; constructing one
    directly skips draft validation and is meant for repositories and
    fixtures.
    """

    id: str
    owner_id: str
    channel: Channel
    recipient: str
    body: str
    scheduled_for: datetime
    created_at: datetime
    subject: str | None = None
    status: MessageStatus = MessageStatus.PENDING
    sent_at: datetime | None = None

    @property
    def is_editable(self) -> bool:
        """Only messages still waiting for delivery may be edited."""
        return self.status == MessageStatus.PENDING

    @property
    def is_consistent(self) -> bool:
        """Whether ``sent_at`` agrees with ``status``.

        Delivery bookkeeping is owned by an external subsystem, so this is
        reported rather than enforced.
        """
        return self.sent_at is None or self.status != MessageStatus.PENDING
