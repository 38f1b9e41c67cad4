from dataclasses import replace
from datetime import date, datetime, time
from uuid import uuid4

from ..entities import Message
from ..errors import (
    MessageValidationError,
    MissingFieldError,
    MissingSubjectForEmailError,
    PastScheduleError,
)
from ..value_objects import Channel, MessageDraft, MessageStatus

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _parse_date(value: str) -> date | None:
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def _parse_time(value: str) -> time | None:
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    return None


def parse_channel(value: object) -> Channel | MissingFieldError:
    """Resolve a channel name, reporting blank or unknown values."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return MissingFieldError("channel")
    try:
        return Channel(value.strip() if isinstance(value, str) else value)
    except ValueError:
        return MissingFieldError("channel", reason="malformed")


def combine_schedule(
    scheduled_date: str, scheduled_time: str, now: datetime
) -> datetime | MissingFieldError:
    """Combine form date and time into one timestamp in the zone of ``now``."""
    day = _parse_date(scheduled_date)
    if day is None:
        return MissingFieldError("scheduled_date", reason="malformed")
    clock = _parse_time(scheduled_time)
    if clock is None:
        return MissingFieldError("scheduled_time", reason="malformed")
    return datetime.combine(day, clock, tzinfo=now.tzinfo)


def validate_and_build(
    draft: MessageDraft,
    now: datetime,
    existing: Message | None = None,
) -> Message | MessageValidationError:
    """Validate a draft and produce a new or updated Pending message.

    Failures are returned, not raised, and the first failing rule wins:
    schedule presence and format, the future-schedule rule, the channel,
    remaining required fields, owner, then the email subject. A past
    schedule is therefore reported whatever else is wrong with the draft.
    ``existing`` is never mutated; an update returns a copy that keeps its
    id, owner and creation time.

    Args:
        draft: User-submitted fields
        now: The instant validation runs
        existing: Message being edited, if any

    Returns:
        The built Message, or the validation error describing the rejection
    """
    for name in ("scheduled_date", "scheduled_time"):
        if _is_blank(getattr(draft, name)):
            return MissingFieldError(name)

    scheduled_for = combine_schedule(draft.scheduled_date, draft.scheduled_time, now)
    if isinstance(scheduled_for, MissingFieldError):
        return scheduled_for
    if scheduled_for <= now:
        return PastScheduleError()

    channel = parse_channel(draft.channel)
    if isinstance(channel, MissingFieldError):
        return channel

    for name in ("recipient", "body"):
        if _is_blank(getattr(draft, name)):
            return MissingFieldError(name)

    # Updates keep the owner of the message being edited
    if existing is None and _is_blank(draft.owner_id):
        return MissingFieldError("owner_id")

    if channel.requires_subject and _is_blank(draft.subject):
        return MissingSubjectForEmailError()
    subject = draft.subject.strip() if channel.requires_subject else None

    if existing is not None:
        return replace(
            existing,
            channel=channel,
            recipient=draft.recipient.strip(),
            subject=subject,
            body=draft.body.strip(),
            scheduled_for=scheduled_for,
            status=MessageStatus.PENDING,
            sent_at=None,
        )

    return Message(
        id=uuid4().hex,
        owner_id=draft.owner_id.strip(),
        channel=channel,
        recipient=draft.recipient.strip(),
        subject=subject,
        body=draft.body.strip(),
        scheduled_for=scheduled_for,
        status=MessageStatus.PENDING,
        created_at=now,
        sent_at=None,
    )
