from datetime import UTC, datetime, timedelta

import pytest

from message_scheduler.domain.entities import Message, User, UserRole
from message_scheduler.domain.value_objects import Channel, MessageDraft, MessageStatus

NOW = datetime(2026, 3, 10, 9, 30, tzinfo=UTC)
TOMORROW = (NOW + timedelta(days=1)).date().isoformat()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def email_draft() -> MessageDraft:
    return MessageDraft(
        channel=Channel.EMAIL,
        recipient="a@b.com",
        subject="Hi",
        body="hi",
        scheduled_date=TOMORROW,
        scheduled_time="10:00",
        owner_id="u1",
    )


@pytest.fixture
def chat_draft() -> MessageDraft:
    return MessageDraft(
        channel=Channel.CHAT,
        recipient="+1234567890",
        body="Your appointment is confirmed.",
        scheduled_date=TOMORROW,
        scheduled_time="14:00",
        owner_id="u1",
    )


def make_message(
    message_id: str,
    status: MessageStatus = MessageStatus.PENDING,
    channel: Channel = Channel.EMAIL,
    owner_id: str = "u1",
    created_at: datetime = NOW,
) -> Message:
    return Message(
        id=message_id,
        owner_id=owner_id,
        channel=channel,
        recipient="a@b.com" if channel == Channel.EMAIL else "+1234567890",
        subject="Subject" if channel == Channel.EMAIL else None,
        body=f"Body {message_id}",
        scheduled_for=NOW + timedelta(hours=1),
        status=status,
        created_at=created_at,
        sent_at=NOW if status == MessageStatus.SENT else None,
    )


@pytest.fixture
def pending_message() -> Message:
    return make_message("m-pending")


@pytest.fixture
def mixed_messages() -> list[Message]:
    return [
        make_message("m1", MessageStatus.PENDING, Channel.EMAIL),
        make_message("m2", MessageStatus.SENT, Channel.CHAT),
        make_message("m3", MessageStatus.FAILED, Channel.EMAIL),
        make_message("m4", MessageStatus.SENT, Channel.EMAIL),
        make_message("m5", MessageStatus.PENDING, Channel.CHAT),
    ]


@pytest.fixture
def users() -> list[User]:
    return [
        User(id="admin", email="admin@example.com", name="Admin User", role=UserRole.ADMIN),
        User(id="u1", email="john@example.com", name="John Doe"),
        User(id="u2", email="jane@example.com", name="Jane Smith"),
    ]


@pytest.fixture
def message_factory():
    return make_message
