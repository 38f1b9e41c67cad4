"""Demo accounts and messages for local development."""

from datetime import datetime, timedelta

from ...domain.entities import Message, User, UserRole
from ...domain.value_objects import Channel, MessageStatus


def demo_users() -> list[User]:
    return [
        User(id="1", email="admin@example.com", name="Admin User", role=UserRole.ADMIN),
        User(id="2", email="john@example.com", name="John Doe"),
        User(id="3", email="jane@example.com", name="Jane Smith"),
        User(id="4", email="bob@example.com", name="Bob Johnson"),
    ]


def demo_messages(now: datetime) -> list[Message]:
    """Messages relative to ``now`` covering every status and channel."""
    hour = timedelta(hours=1)
    return [
        Message(
            id="1",
            owner_id="2",
            channel=Channel.EMAIL,
            recipient="customer1@example.com",
            subject="Welcome Newsletter",
            body="Welcome to our monthly newsletter!",
            scheduled_for=now + 24 * hour,
            status=MessageStatus.PENDING,
            created_at=now,
        ),
        Message(
            id="2",
            owner_id="3",
            channel=Channel.CHAT,
            recipient="+1234567890",
            body="Your order has been shipped!",
            scheduled_for=now + 12 * hour,
            status=MessageStatus.SENT,
            created_at=now - 24 * hour,
            sent_at=now - hour,
        ),
        Message(
            id="3",
            owner_id="2",
            channel=Channel.EMAIL,
            recipient="customer2@example.com",
            subject="Appointment Reminder",
            body="This is a reminder about your upcoming appointment.",
            scheduled_for=now - hour,
            status=MessageStatus.FAILED,
            created_at=now - 2 * hour,
        ),
        Message(
            id="4",
            owner_id="4",
            channel=Channel.CHAT,
            recipient="+0987654321",
            body="Thank you for your purchase!",
            scheduled_for=now - hour / 2,
            status=MessageStatus.SENT,
            created_at=now - hour,
            sent_at=now - hour / 2,
        ),
    ]
