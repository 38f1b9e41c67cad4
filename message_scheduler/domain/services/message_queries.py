from collections import Counter
from collections.abc import Iterable, Sequence

from ..entities import Message, User
from ..value_objects import (
    Channel,
    ChannelFilter,
    MessageStats,
    MessageStatus,
    StatusFilter,
    UserStats,
)

UNKNOWN_USER_NAME = "Unknown User"


def filter_messages(
    messages: Iterable[Message],
    status_filter: StatusFilter = StatusFilter.ALL,
    channel_filter: ChannelFilter = ChannelFilter.ALL,
) -> list[Message]:
    """Messages matching both filters, in input order."""
    return [
        message
        for message in messages
        if status_filter.matches(message.status) and channel_filter.matches(message.channel)
    ]


def compute_stats(messages: Sequence[Message]) -> MessageStats:
    statuses = Counter(message.status for message in messages)
    channels = Counter(message.channel for message in messages)
    return MessageStats(
        total=len(messages),
        pending=statuses[MessageStatus.PENDING],
        sent=statuses[MessageStatus.SENT],
        failed=statuses[MessageStatus.FAILED],
        email=channels[Channel.EMAIL],
        chat=channels[Channel.CHAT],
    )


def compute_user_stats(users: Sequence[User], messages: Iterable[Message]) -> UserStats:
    """Non-admin user count and per-user message counts.

    Every user gets an entry, including those without messages. Messages
    whose owner is not among ``users`` are not counted.
    """
    owned = Counter(message.owner_id for message in messages)
    return UserStats(
        total_users=sum(1 for user in users if not user.is_admin),
        messages_per_user={user.id: owned[user.id] for user in users},
    )


def owner_name(users: Iterable[User], owner_id: str) -> str:
    for user in users:
        if user.id == owner_id:
            return user.name
    return UNKNOWN_USER_NAME
