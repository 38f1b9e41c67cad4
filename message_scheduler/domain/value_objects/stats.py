from dataclasses import dataclass, field


@dataclass(frozen=True)
class MessageStats:
    """Counts over a message collection."""
    total: int = 0
    pending: int = 0
    sent: int = 0
    failed: int = 0
    email: int = 0
    chat: int = 0


@dataclass(frozen=True)
class UserStats:
    """Admin-scope counts over users and their messages."""
    total_users: int = 0
    messages_per_user: dict[str, int] = field(default_factory=dict)

    def message_count(self, user_id: str) -> int:
        return self.messages_per_user.get(user_id, 0)
