from .memory_repositories import InMemoryMessageRepository, InMemoryUserRepository
from .seed import demo_messages, demo_users

__all__ = [
    "InMemoryMessageRepository",
    "InMemoryUserRepository",
    "demo_messages",
    "demo_users",
]
