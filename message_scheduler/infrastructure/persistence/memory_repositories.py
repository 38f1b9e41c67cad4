"""
In-memory implementations of the repository ports.

Collections live in a single process and are lost on restart. A durable
store would implement the same ports.
"""

from collections.abc import Iterable
from dataclasses import replace

import structlog

from ...application.ports.outbound import MessageRepository, UserRepository
from ...domain.entities import Message, User

logger = structlog.get_logger()


def _newest_first(messages: Iterable[Message]) -> list[Message]:
    return sorted(messages, key=lambda m: m.created_at, reverse=True)


class InMemoryMessageRepository(MessageRepository):
    """
    Dict-backed MessageRepository.

    Stored messages are copies, so callers mutating a returned entity do
    not change the collection until they save it again.
    """

    def __init__(self, messages: Iterable[Message] = ()) -> None:
        self._messages: dict[str, Message] = {}
        for message in messages:
            self._messages[message.id] = replace(message)

    async def save(self, message: Message) -> None:
        self._messages[message.id] = replace(message)
        logger.debug("Message stored", message_id=message.id, count=len(self._messages))

    async def get_by_id(self, message_id: str) -> Message | None:
        message = self._messages.get(message_id)
        return replace(message) if message else None

    async def delete(self, message_id: str) -> bool:
        return self._messages.pop(message_id, None) is not None

    async def list_by_owner(self, owner_id: str) -> list[Message]:
        return _newest_first(
            replace(m) for m in self._messages.values() if m.owner_id == owner_id
        )

    async def list_all(self) -> list[Message]:
        return _newest_first(replace(m) for m in self._messages.values())

    def __len__(self) -> int:
        return len(self._messages)


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository in registration order."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[str, User] = {user.id: user for user in users}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def list_all(self) -> list[User]:
        return list(self._users.values())
