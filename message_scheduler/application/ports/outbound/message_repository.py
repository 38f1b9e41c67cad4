from abc import ABC, abstractmethod

from ....domain.entities import Message


class MessageRepository(ABC):
    """Output port for message persistence."""

    @abstractmethod
    async def save(self, message: Message) -> None:
        """Persist a message (insert or replace by id)."""
        ...

    @abstractmethod
    async def get_by_id(self, message_id: str) -> Message | None:
        """Retrieve a message by ID."""
        ...

    @abstractmethod
    async def delete(self, message_id: str) -> bool:
        """Remove a message. Returns False if it did not exist."""
        ...

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> list[Message]:
        """Messages owned by a user, newest first."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Message]:
        """Every message, newest first."""
        ...
