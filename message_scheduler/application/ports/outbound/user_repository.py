from abc import ABC, abstractmethod

from ....domain.entities import User


class UserRepository(ABC):
    """Output port for the user directory."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    async def list_all(self) -> list[User]: ...
