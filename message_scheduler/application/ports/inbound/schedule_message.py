from abc import ABC, abstractmethod

from ...dtos import MessageDraftDTO, MessageResponseDTO


class ScheduleMessageUseCase(ABC):
    """Input port for scheduling a message."""

    @abstractmethod
    async def execute(self, dto: MessageDraftDTO, user_id: str) -> MessageResponseDTO:
        """Validate a draft and store it as a Pending message."""
        ...


class UpdateMessageUseCase(ABC):
    """Input port for editing a Pending message."""

    @abstractmethod
    async def execute(
        self, message_id: str, dto: MessageDraftDTO, user_id: str
    ) -> MessageResponseDTO:
        """Replace the mutable fields of a message owned by the user."""
        ...


class DeleteMessageUseCase(ABC):
    """Input port for deleting a message."""

    @abstractmethod
    async def execute(self, message_id: str, user_id: str) -> None:
        """Delete a message owned by the user, whatever its status."""
        ...
