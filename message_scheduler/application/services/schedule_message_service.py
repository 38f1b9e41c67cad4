import structlog

from ...domain.errors import (
    MessageNotEditableError,
    MessageNotFoundError,
    MessageValidationError,
)
from ...domain.services import validate_and_build
from ...infrastructure.logging import sanitize_for_logging
from ..dtos import MessageDraftDTO, MessageResponseDTO
from ..ports.inbound import (
    DeleteMessageUseCase,
    ScheduleMessageUseCase,
    UpdateMessageUseCase,
)
from ..ports.outbound import MessageRepository
from .clock import Clock, utc_now

logger = structlog.get_logger()


def _reject(error: MessageValidationError, user_id: str) -> MessageValidationError:
    logger.warning(
        "Message draft rejected",
        error=error.kind,
        field=error.field,
        user_id=user_id,
    )
    return error


class ScheduleMessageService(ScheduleMessageUseCase):
    """Service implementing the schedule message use case."""

    def __init__(self, repository: MessageRepository, clock: Clock = utc_now) -> None:
        self._repository = repository
        self._clock = clock

    async def execute(self, dto: MessageDraftDTO, user_id: str) -> MessageResponseDTO:
        """Validate the draft and persist it as a Pending message."""
        result = validate_and_build(dto.to_draft(user_id), now=self._clock())
        if isinstance(result, MessageValidationError):
            raise _reject(result, user_id)

        await self._repository.save(result)

        logger.info(
            "Message scheduled",
            message_id=result.id,
            channel=result.channel.value,
            recipient=sanitize_for_logging(result.recipient),
            scheduled_for=result.scheduled_for.isoformat(),
            user_id=user_id,
        )
        return MessageResponseDTO.from_entity(result)


class UpdateMessageService(UpdateMessageUseCase):
    """Service implementing the edit message use case.

    Only Pending messages may be edited. The rebuilt message keeps its id,
    owner and creation time.
    """

    def __init__(self, repository: MessageRepository, clock: Clock = utc_now) -> None:
        self._repository = repository
        self._clock = clock

    async def execute(
        self, message_id: str, dto: MessageDraftDTO, user_id: str
    ) -> MessageResponseDTO:
        existing = await self._repository.get_by_id(message_id)

        # IDOR prevention: other users' messages look like missing ones
        if existing is None or existing.owner_id != user_id:
            raise MessageNotFoundError(message_id)
        if not existing.is_editable:
            logger.warning(
                "Edit refused for non-pending message",
                message_id=message_id,
                status=existing.status.value,
            )
            raise MessageNotEditableError(message_id, existing.status.value)

        result = validate_and_build(dto.to_draft(user_id), now=self._clock(), existing=existing)
        if isinstance(result, MessageValidationError):
            raise _reject(result, user_id)

        await self._repository.save(result)

        logger.info(
            "Message updated",
            message_id=result.id,
            channel=result.channel.value,
            scheduled_for=result.scheduled_for.isoformat(),
        )
        return MessageResponseDTO.from_entity(result)


class DeleteMessageService(DeleteMessageUseCase):
    """Service implementing the delete message use case."""

    def __init__(self, repository: MessageRepository) -> None:
        self._repository = repository

    async def execute(self, message_id: str, user_id: str) -> None:
        existing = await self._repository.get_by_id(message_id)
        if existing is None or existing.owner_id != user_id:
            raise MessageNotFoundError(message_id)

        await self._repository.delete(message_id)
        logger.info("Message deleted", message_id=message_id, status=existing.status.value)
