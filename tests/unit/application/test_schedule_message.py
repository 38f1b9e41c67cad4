from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from message_scheduler.application.dtos import MessageDraftDTO
from message_scheduler.application.services import (
    DeleteMessageService,
    ScheduleMessageService,
    UpdateMessageService,
)
from message_scheduler.domain.entities import Message
from message_scheduler.domain.errors import (
    MessageNotEditableError,
    MessageNotFoundError,
    MissingFieldError,
    MissingSubjectForEmailError,
    PastScheduleError,
)
from message_scheduler.domain.value_objects import Channel, MessageStatus

OWNER_ID = "u1"
OTHER_ID = "u2"


@pytest.fixture
def mock_repository():
    return AsyncMock()


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def valid_dto():
    return MessageDraftDTO(
        channel="email",
        recipient="a@b.com",
        subject="Hi",
        body="hi",
        scheduled_date="2026-03-11",
        scheduled_time="10:00",
    )


class TestScheduleMessageService:
    @pytest.fixture
    def service(self, mock_repository, clock):
        return ScheduleMessageService(repository=mock_repository, clock=clock)

    @pytest.mark.asyncio
    async def test_execute_creates_and_saves_message(self, service, valid_dto, mock_repository):
        result = await service.execute(valid_dto, OWNER_ID)

        mock_repository.save.assert_called_once()
        saved = mock_repository.save.call_args[0][0]
        assert isinstance(saved, Message)
        assert saved.status == MessageStatus.PENDING
        assert saved.owner_id == OWNER_ID
        assert result.id == saved.id
        assert result.status == "pending"
        assert result.editable is True

    @pytest.mark.asyncio
    async def test_execute_uses_injected_clock(self, service, valid_dto, mock_repository, now):
        await service.execute(valid_dto, OWNER_ID)

        saved = mock_repository.save.call_args[0][0]
        assert saved.created_at == now

    @pytest.mark.asyncio
    async def test_missing_subject_raises_and_saves_nothing(
        self, service, valid_dto, mock_repository
    ):
        dto = valid_dto.model_copy(update={"subject": ""})

        with pytest.raises(MissingSubjectForEmailError):
            await service.execute(dto, OWNER_ID)

        mock_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_past_schedule_raises(self, service, valid_dto):
        dto = valid_dto.model_copy(update={"scheduled_date": "2026-03-09"})

        with pytest.raises(PastScheduleError):
            await service.execute(dto, OWNER_ID)

    @pytest.mark.asyncio
    async def test_missing_recipient_raises_with_field(self, service, valid_dto):
        dto = valid_dto.model_copy(update={"recipient": ""})

        with pytest.raises(MissingFieldError) as exc_info:
            await service.execute(dto, OWNER_ID)

        assert exc_info.value.field == "recipient"

    @pytest.mark.asyncio
    async def test_chat_message_via_legacy_channel_name(self, service, mock_repository):
        dto = MessageDraftDTO(
            channel="whatsapp",
            recipient="+1234567890",
            body="Your order has been shipped!",
            scheduled_date="2026-03-11",
            scheduled_time="08:00",
        )

        result = await service.execute(dto, OWNER_ID)

        assert result.channel == Channel.CHAT
        assert result.subject is None

    @pytest.mark.asyncio
    async def test_missing_channel_is_reported(self, service, valid_dto, mock_repository):
        dto = valid_dto.model_copy(update={"channel": None})

        with pytest.raises(MissingFieldError) as exc_info:
            await service.execute(dto, OWNER_ID)

        assert exc_info.value.field == "channel"
        mock_repository.save.assert_not_called()


class TestMessageDraftDTO:
    def test_text_is_kept_as_submitted(self):
        dto = MessageDraftDTO(subject=" Q&A ", body="  Don't miss Tom & Jerry  ")

        assert dto.subject == "Q&A"
        assert dto.body == "Don't miss Tom & Jerry"

    def test_missing_fields_default_to_blank(self):
        dto = MessageDraftDTO()

        assert dto.channel is None
        assert dto.recipient == ""
        assert dto.subject is None

    def test_oversized_body_is_rejected(self):
        with pytest.raises(ValidationError):
            MessageDraftDTO(body="x" * 4097)

    def test_invalid_channel_is_rejected(self):
        with pytest.raises(ValidationError):
            MessageDraftDTO(channel="sms")


class TestUpdateMessageService:
    @pytest.fixture
    def service(self, mock_repository, clock):
        return UpdateMessageService(repository=mock_repository, clock=clock)

    @pytest.mark.asyncio
    async def test_update_keeps_id_and_created_at(
        self, service, mock_repository, pending_message, valid_dto
    ):
        mock_repository.get_by_id.return_value = pending_message
        dto = valid_dto.model_copy(update={"body": "updated"})

        result = await service.execute(pending_message.id, dto, OWNER_ID)

        saved = mock_repository.save.call_args[0][0]
        assert saved.id == pending_message.id
        assert saved.created_at == pending_message.created_at
        assert result.body == "updated"

    @pytest.mark.asyncio
    async def test_update_missing_message_raises_not_found(
        self, service, mock_repository, valid_dto
    ):
        mock_repository.get_by_id.return_value = None

        with pytest.raises(MessageNotFoundError):
            await service.execute("missing", valid_dto, OWNER_ID)

    @pytest.mark.asyncio
    async def test_update_other_users_message_raises_not_found(
        self, service, mock_repository, pending_message, valid_dto
    ):
        """IDOR prevention: user cannot edit another user's message."""
        mock_repository.get_by_id.return_value = pending_message

        with pytest.raises(MessageNotFoundError):
            await service.execute(pending_message.id, valid_dto, OTHER_ID)

        mock_repository.save.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [MessageStatus.SENT, MessageStatus.FAILED])
    async def test_update_non_pending_raises_not_editable(
        self, service, mock_repository, message_factory, valid_dto, status
    ):
        mock_repository.get_by_id.return_value = message_factory("done", status)

        with pytest.raises(MessageNotEditableError, match=status.value):
            await service.execute("done", valid_dto, OWNER_ID)

        mock_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_update_saves_nothing(
        self, service, mock_repository, pending_message, valid_dto
    ):
        mock_repository.get_by_id.return_value = pending_message
        dto = valid_dto.model_copy(update={"body": "  "})

        with pytest.raises(MissingFieldError):
            await service.execute(pending_message.id, dto, OWNER_ID)

        mock_repository.save.assert_not_called()


class TestDeleteMessageService:
    @pytest.fixture
    def service(self, mock_repository):
        return DeleteMessageService(repository=mock_repository)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", list(MessageStatus))
    async def test_delete_any_status(self, service, mock_repository, message_factory, status):
        mock_repository.get_by_id.return_value = message_factory("m", status)

        await service.execute("m", OWNER_ID)

        mock_repository.delete.assert_called_once_with("m")

    @pytest.mark.asyncio
    async def test_delete_other_users_message_raises_not_found(
        self, service, mock_repository, pending_message
    ):
        mock_repository.get_by_id.return_value = pending_message

        with pytest.raises(MessageNotFoundError):
            await service.execute(pending_message.id, OTHER_ID)

        mock_repository.delete.assert_not_called()
