from fastapi import APIRouter, Depends, Query, Response, status

from ....application.dtos import DashboardDTO, MessageDraftDTO, MessageResponseDTO
from ....application.services import (
    DeleteMessageService,
    ListMessagesService,
    ScheduleMessageService,
    UpdateMessageService,
)
from ....domain.value_objects import ChannelFilter, StatusFilter
from ...middleware import AuthenticatedUser, require_auth
from ..dependencies import (
    get_delete_service,
    get_list_service,
    get_schedule_service,
    get_update_service,
)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get(
    "/",
    response_model=DashboardDTO,
    summary="List my messages",
    description="List the caller's messages with optional status and channel filters.",
)
async def list_messages(
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status"),
    channel_filter: ChannelFilter = Query(ChannelFilter.ALL, alias="channel"),
    user: AuthenticatedUser = Depends(require_auth),
    service: ListMessagesService = Depends(get_list_service),
) -> DashboardDTO:
    return await service.execute(user.user_id, status_filter, channel_filter)


@router.post(
    "/",
    response_model=MessageResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a message",
    description="Validate a draft and schedule it for future delivery.",
)
async def schedule_message(
    request: MessageDraftDTO,
    user: AuthenticatedUser = Depends(require_auth),
    service: ScheduleMessageService = Depends(get_schedule_service),
) -> MessageResponseDTO:
    return await service.execute(request, user.user_id)


@router.put(
    "/{message_id}",
    response_model=MessageResponseDTO,
    summary="Edit a pending message",
)
async def update_message(
    message_id: str,
    request: MessageDraftDTO,
    user: AuthenticatedUser = Depends(require_auth),
    service: UpdateMessageService = Depends(get_update_service),
) -> MessageResponseDTO:
    return await service.execute(message_id, request, user.user_id)


@router.delete(
    "/{message_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a message",
)
async def delete_message(
    message_id: str,
    user: AuthenticatedUser = Depends(require_auth),
    service: DeleteMessageService = Depends(get_delete_service),
) -> Response:
    await service.execute(message_id, user.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
