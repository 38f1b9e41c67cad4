from fastapi import APIRouter, Depends, Query

from ....application.dtos import AdminOverviewDTO
from ....application.services import AdminOverviewService
from ....config import settings
from ....domain.value_objects import ChannelFilter, StatusFilter
from ...middleware import AuthenticatedUser, require_groups
from ..dependencies import get_admin_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/overview",
    response_model=AdminOverviewDTO,
    summary="Admin overview",
    description="Users, message counts and all messages across owners.",
)
async def admin_overview(
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status"),
    channel_filter: ChannelFilter = Query(ChannelFilter.ALL, alias="channel"),
    user: AuthenticatedUser = Depends(require_groups(settings.admin_group)),
    service: AdminOverviewService = Depends(get_admin_service),
) -> AdminOverviewDTO:
    return await service.execute(status_filter, channel_filter)
