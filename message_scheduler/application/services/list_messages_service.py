from ...domain.services import (
    compute_stats,
    compute_user_stats,
    filter_messages,
    owner_name,
)
from ...domain.value_objects import ChannelFilter, StatusFilter
from ..dtos import (
    AdminMessageDTO,
    AdminOverviewDTO,
    AdminUserDTO,
    DashboardDTO,
    MessageResponseDTO,
    MessageStatsDTO,
)
from ..ports.inbound import AdminOverviewUseCase, ListMessagesUseCase
from ..ports.outbound import MessageRepository, UserRepository


class ListMessagesService(ListMessagesUseCase):
    """Service implementing the user dashboard listing.

    Statistics always cover the user's whole collection; the filters only
    narrow the returned messages.
    """

    def __init__(self, repository: MessageRepository) -> None:
        self._repository = repository

    async def execute(
        self,
        user_id: str,
        status_filter: StatusFilter = StatusFilter.ALL,
        channel_filter: ChannelFilter = ChannelFilter.ALL,
    ) -> DashboardDTO:
        messages = await self._repository.list_by_owner(user_id)
        filtered = filter_messages(messages, status_filter, channel_filter)

        return DashboardDTO(
            status_filter=status_filter,
            channel_filter=channel_filter,
            messages=[MessageResponseDTO.from_entity(m) for m in filtered],
            stats=MessageStatsDTO.from_stats(compute_stats(messages)),
        )


class AdminOverviewService(AdminOverviewUseCase):
    """Service implementing the admin overview."""

    def __init__(
        self,
        message_repository: MessageRepository,
        user_repository: UserRepository,
    ) -> None:
        self._messages = message_repository
        self._users = user_repository

    async def execute(
        self,
        status_filter: StatusFilter = StatusFilter.ALL,
        channel_filter: ChannelFilter = ChannelFilter.ALL,
    ) -> AdminOverviewDTO:
        users = await self._users.list_all()
        messages = await self._messages.list_all()
        user_stats = compute_user_stats(users, messages)

        return AdminOverviewDTO(
            status_filter=status_filter,
            channel_filter=channel_filter,
            total_users=user_stats.total_users,
            users=[
                AdminUserDTO(
                    id=user.id,
                    email=user.email,
                    name=user.name,
                    role=user.role.value,
                    message_count=user_stats.message_count(user.id),
                )
                for user in users
            ],
            messages=[
                AdminMessageDTO(
                    **MessageResponseDTO.from_entity(m).model_dump(),
                    owner_name=owner_name(users, m.owner_id),
                )
                for m in filter_messages(messages, status_filter, channel_filter)
            ],
            stats=MessageStatsDTO.from_stats(compute_stats(messages)),
        )
