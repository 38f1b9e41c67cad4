from abc import ABC, abstractmethod

from ....domain.value_objects import ChannelFilter, StatusFilter
from ...dtos import AdminOverviewDTO, DashboardDTO


class ListMessagesUseCase(ABC):
    """Input port for the user dashboard."""

    @abstractmethod
    async def execute(
        self,
        user_id: str,
        status_filter: StatusFilter = StatusFilter.ALL,
        channel_filter: ChannelFilter = ChannelFilter.ALL,
    ) -> DashboardDTO:
        """List the user's messages with filters and statistics."""
        ...


class AdminOverviewUseCase(ABC):
    """Input port for the admin dashboard."""

    @abstractmethod
    async def execute(
        self,
        status_filter: StatusFilter = StatusFilter.ALL,
        channel_filter: ChannelFilter = ChannelFilter.ALL,
    ) -> AdminOverviewDTO:
        """Aggregate users and messages across all owners."""
        ...
