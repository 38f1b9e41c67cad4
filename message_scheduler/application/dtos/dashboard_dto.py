from pydantic import BaseModel

from ...domain.value_objects import ChannelFilter, MessageStats, StatusFilter
from .message_dto import MessageResponseDTO


class MessageStatsDTO(BaseModel):
    total: int
    pending: int
    sent: int
    failed: int
    email: int
    chat: int

    @classmethod
    def from_stats(cls, stats: MessageStats) -> "MessageStatsDTO":
        return cls(
            total=stats.total,
            pending=stats.pending,
            sent=stats.sent,
            failed=stats.failed,
            email=stats.email,
            chat=stats.chat,
        )


class DashboardDTO(BaseModel):
    """User dashboard: filtered listing plus stats over all own messages."""

    status_filter: StatusFilter
    channel_filter: ChannelFilter
    messages: list[MessageResponseDTO]
    stats: MessageStatsDTO


class AdminUserDTO(BaseModel):
    id: str
    email: str
    name: str
    role: str
    message_count: int


class AdminMessageDTO(MessageResponseDTO):
    owner_name: str


class AdminOverviewDTO(BaseModel):
    """Admin dashboard across every owner."""

    status_filter: StatusFilter
    channel_filter: ChannelFilter
    total_users: int
    users: list[AdminUserDTO]
    messages: list[AdminMessageDTO]
    stats: MessageStatsDTO
