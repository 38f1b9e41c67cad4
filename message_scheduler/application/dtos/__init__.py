from .dashboard_dto import (
    AdminMessageDTO,
    AdminOverviewDTO,
    AdminUserDTO,
    DashboardDTO,
    MessageStatsDTO,
)
from .message_dto import MessageDraftDTO, MessageResponseDTO

__all__ = [
    "AdminMessageDTO",
    "AdminOverviewDTO",
    "AdminUserDTO",
    "DashboardDTO",
    "MessageDraftDTO",
    "MessageResponseDTO",
    "MessageStatsDTO",
]
