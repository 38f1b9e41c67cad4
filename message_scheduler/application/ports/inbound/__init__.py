from .list_messages import AdminOverviewUseCase, ListMessagesUseCase
from .schedule_message import (
    DeleteMessageUseCase,
    ScheduleMessageUseCase,
    UpdateMessageUseCase,
)

__all__ = [
    "AdminOverviewUseCase",
    "DeleteMessageUseCase",
    "ListMessagesUseCase",
    "ScheduleMessageUseCase",
    "UpdateMessageUseCase",
]
