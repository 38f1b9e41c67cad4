from .inbound import (
    AdminOverviewUseCase,
    DeleteMessageUseCase,
    ListMessagesUseCase,
    ScheduleMessageUseCase,
    UpdateMessageUseCase,
)
from .outbound import MessageRepository, UserRepository

__all__ = [
    "AdminOverviewUseCase",
    "DeleteMessageUseCase",
    "ListMessagesUseCase",
    "ScheduleMessageUseCase",
    "UpdateMessageUseCase",
    "MessageRepository",
    "UserRepository",
]
