from .clock import Clock, utc_now
from .list_messages_service import AdminOverviewService, ListMessagesService
from .schedule_message_service import (
    DeleteMessageService,
    ScheduleMessageService,
    UpdateMessageService,
)

__all__ = [
    "AdminOverviewService",
    "Clock",
    "DeleteMessageService",
    "ListMessagesService",
    "ScheduleMessageService",
    "UpdateMessageService",
    "utc_now",
]
