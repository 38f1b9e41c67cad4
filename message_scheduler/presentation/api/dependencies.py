from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

import structlog
from fastapi import Depends

from ...application.services import (
    AdminOverviewService,
    Clock,
    DeleteMessageService,
    ListMessagesService,
    ScheduleMessageService,
    UpdateMessageService,
)
from ...config import settings
from ...infrastructure.persistence import (
    InMemoryMessageRepository,
    InMemoryUserRepository,
    demo_messages,
    demo_users,
)

logger = structlog.get_logger()

# Singleton in-memory stores
_message_repository: InMemoryMessageRepository | None = None
_user_repository: InMemoryUserRepository | None = None


def get_clock() -> Clock:
    zone: tzinfo = UTC if settings.timezone.upper() == "UTC" else ZoneInfo(settings.timezone)

    def now() -> datetime:
        return datetime.now(zone)

    return now


def get_message_repository() -> InMemoryMessageRepository:
    global _message_repository
    if _message_repository is None:
        seed = demo_messages(get_clock()()) if settings.seed_demo_data else []
        _message_repository = InMemoryMessageRepository(seed)
        logger.info("Message store initialized", seeded=len(seed))
    return _message_repository


def get_user_repository() -> InMemoryUserRepository:
    global _user_repository
    if _user_repository is None:
        _user_repository = InMemoryUserRepository(
            demo_users() if settings.seed_demo_data else []
        )
    return _user_repository


def get_schedule_service(
    repository: InMemoryMessageRepository = Depends(get_message_repository),
    clock: Clock = Depends(get_clock),
) -> ScheduleMessageService:
    return ScheduleMessageService(repository, clock=clock)


def get_update_service(
    repository: InMemoryMessageRepository = Depends(get_message_repository),
    clock: Clock = Depends(get_clock),
) -> UpdateMessageService:
    return UpdateMessageService(repository, clock=clock)


def get_delete_service(
    repository: InMemoryMessageRepository = Depends(get_message_repository),
) -> DeleteMessageService:
    return DeleteMessageService(repository)


def get_list_service(
    repository: InMemoryMessageRepository = Depends(get_message_repository),
) -> ListMessagesService:
    return ListMessagesService(repository)


def get_admin_service(
    messages: InMemoryMessageRepository = Depends(get_message_repository),
    users: InMemoryUserRepository = Depends(get_user_repository),
) -> AdminOverviewService:
    return AdminOverviewService(messages, users)
