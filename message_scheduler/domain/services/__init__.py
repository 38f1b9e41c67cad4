from .message_builder import combine_schedule, parse_channel, validate_and_build
from .message_queries import (
    UNKNOWN_USER_NAME,
    compute_stats,
    compute_user_stats,
    filter_messages,
    owner_name,
)

__all__ = [
    "UNKNOWN_USER_NAME",
    "combine_schedule",
    "parse_channel",
    "compute_stats",
    "compute_user_stats",
    "filter_messages",
    "owner_name",
    "validate_and_build",
]
