from .correlation import CorrelationIdMiddleware
from .identity import (
    AuthenticatedUser,
    get_current_user,
    require_auth,
    require_groups,
)

__all__ = [
    "AuthenticatedUser",
    "CorrelationIdMiddleware",
    "get_current_user",
    "require_auth",
    "require_groups",
]
