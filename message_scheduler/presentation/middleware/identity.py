"""Caller identity supplied by the upstream gateway.

The gateway authenticates the user and forwards ``X-User-ID`` and
``X-User-Groups``. This service trusts those headers and never verifies
credentials itself.
"""

from dataclasses import dataclass, field
from typing import Annotated

import structlog
from fastapi import Depends, Header, HTTPException, status

from ...config import settings

logger = structlog.get_logger()


@dataclass
class AuthenticatedUser:
    """Represents the caller as forwarded by the gateway."""

    sub: str  # User ID
    groups: list[str] = field(default_factory=list)

    @property
    def user_id(self) -> str:
        return self.sub


def _parse_groups(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [g.strip() for g in raw.split(",") if g.strip()]


async def get_current_user(
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_groups: Annotated[str | None, Header()] = None,
) -> AuthenticatedUser | None:
    """Dependency to get the current user, or None when anonymous."""
    if x_user_id and x_user_id.strip():
        return AuthenticatedUser(sub=x_user_id.strip(), groups=_parse_groups(x_user_groups))

    if not settings.auth_enabled:
        # Development user when no gateway is in front of the service
        return AuthenticatedUser(
            sub=settings.dev_user_id,
            groups=_parse_groups(x_user_groups),
        )

    return None


async def require_auth(
    user: Annotated[AuthenticatedUser | None, Depends(get_current_user)],
) -> AuthenticatedUser:
    """
    Dependency that requires an identified caller.
    Raises 401 if no user identity was forwarded.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


def require_groups(*required_groups: str):
    """
    Dependency factory that requires user to be in specific groups.

    Usage:
        @router.get("/admin")
        async def admin_endpoint(user: AuthenticatedUser = Depends(require_groups("admin"))):
            ...
    """

    async def check_groups(
        user: Annotated[AuthenticatedUser, Depends(require_auth)],
    ) -> AuthenticatedUser:
        if not any(g in user.groups for g in required_groups):
            logger.warning(
                "Access denied: missing required group",
                user_id=user.user_id,
                required_groups=required_groups,
                user_groups=user.groups,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires one of groups: {', '.join(required_groups)}",
            )
        return user

    return check_groups
