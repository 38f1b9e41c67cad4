from fastapi import APIRouter, Depends

from ....infrastructure.persistence import InMemoryMessageRepository
from ..dependencies import get_message_repository

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health() -> dict:
    """Basic health check for load balancer."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def readiness(
    repository: InMemoryMessageRepository = Depends(get_message_repository),
) -> dict:
    """Readiness check - reports the message store."""
    return {
        "status": "ready",
        "checks": {"message_store": {"status": "healthy", "messages": len(repository)}},
    }
