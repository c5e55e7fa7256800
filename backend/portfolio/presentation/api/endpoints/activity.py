"""Admin activity feed endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from portfolio.application.services import ActivityService
from portfolio.infrastructure.dependencies import get_activity_service

router = APIRouter(prefix="/activity", tags=["Activity"])


@router.get("")
async def recent_activity(
    service: ActivityService = Depends(get_activity_service),
) -> list[dict[str, Any]]:
    """The most recent entries, newest first, as stored."""
    return await service.recent()
