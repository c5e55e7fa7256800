"""Portfolio project endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas import MessageResponse, ProjectCreate
from portfolio.application.services import ProjectService
from portfolio.domain.exceptions import EntityNotFoundError
from portfolio.infrastructure.dependencies import get_project_service
from portfolio.presentation.api.bodies import open_body
from portfolio.presentation.api.responses import message_response

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("")
async def list_projects(
    service: ProjectService = Depends(get_project_service),
) -> list[dict[str, Any]]:
    """Every project, in insertion order."""
    return await service.list_projects()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate = Depends(open_body(ProjectCreate)),
    service: ProjectService = Depends(get_project_service),
) -> dict[str, Any]:
    """Add a project; the body is stored as sent plus ``id`` and ``date``."""
    return await service.create_project(data)


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse}},
)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project by ID."""
    try:
        await service.delete_project(project_id)
    except EntityNotFoundError:
        return message_response("Project not found", status.HTTP_404_NOT_FOUND)
    return MessageResponse(message="Project deleted successfully")
