"""Happy-client testimonial endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas import ClientCreate, MessageResponse
from portfolio.application.services import ClientService
from portfolio.domain.exceptions import EntityNotFoundError
from portfolio.infrastructure.dependencies import get_client_service
from portfolio.presentation.api.bodies import open_body
from portfolio.presentation.api.responses import message_response

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("")
async def list_clients(
    service: ClientService = Depends(get_client_service),
) -> list[dict[str, Any]]:
    return await service.list_clients()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate = Depends(open_body(ClientCreate)),
    service: ClientService = Depends(get_client_service),
) -> dict[str, Any]:
    """Add a client testimonial."""
    return await service.create_client(data)


@router.delete(
    "/{client_id}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse}},
)
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
):
    """Delete a client by ID."""
    try:
        await service.delete_client(client_id)
    except EntityNotFoundError:
        return message_response("Client not found", status.HTTP_404_NOT_FOUND)
    return MessageResponse(message="Client deleted successfully")
