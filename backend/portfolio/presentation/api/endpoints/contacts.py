"""Contact form endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas import ContactCreate
from portfolio.application.services import ContactService
from portfolio.infrastructure.dependencies import get_contact_service
from portfolio.presentation.api.bodies import open_body

router = APIRouter(prefix="/contacts", tags=["Contacts"])


@router.get("")
async def list_contacts(
    service: ContactService = Depends(get_contact_service),
) -> list[dict[str, Any]]:
    """All submissions, newest first."""
    return await service.list_contacts()


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_contact(
    data: ContactCreate = Depends(open_body(ContactCreate)),
    service: ContactService = Depends(get_contact_service),
) -> dict[str, Any]:
    return await service.submit_contact(data)
