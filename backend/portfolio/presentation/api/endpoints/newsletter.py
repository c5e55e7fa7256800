"""Newsletter signup endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, status

from portfolio.application.schemas import MessageResponse, NewsletterSubscribe
from portfolio.application.services import NewsletterService
from portfolio.domain.exceptions import DuplicateEntityError
from portfolio.infrastructure.dependencies import get_newsletter_service
from portfolio.presentation.api.bodies import open_body
from portfolio.presentation.api.responses import message_response

router = APIRouter(prefix="/newsletter", tags=["Newsletter"])


@router.get("")
async def list_subscribers(
    service: NewsletterService = Depends(get_newsletter_service),
) -> list[dict[str, Any]]:
    return await service.list_subscribers()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}},
)
async def subscribe(
    data: NewsletterSubscribe = Depends(open_body(NewsletterSubscribe)),
    service: NewsletterService = Depends(get_newsletter_service),
) -> dict[str, Any]:
    """Subscribe an email; an address already on the list is rejected."""
    try:
        return await service.subscribe(data)
    except DuplicateEntityError:
        return message_response("Email already subscribed", status.HTTP_400_BAD_REQUEST)
