"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from portfolio.application.interfaces import DocumentStore
from portfolio.application.services import (
    ActivityLogger,
    ActivityService,
    ClientService,
    ContactService,
    NewsletterService,
    ProjectService,
)
from portfolio.config import Settings


def get_document_store(request: Request) -> DocumentStore:
    """The store created by the app factory, shared by every request."""
    return request.app.state.document_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_activity_logger() -> ActivityLogger:
    return ActivityLogger()


async def get_project_service(
    store: DocumentStore = Depends(get_document_store),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> AsyncGenerator[ProjectService, None]:
    """Provides a ProjectService bound to the shared store."""
    yield ProjectService(store, activity)


async def get_client_service(
    store: DocumentStore = Depends(get_document_store),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService bound to the shared store."""
    yield ClientService(store, activity)


async def get_contact_service(
    store: DocumentStore = Depends(get_document_store),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> AsyncGenerator[ContactService, None]:
    yield ContactService(store, activity)


async def get_newsletter_service(
    store: DocumentStore = Depends(get_document_store),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> AsyncGenerator[NewsletterService, None]:
    yield NewsletterService(store, activity)


async def get_activity_service(
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[ActivityService, None]:
    """Provides the activity feed reader, capped at the configured limit."""
    yield ActivityService(store, limit=settings.activity_feed_limit)
