"""Top-level API router — aggregates every resource router under /api."""

from fastapi import APIRouter

from portfolio.presentation.api.endpoints.activity import router as activity_router
from portfolio.presentation.api.endpoints.clients import router as clients_router
from portfolio.presentation.api.endpoints.contacts import router as contacts_router
from portfolio.presentation.api.endpoints.health import router as health_router
from portfolio.presentation.api.endpoints.newsletter import router as newsletter_router
from portfolio.presentation.api.endpoints.projects import router as projects_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(projects_router)
router.include_router(clients_router)
router.include_router(contacts_router)
router.include_router(newsletter_router)
router.include_router(activity_router)
