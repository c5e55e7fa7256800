"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio.application.interfaces import DocumentStore
from portfolio.config import Settings, get_settings
from portfolio.infrastructure.logging.log_config import setup_logging
from portfolio.infrastructure.storage import JsonFileDocumentStore
from portfolio.presentation.api.router import router as api_router
from portfolio.presentation.pages import router as pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and make sure the document exists."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    store: DocumentStore = app.state.document_store
    await store.initialize()

    logger.info("Server running on %s", settings.base_url)
    logger.info("Frontend: %s", settings.base_url)
    logger.info("Admin Panel: %s/admin", settings.base_url)

    yield


def create_app(
    settings: Settings | None = None,
    store: DocumentStore | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    ``store`` defaults to the JSON file named by ``settings.data_file``;
    tests pass an in-memory store instead.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.document_store = store or JsonFileDocumentStore(settings.data_file)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    app.include_router(pages_router)

    # Catch-all for built assets; must stay after every route
    app.mount("/", StaticFiles(directory=settings.public_dir), name="public")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "portfolio.main:app",
        host=_settings.host,
        port=_settings.port,
    )
