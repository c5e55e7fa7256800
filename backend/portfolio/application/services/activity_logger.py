"""Activity feed — records admin-visible events and serves the recent ones.

Every successful mutation records one entry inside the same read-modify-write
cycle as the change itself, so a failed write loses both together.
"""

import logging
from typing import Any

from portfolio.application.interfaces import DocumentStore
from portfolio.domain.entities import ActivityEntry, PortfolioDocument, Record
from portfolio.domain.identifiers import next_id

logger = logging.getLogger(__name__)

DEFAULT_FEED_LIMIT = 5


class ActivityIcon:
    """Font Awesome icon names used by the admin dashboard."""

    PROJECT = "fa-project-diagram"
    CLIENT = "fa-users"
    CONTACT = "fa-envelope"
    NEWSLETTER = "fa-newspaper"


def display_name(value: Any, fallback: str = "Unknown") -> str:
    """Render a submitted field for an activity description."""
    if value is None or value == "":
        return fallback
    return str(value)


class ActivityLogger:
    """Prepends activity entries to a document being mutated.

    Usage:
        async with store.transaction() as document:
            document.projects.append(project)
            activity.record(
                document,
                icon=ActivityIcon.PROJECT,
                title="New Project Added",
                description="Corporate Website was added to the portfolio",
            )
    """

    def record(
        self,
        document: PortfolioDocument,
        *,
        icon: str,
        title: str,
        description: str,
    ) -> ActivityEntry:
        """Build a "Just now" entry and put it at the front of the feed."""
        entry = ActivityEntry(
            id=next_id(document.activity),
            icon=icon,
            title=title,
            description=description,
        )
        document.activity.insert(0, entry.to_dict())
        logger.info("Activity #%d: %s — %s", entry.id, title, description)
        return entry


class ActivityService:
    """Read side of the activity feed."""

    def __init__(self, store: DocumentStore, limit: int = DEFAULT_FEED_LIMIT):
        self._store = store
        self._limit = limit

    async def recent(self) -> list[Record]:
        """Most recent entries first, at most ``limit`` of them."""
        document = await self._store.read()
        return document.activity[: self._limit]
