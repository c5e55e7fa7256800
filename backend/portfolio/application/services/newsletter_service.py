"""Application service for newsletter signups (append-only, unique email)."""

import logging

from portfolio.application.interfaces import DocumentStore
from portfolio.application.schemas import NewsletterSubscribe
from portfolio.domain.entities import Record
from portfolio.domain.exceptions import DuplicateEntityError
from portfolio.domain.identifiers import next_id, utc_timestamp

from .activity_logger import ActivityIcon, ActivityLogger, display_name

logger = logging.getLogger(__name__)


class NewsletterService:
    def __init__(self, store: DocumentStore, activity: ActivityLogger):
        self._store = store
        self._activity = activity

    async def list_subscribers(self) -> list[Record]:
        document = await self._store.read()
        return document.newsletter

    async def subscribe(self, data: NewsletterSubscribe) -> Record:
        """Add a subscriber at the front of the list.

        The email comparison is exact and case-sensitive. A duplicate raises
        DuplicateEntityError before anything is written.
        """
        email = data.email
        async with self._store.transaction() as document:
            if any(sub.get("email") == email for sub in document.newsletter):
                raise DuplicateEntityError("Subscriber", "email", str(email))

            subscriber: Record = {
                "id": next_id(document.newsletter),
                "email": email,
                "date": utc_timestamp(),
            }
            document.newsletter.insert(0, subscriber)

            self._activity.record(
                document,
                icon=ActivityIcon.NEWSLETTER,
                title="New Newsletter Subscriber",
                description=f"{display_name(email)} subscribed to the newsletter",
            )

        logger.info("New newsletter subscriber %d", subscriber["id"])
        return subscriber
