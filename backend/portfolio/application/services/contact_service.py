"""Application service for contact form submissions (append-only)."""

import logging

from portfolio.application.interfaces import DocumentStore
from portfolio.application.schemas import ContactCreate
from portfolio.domain.entities import Record
from portfolio.domain.identifiers import next_id, utc_timestamp

from .activity_logger import ActivityIcon, ActivityLogger, display_name

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self, store: DocumentStore, activity: ActivityLogger):
        self._store = store
        self._activity = activity

    async def list_contacts(self) -> list[Record]:
        document = await self._store.read()
        return document.contacts

    async def submit_contact(self, data: ContactCreate) -> Record:
        """Store a submission at the front of the inbox."""
        async with self._store.transaction() as document:
            contact_id = next_id(document.contacts)
            contact: Record = {"id": contact_id, **data.to_record()}
            contact["id"] = contact_id
            contact["date"] = utc_timestamp()
            document.contacts.insert(0, contact)

            self._activity.record(
                document,
                icon=ActivityIcon.CONTACT,
                title="New Contact Form Submission",
                description=f"{display_name(contact.get('fullname'))} submitted a contact form",
            )

        logger.info("Stored contact submission %d", contact_id)
        return contact
