"""Application service (use case) for client testimonials."""

import logging

from portfolio.application.interfaces import DocumentStore
from portfolio.application.schemas import ClientCreate
from portfolio.domain.entities import Record
from portfolio.domain.exceptions import EntityNotFoundError
from portfolio.domain.identifiers import next_id, parse_record_id, utc_timestamp

from .activity_logger import ActivityIcon, ActivityLogger, display_name

logger = logging.getLogger(__name__)


class ClientService:
    """Orchestrates happy-client logic. Depends on the store port (DI)."""

    def __init__(self, store: DocumentStore, activity: ActivityLogger):
        self._store = store
        self._activity = activity

    async def list_clients(self) -> list[Record]:
        document = await self._store.read()
        return document.clients

    async def create_client(self, data: ClientCreate) -> Record:
        async with self._store.transaction() as document:
            client_id = next_id(document.clients)
            client: Record = {"id": client_id, **data.to_record()}
            client["id"] = client_id
            client["date"] = utc_timestamp()
            document.clients.append(client)

            self._activity.record(
                document,
                icon=ActivityIcon.CLIENT,
                title="New Client Added",
                description=f"{display_name(client.get('name'))} was added to happy clients",
            )

        logger.info("Created client %d", client_id)
        return client

    async def delete_client(self, raw_id: str) -> Record:
        client_id = parse_record_id(raw_id)
        if client_id is None:
            raise EntityNotFoundError("Client", raw_id)

        async with self._store.transaction() as document:
            index = next(
                (i for i, c in enumerate(document.clients) if c.get("id") == client_id),
                None,
            )
            if index is None:
                raise EntityNotFoundError("Client", raw_id)
            removed = document.clients.pop(index)

            self._activity.record(
                document,
                icon=ActivityIcon.CLIENT,
                title="Client Deleted",
                description=f"{display_name(removed.get('name'))} was removed from happy clients",
            )

        logger.info("Deleted client %d", client_id)
        return removed
