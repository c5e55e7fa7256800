"""Concurrent read-modify-write cycles through DocumentStore.transaction()."""

import asyncio
import copy

import pytest

from portfolio.application.interfaces import DocumentStore
from portfolio.application.schemas import NewsletterSubscribe, ProjectCreate
from portfolio.application.services import ActivityLogger, NewsletterService, ProjectService
from portfolio.domain.entities import PortfolioDocument


class YieldingDocumentStore(DocumentStore):
    """Fake store that hands control back to the event loop on every I/O call."""

    def __init__(self) -> None:
        super().__init__()
        self._data = {"projects": [], "clients": [], "contacts": [], "newsletter": [], "activity": []}

    async def initialize(self) -> bool:
        return False

    async def read(self) -> PortfolioDocument:
        snapshot = copy.deepcopy(self._data)
        await asyncio.sleep(0)
        return PortfolioDocument.from_dict(snapshot)

    async def write(self, document: PortfolioDocument) -> None:
        await asyncio.sleep(0)
        self._data = copy.deepcopy(document.to_dict())

    @property
    def data(self) -> dict:
        return self._data


@pytest.mark.asyncio
async def test_concurrent_creates_keep_every_record():
    store = YieldingDocumentStore()
    service = ProjectService(store, ActivityLogger())

    created = await asyncio.gather(
        *(service.create_project(ProjectCreate(name=f"P{n}")) for n in range(20))
    )

    assert sorted(p["id"] for p in created) == list(range(1, 21))
    assert [p["id"] for p in store.data["projects"]] == list(range(1, 21))
    assert {p["name"] for p in store.data["projects"]} == {f"P{n}" for n in range(20)}
    assert sorted(a["id"] for a in store.data["activity"]) == list(range(1, 21))


@pytest.mark.asyncio
async def test_concurrent_duplicate_signups_store_one_subscriber():
    store = YieldingDocumentStore()
    service = NewsletterService(store, ActivityLogger())

    results = await asyncio.gather(
        *(service.subscribe(NewsletterSubscribe(email="a@x.com")) for _ in range(5)),
        return_exceptions=True,
    )

    assert sum(isinstance(r, dict) for r in results) == 1
    assert len(store.data["newsletter"]) == 1
