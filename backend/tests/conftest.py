"""Shared fakes and fixtures."""

import copy
from typing import Any

import pytest

from portfolio.application.interfaces import DocumentStore
from portfolio.application.services import ActivityLogger
from portfolio.domain.entities import PortfolioDocument
from portfolio.infrastructure.storage import seed_document


def empty_document() -> dict[str, Any]:
    return {"projects": [], "clients": [], "contacts": [], "newsletter": [], "activity": []}


class InMemoryDocumentStore(DocumentStore):
    """In-memory fake store for unit testing. Counts writes."""

    def __init__(self, initial: dict[str, Any] | None = None):
        super().__init__()
        self._data = copy.deepcopy(initial) if initial is not None else None
        self.write_count = 0

    async def initialize(self) -> bool:
        if self._data is not None:
            return False
        self._data = seed_document()
        return True

    async def read(self) -> PortfolioDocument:
        if self._data is None:
            raise FileNotFoundError("document not initialized")
        return PortfolioDocument.from_dict(copy.deepcopy(self._data))

    async def write(self, document: PortfolioDocument) -> None:
        self._data = copy.deepcopy(document.to_dict())
        self.write_count += 1

    @property
    def data(self) -> dict[str, Any]:
        return self._data


@pytest.fixture
def empty_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore(empty_document())


@pytest.fixture
def seeded_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore(seed_document())


@pytest.fixture
def activity() -> ActivityLogger:
    return ActivityLogger()


@pytest.fixture
def make_store():
    """Factory for stores holding custom content."""

    def _make(**collections: list[dict[str, Any]]) -> InMemoryDocumentStore:
        data = empty_document()
        data.update(collections)
        return InMemoryDocumentStore(data)

    return _make
