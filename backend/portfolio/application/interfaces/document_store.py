"""Abstract store interface (port) for the portfolio content document."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from portfolio.domain.entities import PortfolioDocument


class DocumentStore(ABC):
    """Port for whole-document persistence — implemented in the infrastructure layer.

    There are no partial updates: callers read the entire document, mutate
    it in memory and write the entire document back.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    @abstractmethod
    async def initialize(self) -> bool:
        """Create the document with seed data if it does not exist yet.

        Returns True when the seed was written, False if a document was
        already present. Never overwrites.
        """
        ...

    @abstractmethod
    async def read(self) -> PortfolioDocument:
        """Load the whole document. Raises if it is missing or unreadable."""
        ...

    @abstractmethod
    async def write(self, document: PortfolioDocument) -> None:
        """Replace the stored document with ``document``."""
        ...

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[PortfolioDocument]:
        """Read-modify-write cycle serialized by the store lock.

        Usage:
            async with store.transaction() as document:
                document.projects.append(record)

        The document is written back only when the block exits cleanly;
        an exception raised inside the block leaves the stored state as is.
        """
        async with self._lock:
            document = await self.read()
            yield document
            await self.write(document)
