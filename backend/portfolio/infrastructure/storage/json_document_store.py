"""Single-file JSON persistence for the portfolio document.

Layout:
    <data_file>   — one JSON object holding every collection, 2-space indent

Every write replaces the whole file; there is no partial update, no backup
and no cross-process locking.
"""

import json
import logging
from pathlib import Path

from portfolio.application.interfaces import DocumentStore
from portfolio.domain.entities import PortfolioDocument

from .seed import seed_document

logger = logging.getLogger(__name__)


class JsonFileDocumentStore(DocumentStore):
    """Infrastructure adapter storing the document in one JSON file."""

    def __init__(self, data_file: str | Path):
        super().__init__()
        self._path = Path(data_file)

    @property
    def path(self) -> Path:
        return self._path

    async def initialize(self) -> bool:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if self._path.exists():
            logger.debug("Document store already present at %s", self._path)
            return False

        self._dump(seed_document())
        logger.info("Seeded document store at %s", self._path)
        return True

    async def read(self) -> PortfolioDocument:
        data = json.loads(self._path.read_text(encoding="utf-8"))
        return PortfolioDocument.from_dict(data)

    async def write(self, document: PortfolioDocument) -> None:
        self._dump(document.to_dict())
        logger.debug("Wrote document store %s", self._path)

    def _dump(self, data: dict) -> None:
        self._path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
