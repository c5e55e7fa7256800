"""Domain entity — the whole portfolio content document."""

from dataclasses import dataclass, field
from typing import Any

Record = dict[str, Any]

COLLECTIONS = ("projects", "clients", "contacts", "newsletter", "activity")


@dataclass
class PortfolioDocument:
    """In-memory view of the single JSON document holding every collection.

    Records are kept as plain dicts: stored entries are open JSON objects and
    any field a client submitted is written back unchanged.
    """

    projects: list[Record] = field(default_factory=list)
    clients: list[Record] = field(default_factory=list)
    contacts: list[Record] = field(default_factory=list)
    newsletter: list[Record] = field(default_factory=list)
    activity: list[Record] = field(default_factory=list)
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PortfolioDocument":
        """Build a document from parsed JSON; missing collections start empty."""
        extras = {key: value for key, value in data.items() if key not in COLLECTIONS}
        return cls(
            projects=list(data.get("projects") or []),
            clients=list(data.get("clients") or []),
            contacts=list(data.get("contacts") or []),
            newsletter=list(data.get("newsletter") or []),
            activity=list(data.get("activity") or []),
            extras=extras,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialisable form, collections first in their canonical order."""
        data: dict[str, Any] = {name: getattr(self, name) for name in COLLECTIONS}
        data.update(self.extras)
        return data
