from .activity import ActivityEntry, JUST_NOW
from .document import COLLECTIONS, PortfolioDocument, Record

__all__ = [
    "ActivityEntry",
    "JUST_NOW",
    "COLLECTIONS",
    "PortfolioDocument",
    "Record",
]
