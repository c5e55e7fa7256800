from .client import ClientCreate
from .common import MessageResponse
from .contact import ContactCreate
from .newsletter import NewsletterSubscribe
from .project import ProjectCreate
from .records import OpenRecord

__all__ = [
    "ClientCreate",
    "MessageResponse",
    "ContactCreate",
    "NewsletterSubscribe",
    "ProjectCreate",
    "OpenRecord",
]
