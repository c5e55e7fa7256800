from .activity_logger import ActivityIcon, ActivityLogger, ActivityService
from .client_service import ClientService
from .contact_service import ContactService
from .newsletter_service import NewsletterService
from .project_service import ProjectService

__all__ = [
    "ActivityIcon",
    "ActivityLogger",
    "ActivityService",
    "ClientService",
    "ContactService",
    "NewsletterService",
    "ProjectService",
]
