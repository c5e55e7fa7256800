"""Application service (use case) for portfolio projects."""

import logging

from portfolio.application.interfaces import DocumentStore
from portfolio.application.schemas import ProjectCreate
from portfolio.domain.entities import Record
from portfolio.domain.exceptions import EntityNotFoundError
from portfolio.domain.identifiers import next_id, parse_record_id, utc_timestamp

from .activity_logger import ActivityIcon, ActivityLogger, display_name

logger = logging.getLogger(__name__)


class ProjectService:
    """Orchestrates project logic. Depends on the store port (DI)."""

    def __init__(self, store: DocumentStore, activity: ActivityLogger):
        self._store = store
        self._activity = activity

    async def list_projects(self) -> list[Record]:
        document = await self._store.read()
        return document.projects

    async def create_project(self, data: ProjectCreate) -> Record:
        async with self._store.transaction() as document:
            project_id = next_id(document.projects)
            project: Record = {"id": project_id, **data.to_record()}
            project["id"] = project_id
            project["date"] = utc_timestamp()
            document.projects.append(project)

            self._activity.record(
                document,
                icon=ActivityIcon.PROJECT,
                title="New Project Added",
                description=f"{display_name(project.get('name'))} was added to the portfolio",
            )

        logger.info("Created project %d", project_id)
        return project

    async def delete_project(self, raw_id: str) -> Record:
        """Remove a project by the id given in the URL.

        Raises EntityNotFoundError for unknown or non-numeric ids; in that
        case nothing is written.
        """
        project_id = parse_record_id(raw_id)
        if project_id is None:
            raise EntityNotFoundError("Project", raw_id)

        async with self._store.transaction() as document:
            index = next(
                (i for i, p in enumerate(document.projects) if p.get("id") == project_id),
                None,
            )
            if index is None:
                raise EntityNotFoundError("Project", raw_id)
            removed = document.projects.pop(index)

            self._activity.record(
                document,
                icon=ActivityIcon.PROJECT,
                title="Project Deleted",
                description=f"{display_name(removed.get('name'))} was removed from the portfolio",
            )

        logger.info("Deleted project %d", project_id)
        return removed
