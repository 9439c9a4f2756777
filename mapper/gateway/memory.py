"""Dict-backed gateway for offline sessions and tests."""

from __future__ import annotations

from mapper.gateway.base import PersistError, SaveResult
from mapper.models.graph import Link, Node
from mapper.models.project import PROJECT_STATUSES, Project, ProjectSummary
from mapper.utils.identifiers import generate_project_id, utc_timestamp


class MemoryGateway:
    """Stores project documents in a dict.

    ``user_id`` of None models a session whose sign-in has not resolved yet:
    reads and project creation come back empty, and writes fail.
    """

    def __init__(self, user_id: str | None = "local-user") -> None:
        self.user_id = user_id
        self._projects: dict[str, Project] = {}
        self._order: list[str] = []

    def _visible(self, project: Project) -> bool:
        return project.owner is None or project.owner == self.user_id

    def put(self, project: Project) -> None:
        """Insert a ready-made document, replacing any with the same id."""
        if project.id not in self._projects:
            self._order.append(project.id)
        self._projects[project.id] = project.model_copy(deep=True)

    async def load(self, project_id: str) -> Project | None:
        if self.user_id is None:
            return None
        project = self._projects.get(project_id)
        if project is None or not self._visible(project):
            return None
        return project.model_copy(deep=True)

    async def save(
        self,
        project_id: str,
        nodes: list[Node],
        links: list[Link],
    ) -> SaveResult:
        if self.user_id is None:
            return SaveResult.failure(PersistError("Not signed in", project_id))
        project = self._projects.get(project_id)
        if project is None or not self._visible(project):
            return SaveResult.failure(
                PersistError(f"Project not found: {project_id}", project_id)
            )
        self._projects[project_id] = project.model_copy(
            update={
                "nodes": [node.model_copy(deep=True) for node in nodes],
                "links": [link.model_copy(deep=True) for link in links],
                "last_modified": utc_timestamp(),
            }
        )
        return SaveResult.success()

    async def list_projects(self) -> list[ProjectSummary]:
        if self.user_id is None:
            return []
        ranked = sorted(
            enumerate(self._order),
            key=lambda item: (self._projects[item[1]].created_at, item[0]),
            reverse=True,
        )
        return [
            self._projects[project_id].summary()
            for _, project_id in ranked
            if self._visible(self._projects[project_id])
        ]

    async def create_project(self, name: str) -> str | None:
        if self.user_id is None:
            return None
        now = utc_timestamp()
        project = Project(
            id=generate_project_id(),
            name=name,
            owner=self.user_id,
            created_at=now,
            last_modified=now,
        )
        self.put(project)
        return project.id

    async def update_status(self, project_id: str, status: str) -> SaveResult:
        if self.user_id is None:
            return SaveResult.failure(PersistError("Not signed in", project_id))
        if status not in PROJECT_STATUSES:
            return SaveResult.failure(
                PersistError(f"Unknown status: {status}", project_id)
            )
        project = self._projects.get(project_id)
        if project is None or not self._visible(project):
            return SaveResult.failure(
                PersistError(f"Project not found: {project_id}", project_id)
            )
        self._projects[project_id] = project.model_copy(
            update={"status": status, "last_modified": utc_timestamp()}
        )
        return SaveResult.success()
