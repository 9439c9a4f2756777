"""Project document models.

A project is the unit of persistence: metadata plus the embedded node and
link lists. The graph never exists outside a project document.
"""

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

from mapper.models.graph import Link, Node

DEFAULT_STATUS = "Active"

# values the dashboard status dropdown offers
ProjectStatus = Literal["Active", "To Do", "In Progress", "Complete"]
PROJECT_STATUSES: tuple[str, ...] = get_args(ProjectStatus)


class ProjectSummary(BaseModel):
    """list entry for the project dashboard, no graph payload."""

    id: str
    name: str
    status: str = DEFAULT_STATUS


class Project(BaseModel):
    """a persisted project with its embedded graph."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    status: str = DEFAULT_STATUS
    owner: str | None = None
    created_at: str = Field(alias="createdAt")
    last_modified: str = Field(alias="lastModified")
    nodes: list[Node] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)

    def summary(self) -> ProjectSummary:
        return ProjectSummary(id=self.id, name=self.name, status=self.status)


class WorkspacePayload(BaseModel):
    """request body for a full workspace save."""

    nodes: list[Node]
    links: list[Link] = Field(default_factory=list)
