"""Persistence boundary between a workspace and its document store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from mapper.models.graph import Link, Node
from mapper.models.project import Project, ProjectSummary


class PersistError(Exception):
    """Exception raised when the store cannot complete a request."""

    def __init__(self, message: str, project_id: str | None = None) -> None:
        super().__init__(message)
        self.project_id = project_id


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save: ok, or the error that stopped it."""

    ok: bool
    error: PersistError | None = None

    @classmethod
    def success(cls) -> SaveResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: PersistError) -> SaveResult:
        return cls(ok=False, error=error)


class PersistenceGateway(Protocol):
    """Load/save capability consumed by the workspace.

    ``load`` and ``list_projects`` never raise: a missing project, a caller
    who is not signed in, or a transport failure all come back empty.
    ``create_project`` returns None for a caller who is not signed in.
    ``save`` and ``update_status`` report failures through a ``SaveResult``.
    """

    async def load(self, project_id: str) -> Project | None:
        ...

    async def save(
        self,
        project_id: str,
        nodes: list[Node],
        links: list[Link],
    ) -> SaveResult:
        ...

    async def list_projects(self) -> list[ProjectSummary]:
        ...

    async def create_project(self, name: str) -> str | None:
        ...

    async def update_status(self, project_id: str, status: str) -> SaveResult:
        ...
