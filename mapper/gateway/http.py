"""Gateway that talks to the companion project server over HTTP."""

from __future__ import annotations

import logging

import httpx

from mapper.gateway.base import PersistError, SaveResult
from mapper.models.graph import Link, Node
from mapper.models.project import Project, ProjectSummary, WorkspacePayload

logger = logging.getLogger(__name__)

USER_HEADER = "X-User-Id"


class HttpGateway:
    """Load and save project documents through the project server's REST API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        user_id: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Base URL of the project server
            user_id: Signed-in user; None means reads return empty results
            timeout: HTTP request timeout in seconds
            transport: Optional transport override (e.g. an ASGI app in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.user_id = user_id
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={USER_HEADER: self.user_id} if self.user_id else None,
            transport=self._transport,
        )

    async def load(self, project_id: str) -> Project | None:
        if self.user_id is None:
            return None
        try:
            async with self._client() as client:
                response = await client.get(f"/api/projects/{project_id}")
                if response.status_code == 404:
                    return None
                response.raise_for_status()
                return Project.model_validate(response.json())
        # ValueError also covers non-JSON bodies and pydantic's ValidationError
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("load failed for project %s: %s", project_id, e)
            return None

    async def save(
        self,
        project_id: str,
        nodes: list[Node],
        links: list[Link],
    ) -> SaveResult:
        if self.user_id is None:
            return SaveResult.failure(PersistError("Not signed in", project_id))
        payload = WorkspacePayload(nodes=nodes, links=links)
        try:
            async with self._client() as client:
                response = await client.put(
                    f"/api/projects/{project_id}/workspace",
                    json=payload.model_dump(mode="json", by_alias=True),
                )
                if response.status_code == 404:
                    return SaveResult.failure(
                        PersistError(f"Project not found: {project_id}", project_id)
                    )
                response.raise_for_status()
        except httpx.HTTPError as e:
            return SaveResult.failure(
                PersistError(f"Failed to save to {self.base_url}: {e}", project_id)
            )
        return SaveResult.success()

    async def list_projects(self) -> list[ProjectSummary]:
        if self.user_id is None:
            return []
        try:
            async with self._client() as client:
                response = await client.get("/api/projects")
                response.raise_for_status()
                return [ProjectSummary.model_validate(item) for item in response.json()]
        except (httpx.HTTPError, ValueError, TypeError) as e:
            logger.warning("listing projects failed: %s", e)
            return []

    async def create_project(self, name: str) -> str | None:
        """Create an empty project and return its id.

        Returns None when nobody is signed in. Raises PersistError when the
        server cannot be reached or answers with something unusable.
        """
        if self.user_id is None:
            return None
        try:
            async with self._client() as client:
                response = await client.post("/api/projects", json={"name": name})
                response.raise_for_status()
                return response.json()["id"]
        except httpx.HTTPError as e:
            raise PersistError(
                f"Failed to connect to server at {self.base_url}: {e}"
            ) from e
        except (ValueError, KeyError, TypeError) as e:
            raise PersistError(f"Unexpected response from {self.base_url}: {e}") from e

    async def update_status(self, project_id: str, status: str) -> SaveResult:
        if self.user_id is None:
            return SaveResult.failure(PersistError("Not signed in", project_id))
        try:
            async with self._client() as client:
                response = await client.patch(
                    f"/api/projects/{project_id}", json={"status": status}
                )
                if response.status_code == 404:
                    return SaveResult.failure(
                        PersistError(f"Project not found: {project_id}", project_id)
                    )
                response.raise_for_status()
        except httpx.HTTPError as e:
            return SaveResult.failure(
                PersistError(f"Failed to update status of {project_id}: {e}", project_id)
            )
        return SaveResult.success()
