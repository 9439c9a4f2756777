"""API routes for projects and their workspace graphs."""

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel

from mapper.models.graph import Node
from mapper.models.project import (
    Project,
    ProjectStatus,
    ProjectSummary,
    WorkspacePayload,
)
from mapper.utils.identifiers import generate_project_id, utc_timestamp
from server.project_db import (
    count_projects as db_count_projects,
    delete_project as db_delete_project,
    get_project as db_get_project,
    list_projects as db_list_projects,
    upsert_project as db_upsert_project,
)

router = APIRouter()


class CreateProjectRequest(BaseModel):
    """request body for creating a project."""

    name: str | None = None


class UpdateProjectRequest(BaseModel):
    """request body for renaming a project or changing its status."""

    name: str | None = None
    status: ProjectStatus | None = None


def _get_visible_project(project_id: str, user_id: str | None) -> Project:
    """Get a project the caller may see, raise 404 otherwise."""
    project = db_get_project(project_id)
    if not project or (user_id and project.owner not in (None, user_id)):
        raise HTTPException(status_code=404, detail=f"Project not found: {project_id}")
    return project


@router.get("/projects")
def list_projects(
    x_user_id: str | None = Header(default=None),
) -> list[ProjectSummary]:
    """list projects newest first, summary fields only."""
    return [project.summary() for project in db_list_projects(x_user_id or None)]


@router.post("/projects", status_code=201)
def create_project(
    request: CreateProjectRequest,
    x_user_id: str | None = Header(default=None),
) -> Project:
    """create a project with an empty graph."""
    now = utc_timestamp()
    project = Project(
        id=generate_project_id(),
        name=request.name or f"New Project {db_count_projects() + 1}",
        owner=x_user_id or None,
        created_at=now,
        last_modified=now,
    )
    db_upsert_project(project)
    return project


@router.get("/projects/{project_id}")
def get_project(
    project_id: str,
    x_user_id: str | None = Header(default=None),
) -> Project:
    """get a full project document."""
    return _get_visible_project(project_id, x_user_id)


@router.patch("/projects/{project_id}")
def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    x_user_id: str | None = Header(default=None),
) -> Project:
    """update name and/or status; the graph is left as it is."""
    project = _get_visible_project(project_id, x_user_id)
    changes = request.model_dump(exclude_none=True)
    if not changes:
        return project
    saved = project.model_copy(update={**changes, "last_modified": utc_timestamp()})
    db_upsert_project(saved)
    return saved


@router.put("/projects/{project_id}/workspace")
def save_workspace(
    project_id: str,
    payload: WorkspacePayload,
    x_user_id: str | None = Header(default=None),
) -> Project:
    """overwrite the project's nodes and links.

    No version check: the last save wins.
    """
    project = _get_visible_project(project_id, x_user_id)
    saved = project.model_copy(
        update={
            "nodes": payload.nodes,
            "links": payload.links,
            "last_modified": utc_timestamp(),
        }
    )
    db_upsert_project(saved)
    return saved


@router.delete("/projects/{project_id}")
def delete_project(
    project_id: str,
    x_user_id: str | None = Header(default=None),
) -> dict:
    """delete a project."""
    _get_visible_project(project_id, x_user_id)
    db_delete_project(project_id)
    return {"deleted": project_id}


@router.get("/mindmap/{project_id}")
def get_mindmap(project_id: str) -> list[Node]:
    """get the node array of a project."""
    return _get_visible_project(project_id, None).nodes


@router.put("/mindmap/{project_id}")
def save_mindmap(project_id: str, nodes: list[Node]) -> list[Node]:
    """replace the node array of a project; links are left as they are."""
    project = _get_visible_project(project_id, None)
    saved = project.model_copy(update={"nodes": nodes, "last_modified": utc_timestamp()})
    db_upsert_project(saved)
    return saved.nodes
