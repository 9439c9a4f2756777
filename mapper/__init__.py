"""Workflow Mapper - project graph model, rendering and autosave."""

from mapper.gateway import (
    HttpGateway,
    MemoryGateway,
    PersistenceGateway,
    PersistError,
    SaveResult,
)
from mapper.models import (
    GraphModel,
    Link,
    Node,
    NodeStyle,
    Project,
    ProjectSummary,
)
from mapper.render import Renderer, Surface
from mapper.workspace import EditController, SessionState, WorkspaceSession

__all__ = [
    # Models
    "GraphModel",
    "Link",
    "Node",
    "NodeStyle",
    "Project",
    "ProjectSummary",
    # Rendering
    "Renderer",
    "Surface",
    # Persistence
    "HttpGateway",
    "MemoryGateway",
    "PersistenceGateway",
    "PersistError",
    "SaveResult",
    # High-level APIs
    "EditController",
    "SessionState",
    "WorkspaceSession",
]
