"""Core data models for the workflow mapper."""

from mapper.models.graph import (
    DEFAULT_NODE_HEIGHT,
    DEFAULT_NODE_WIDTH,
    DEFAULT_Z_INDEX,
    Link,
    Node,
    NodeStyle,
)
from mapper.models.graph_model import DuplicateNodeError, GraphModel
from mapper.models.project import (
    DEFAULT_STATUS,
    PROJECT_STATUSES,
    Project,
    ProjectStatus,
    ProjectSummary,
    WorkspacePayload,
)

__all__ = [
    # Graph parts
    "DEFAULT_NODE_HEIGHT",
    "DEFAULT_NODE_WIDTH",
    "DEFAULT_Z_INDEX",
    "Link",
    "Node",
    "NodeStyle",
    # In-memory graph
    "DuplicateNodeError",
    "GraphModel",
    # Projects
    "DEFAULT_STATUS",
    "PROJECT_STATUSES",
    "Project",
    "ProjectStatus",
    "ProjectSummary",
    "WorkspacePayload",
]
