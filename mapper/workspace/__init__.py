"""Workspace editing: sessions and the edit controller."""

from mapper.workspace.controller import NODE_DEFAULTS, EditController, snap
from mapper.workspace.session import (
    PLACEHOLDER_TITLE,
    SessionState,
    WorkspaceSession,
    resolve_project_id,
)

__all__ = [
    "NODE_DEFAULTS",
    "PLACEHOLDER_TITLE",
    "EditController",
    "SessionState",
    "WorkspaceSession",
    "resolve_project_id",
    "snap",
]
