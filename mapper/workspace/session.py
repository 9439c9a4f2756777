"""One editing session: load a project, draw it, wire up edits.

A session is constructed per page load and passed around explicitly; there is
no module-level "current project" state.

State machine::

    UNINITIALIZED -> LOADING -> RENDERED

``LOADING -> RENDERED`` always happens: a missing project id, an empty load
or a failed load all render the placeholder seed instead of an error state.
There is no way back to LOADING; start a new session to reload.
"""

from __future__ import annotations

import logging
from enum import Enum
from urllib.parse import parse_qs, urlsplit

from mapper.config import WorkspaceConfig, get_config
from mapper.gateway.base import PersistenceGateway
from mapper.models.graph_model import DuplicateNodeError, GraphModel
from mapper.models.project import Project
from mapper.render.renderer import Renderer
from mapper.render.surface import Surface
from mapper.workspace.controller import EditController

logger = logging.getLogger(__name__)

PLACEHOLDER_TITLE = "Untitled workflow"


class SessionState(str, Enum):
    uninitialized = "uninitialized"
    loading = "loading"
    rendered = "rendered"


def resolve_project_id(url: str) -> str | None:
    """Read the ``id`` query parameter from a page URL. Absent means None."""
    values = parse_qs(urlsplit(url).query).get("id")
    if not values:
        return None
    return values[0].strip() or None


class WorkspaceSession:
    """Owns the model, surface and controller for one project view."""

    def __init__(
        self,
        project_id: str | None,
        gateway: PersistenceGateway,
        renderer: Renderer | None = None,
        config: WorkspaceConfig | None = None,
    ) -> None:
        self.project_id = project_id
        self.gateway = gateway
        self.renderer = renderer or Renderer()
        self.config = config or get_config()
        self.state = SessionState.uninitialized
        self.model = GraphModel()
        self.project: Project | None = None
        self.surface: Surface | None = None
        self.controller: EditController | None = None

    @classmethod
    def from_url(
        cls,
        url: str,
        gateway: PersistenceGateway,
        **kwargs,
    ) -> WorkspaceSession:
        return cls(resolve_project_id(url), gateway, **kwargs)

    @property
    def is_placeholder(self) -> bool:
        return self.project is None

    @property
    def title(self) -> str:
        if self.project is None:
            return PLACEHOLDER_TITLE
        return self.project.name or f"Workflow: {self.project.id[:5]}..."

    async def _load(self) -> Project | None:
        if self.project_id is None:
            return None
        try:
            return await self.gateway.load(self.project_id)
        except Exception:
            logger.exception("load failed for project %s", self.project_id)
            return None

    async def start(self) -> Surface:
        """Load, draw once and attach the edit controller."""
        if self.state is not SessionState.uninitialized:
            raise RuntimeError(f"Session already started (state: {self.state.value})")
        self.state = SessionState.loading

        self.project = await self._load()
        if self.project is not None:
            try:
                self.model.replace_all(self.project.nodes, self.project.links)
            except DuplicateNodeError as e:
                logger.warning("project %s is malformed: %s", self.project_id, e)
                self.project = None
        if self.project is None:
            if self.project_id is not None:
                logger.info("project %s unavailable, using placeholder", self.project_id)
            self.model = GraphModel.placeholder()

        self.controller = EditController(
            self.model,
            self.gateway,
            # the placeholder is never written over a remote project
            self.project.id if self.project is not None else None,
            grid_size=self.config.grid_size,
            on_structure_change=self._redraw,
        )
        self._redraw()
        self.state = SessionState.rendered
        return self.surface

    def _redraw(self) -> None:
        self.surface = self.renderer.draw(self.model)
        self.controller.attach(self.surface)

    async def close(self) -> None:
        """Let in-flight saves finish."""
        if self.controller is not None:
            await self.controller.drain()
