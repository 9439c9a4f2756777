"""Turns user interaction on the surface into GraphModel mutations and saves."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from mapper.gateway.base import PersistenceGateway, PersistError, SaveResult
from mapper.models.graph import Link, Node, NodeStyle
from mapper.models.graph_model import GraphModel
from mapper.render.surface import Surface
from mapper.utils.identifiers import generate_link_id, generate_node_id

logger = logging.getLogger(__name__)

# title, body, width, height for freshly placed nodes
NODE_DEFAULTS: dict[NodeStyle, tuple[str, str, float, float]] = {
    NodeStyle.page: ("New Page", "Website Page or Screen", 220, 100),
    NodeStyle.action: ("User Action", "Button Click or Input", 180, 100),
    NodeStyle.decision: ("Decision", "Is X True?", 150, 150),
}


def snap(value: float, grid_size: int) -> float:
    return round(value / grid_size) * grid_size


class EditController:
    """Applies committed edits to the model and autosaves the whole graph.

    Every successful mutation schedules exactly one save of the full node and
    link lists. Saves run as tasks on the current event loop; a failed save is
    logged and dropped, never retried. With no ``project_id`` edits stay local.

    Body edits are applied in place by the surface and do not redraw.
    Structural edits (add, move, restack, delete, connect) call ``on_structure_change``
    so the owner can redraw.
    """

    def __init__(
        self,
        model: GraphModel,
        gateway: PersistenceGateway,
        project_id: str | None,
        grid_size: int = 25,
        on_structure_change: Callable[[], None] | None = None,
    ) -> None:
        self.model = model
        self.gateway = gateway
        self.project_id = project_id
        self.grid_size = grid_size
        self.on_structure_change = on_structure_change
        self.last_save: SaveResult | None = None
        self._pending: set[asyncio.Task[SaveResult]] = set()

    def attach(self, surface: Surface) -> None:
        surface.on_body_commit(self.commit_body_edit)

    # -- body edits ------------------------------------------------------

    def commit_body_edit(self, node_id: str, text: str) -> bool:
        """Handle focus leaving the body region tagged ``node_id``.

        Unknown ids (stale or removed nodes) are ignored.
        """
        if not self.model.update_node_body(node_id, text):
            logger.debug("ignoring edit for unknown node %s", node_id)
            return False
        self._schedule_save()
        return True

    # -- structural edits ------------------------------------------------

    def add_node(
        self,
        style: NodeStyle = NodeStyle.page,
        x: float = 200,
        y: float = 200,
    ) -> Node:
        title, body, w, h = NODE_DEFAULTS[style]
        node = Node(
            id=generate_node_id(),
            x=snap(x, self.grid_size),
            y=snap(y, self.grid_size),
            w=w,
            h=h,
            title=title,
            body=body,
            type=style,
            z_index=self.model.top_z_index() + 1,
        )
        self.model.add_node(node)
        self._structure_changed()
        return node

    def move_node(self, node_id: str, x: float, y: float) -> bool:
        """Finish a drag: snap the drop point to the grid."""
        moved = self.model.move_node(
            node_id, snap(x, self.grid_size), snap(y, self.grid_size)
        )
        if moved:
            self._structure_changed()
        return moved

    def bring_to_front(self, node_id: str) -> bool:
        """Select a node: stack it above the others."""
        raised = self.model.bring_to_front(node_id)
        if raised:
            self._structure_changed()
        return raised

    def delete_node(self, node_id: str) -> bool:
        removed = self.model.remove_node(node_id)
        if removed:
            self._structure_changed()
        return removed

    def connect(self, source: str, target: str, label: str | None = None) -> Link | None:
        """Draw a link between two existing, distinct nodes."""
        if source == target:
            return None
        if self.model.find_node(source) is None or self.model.find_node(target) is None:
            return None
        link = Link(
            id=generate_link_id(),
            source=source,
            target=target,
            label=label.strip() if label else None,
        )
        self.model.add_link(link)
        self._structure_changed()
        return link

    def delete_link(self, link_id: str) -> bool:
        removed = self.model.remove_link(link_id)
        if removed:
            self._structure_changed()
        return removed

    # -- saving ----------------------------------------------------------

    def _structure_changed(self) -> None:
        if self.on_structure_change is not None:
            self.on_structure_change()
        self._schedule_save()

    def save_now(self) -> bool:
        """Save the whole graph on request (the "Save Board" button).

        Returns False when no save was scheduled.
        """
        return self._schedule_save()

    def _schedule_save(self) -> bool:
        if self.project_id is None:
            return False
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # called from sync code: the edit stays local, the save is dropped
            self.last_save = SaveResult.failure(
                PersistError("No running event loop", self.project_id)
            )
            logger.warning(
                "save dropped for project %s: no running event loop", self.project_id
            )
            return False
        nodes, links = self.model.to_payload()
        task = loop.create_task(self._save(nodes, links))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return True

    async def _save(self, nodes: list[Node], links: list[Link]) -> SaveResult:
        try:
            result = await self.gateway.save(self.project_id, nodes, links)
        except Exception as e:
            result = SaveResult.failure(PersistError(str(e), self.project_id))
        if not result.ok:
            logger.warning("save failed for project %s: %s", self.project_id, result.error)
        self.last_save = result
        return result

    @property
    def pending_saves(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every in-flight save to finish."""
        while self._pending:
            await asyncio.gather(*self._pending)
