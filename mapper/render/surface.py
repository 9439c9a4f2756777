"""Visual surface produced by the renderer.

The surface is the DOM-equivalent tree: positioned node boxes plus connector
paths. Editable body regions are addressed by node id only, and committed
edits are routed to listeners as ``(node_id, text)`` pairs.
"""

from __future__ import annotations

import html
from collections.abc import Callable
from dataclasses import dataclass

from mapper.models.graph import DEFAULT_Z_INDEX, NodeStyle

NODE_ELEMENT_PREFIX = "node-"

BodyCommitListener = Callable[[str, str], None]


def element_id_for(node_id: str) -> str:
    return NODE_ELEMENT_PREFIX + node_id


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class NodeElement:
    """A rendered node box."""

    element_id: str
    node_id: str
    x: float
    y: float
    w: float
    h: float
    title: str
    body: str
    style: NodeStyle
    z_index: int = DEFAULT_Z_INDEX

    def to_html(self) -> str:
        style = (
            f"left: {_fmt(self.x)}px; top: {_fmt(self.y)}px; "
            f"width: {_fmt(self.w)}px; height: {_fmt(self.h)}px; "
            f"z-index: {self.z_index};"
        )
        return (
            f'<div class="node node-type-{self.style.value}" '
            f'id="{html.escape(self.element_id)}" style="{style}">'
            f'<div class="node-title">{html.escape(self.title)}</div>'
            f'<div class="node-body" contenteditable="true" '
            f'data-node-id="{html.escape(self.node_id)}">{html.escape(self.body)}</div>'
            "</div>"
        )


@dataclass(frozen=True)
class ConnectorPath:
    """A straight connector from one box's right edge to another's left edge."""

    source: str
    target: str
    start: tuple[float, float]
    end: tuple[float, float]
    label: str | None = None

    @property
    def d(self) -> str:
        (x1, y1), (x2, y2) = self.start, self.end
        return f"M{_fmt(x1)} {_fmt(y1)} L{_fmt(x2)} {_fmt(y2)}"

    @property
    def midpoint(self) -> tuple[float, float]:
        (x1, y1), (x2, y2) = self.start, self.end
        return ((x1 + x2) / 2, (y1 + y2) / 2)

    def to_svg(self) -> str:
        parts = [
            f'<path class="link-path" d="{self.d}" '
            f'data-from="{html.escape(self.source)}" data-to="{html.escape(self.target)}" '
            'fill="none" stroke-width="3"/>'
        ]
        if self.label:
            mid_x, mid_y = self.midpoint
            parts.append(
                f'<text class="link-label" x="{_fmt(mid_x)}" y="{_fmt(mid_y - 5)}" '
                f'text-anchor="middle">{html.escape(self.label)}</text>'
            )
        return "".join(parts)


class Surface:
    """Rendered node boxes and connector paths for one draw."""

    def __init__(
        self,
        elements: list[NodeElement],
        paths: list[ConnectorPath],
        skipped_links: int = 0,
    ) -> None:
        self.elements = elements
        self.paths = paths
        self.skipped_links = skipped_links
        self._by_node_id = {element.node_id: element for element in elements}
        self._listeners: list[BodyCommitListener] = []

    def element(self, node_id: str) -> NodeElement | None:
        return self._by_node_id.get(node_id)

    def element_by_id(self, element_id: str) -> NodeElement | None:
        if not element_id.startswith(NODE_ELEMENT_PREFIX):
            return None
        return self.element(element_id[len(NODE_ELEMENT_PREFIX):])

    def on_body_commit(self, listener: BodyCommitListener) -> None:
        """Register a listener for body-edit commits (focus leaving a body region)."""
        self._listeners.append(listener)

    def commit_body(self, node_id: str, text: str) -> bool:
        """Commit edited text in the body region tagged with ``node_id``.

        The element is updated in place, no redraw happens. Returns False when
        no region carries that id.
        """
        element = self.element(node_id)
        if element is None:
            return False
        element.body = text
        for listener in list(self._listeners):
            listener(node_id, text)
        return True

    def to_html(self) -> str:
        """Serialise the surface to HTML with an inline SVG link layer."""
        nodes = "".join(element.to_html() for element in self.elements)
        links = "".join(path.to_svg() for path in self.paths)
        return (
            '<div class="board">'
            f"{nodes}"
            f'<svg class="links" xmlns="http://www.w3.org/2000/svg">{links}</svg>'
            "</div>"
        )
