"""Rendering of workspace graphs onto a visual surface."""

from mapper.render.renderer import Renderer
from mapper.render.surface import (
    NODE_ELEMENT_PREFIX,
    ConnectorPath,
    NodeElement,
    Surface,
    element_id_for,
)

__all__ = [
    "NODE_ELEMENT_PREFIX",
    "ConnectorPath",
    "NodeElement",
    "Renderer",
    "Surface",
    "element_id_for",
]
