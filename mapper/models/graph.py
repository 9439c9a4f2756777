"""Node and link models for a project's workspace graph.

These are the wire shapes stored inside a project document and exchanged with
the companion server. Defaults fill in fields that older documents omit.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NODE_WIDTH = 220.0
DEFAULT_NODE_HEIGHT = 100.0
# stacking floor; boxes without a stored zIndex sit here
DEFAULT_Z_INDEX = 15


class NodeStyle(str, Enum):
    """Visual style tag of a node."""

    page = "page"
    action = "action"
    decision = "decision"


class Node(BaseModel):
    """a positioned, titled box with an editable body."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    x: float
    y: float
    w: float = DEFAULT_NODE_WIDTH
    h: float = DEFAULT_NODE_HEIGHT
    title: str = ""
    body: str = ""
    type: NodeStyle = NodeStyle.page
    z_index: int = Field(default=DEFAULT_Z_INDEX, alias="zIndex")


class Link(BaseModel):
    """a directed reference between two node ids, drawn as a plain connector."""

    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    id: str | None = None
    label: str | None = None
