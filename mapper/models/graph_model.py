"""In-memory node/link graph for one project.

Nodes live in an ordered arena indexed by id. The model owns its node and
link objects: everything handed in is copied on the way in, and ``nodes``,
``links`` and ``find_node`` hand out copies. Editing a returned node changes
nothing; edits go through the id-based mutation methods below.
"""

from __future__ import annotations

from collections.abc import Iterable

from mapper.models.graph import DEFAULT_Z_INDEX, Link, Node


class DuplicateNodeError(ValueError):
    """Raised when a node id is already present in the model."""


PLACEHOLDER_NODES = (
    Node(id="n1", x=100, y=100, title="Start", body=""),
    Node(id="n2", x=420, y=100, title="Next Step", body=""),
)
PLACEHOLDER_LINKS = (Link(source="n1", target="n2"),)


class GraphModel:
    """Ordered nodes plus links for a single project."""

    def __init__(
        self,
        nodes: Iterable[Node] = (),
        links: Iterable[Link] = (),
    ) -> None:
        self._nodes: list[Node] = []
        self._index: dict[str, int] = {}
        self._links: list[Link] = []
        self.replace_all(nodes, links)

    @classmethod
    def placeholder(cls) -> GraphModel:
        """The offline seed: two nodes and one link between them."""
        return cls(PLACEHOLDER_NODES, PLACEHOLDER_LINKS)

    @property
    def nodes(self) -> list[Node]:
        return [node.model_copy(deep=True) for node in self._nodes]

    @property
    def links(self) -> list[Link]:
        return [link.model_copy(deep=True) for link in self._links]

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def _reindex(self) -> None:
        index: dict[str, int] = {}
        for position, node in enumerate(self._nodes):
            if node.id in index:
                raise DuplicateNodeError(f"Duplicate node id: {node.id}")
            index[node.id] = position
        self._index = index

    def _get(self, node_id: str) -> Node | None:
        position = self._index.get(node_id)
        if position is None:
            return None
        return self._nodes[position]

    def replace_all(self, nodes: Iterable[Node], links: Iterable[Link]) -> None:
        """Swap in a whole new node and link set (used on load)."""
        previous_nodes, previous_index = self._nodes, self._index
        self._nodes = [node.model_copy(deep=True) for node in nodes]
        try:
            self._reindex()
        except DuplicateNodeError:
            self._nodes, self._index = previous_nodes, previous_index
            raise
        self._links = [link.model_copy(deep=True) for link in links]

    def find_node(self, node_id: str) -> Node | None:
        """A copy of the node with this id, or None."""
        node = self._get(node_id)
        return node.model_copy(deep=True) if node is not None else None

    def update_node_body(self, node_id: str, text: str) -> bool:
        """Set a node's body text. Returns False when the id is unknown."""
        node = self._get(node_id)
        if node is None:
            return False
        node.body = text
        return True

    def move_node(self, node_id: str, x: float, y: float) -> bool:
        node = self._get(node_id)
        if node is None:
            return False
        node.x = x
        node.y = y
        return True

    def top_z_index(self) -> int:
        """Highest stacking value in use, never below the default."""
        return max([DEFAULT_Z_INDEX, *(node.z_index for node in self._nodes)])

    def bring_to_front(self, node_id: str) -> bool:
        """Stack a node above every other node."""
        node = self._get(node_id)
        if node is None:
            return False
        node.z_index = self.top_z_index() + 1
        return True

    def add_node(self, node: Node) -> None:
        if node.id in self._index:
            raise DuplicateNodeError(f"Duplicate node id: {node.id}")
        self._index[node.id] = len(self._nodes)
        self._nodes.append(node.model_copy(deep=True))

    def remove_node(self, node_id: str) -> bool:
        """Drop a node and every link touching it."""
        if node_id not in self._index:
            return False
        self._nodes = [node for node in self._nodes if node.id != node_id]
        self._reindex()
        self._links = [
            link
            for link in self._links
            if link.source != node_id and link.target != node_id
        ]
        return True

    def add_link(self, link: Link) -> None:
        self._links.append(link.model_copy(deep=True))

    def remove_link(self, link_id: str) -> bool:
        remaining = [link for link in self._links if link.id != link_id]
        if len(remaining) == len(self._links):
            return False
        self._links = remaining
        return True

    def to_payload(self) -> tuple[list[Node], list[Link]]:
        """Detached copies of the current nodes and links for a save."""
        return self.nodes, self.links
