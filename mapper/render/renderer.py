"""Projects a GraphModel onto a fresh Surface."""

import logging

from mapper.models.graph import Node
from mapper.models.graph_model import GraphModel
from mapper.render.surface import ConnectorPath, NodeElement, Surface, element_id_for

logger = logging.getLogger(__name__)


def right_center(node: Node) -> tuple[float, float]:
    return (node.x + node.w, node.y + node.h / 2)


def left_center(node: Node) -> tuple[float, float]:
    return (node.x, node.y + node.h / 2)


class Renderer:
    """Rebuilds the whole visual tree on every draw (no incremental diffing)."""

    def draw(self, model: GraphModel) -> Surface:
        elements = [
            NodeElement(
                element_id=element_id_for(node.id),
                node_id=node.id,
                x=node.x,
                y=node.y,
                w=node.w,
                h=node.h,
                title=node.title,
                body=node.body,
                style=node.type,
                z_index=node.z_index,
            )
            for node in model.nodes
        ]

        paths: list[ConnectorPath] = []
        skipped = 0
        for link in model.links:
            source = model.find_node(link.source)
            target = model.find_node(link.target)
            if source is None or target is None:
                # dangling endpoint: leave the link in the model, draw nothing
                skipped += 1
                continue
            paths.append(
                ConnectorPath(
                    source=link.source,
                    target=link.target,
                    start=right_center(source),
                    end=left_center(target),
                    label=link.label,
                )
            )

        if skipped:
            logger.debug("skipped %d link(s) with a missing endpoint", skipped)
        return Surface(elements, paths, skipped_links=skipped)
