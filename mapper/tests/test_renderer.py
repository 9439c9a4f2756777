"""Tests for drawing a GraphModel onto a Surface."""

from mapper.models.graph import Link, Node, NodeStyle
from mapper.models.graph_model import GraphModel
from mapper.render.renderer import Renderer


def _draw(model: GraphModel):
    return Renderer().draw(model)


class TestNodeElements:
    """Test node boxes on the surface."""

    def test_one_element_per_node_with_prefixed_id(self):
        """Each node gets one box whose element id is node- plus its id."""
        surface = _draw(GraphModel.placeholder())
        assert [e.element_id for e in surface.elements] == ["node-n1", "node-n2"]
        assert surface.element_by_id("node-n2").node_id == "n2"
        assert surface.element_by_id("n2") is None

    def test_geometry_and_style_copied(self):
        """Boxes take position, size, style and stacking from the node."""
        model = GraphModel([
            Node(
                id="a", x=10, y=20, w=150, h=150,
                title="T", type=NodeStyle.decision, z_index=40,
            ),
        ])
        element = _draw(model).element("a")
        assert (element.x, element.y, element.w, element.h) == (10, 20, 150, 150)
        assert element.style == NodeStyle.decision
        assert element.z_index == 40
        assert "z-index: 40;" in element.to_html()


class TestConnectors:
    """Test connector paths between node boxes."""

    def test_right_center_to_left_center(self):
        """Connectors run from the source right edge to the target left edge."""
        model = GraphModel(
            [
                Node(id="a", x=0, y=0, w=200, h=100),
                Node(id="b", x=400, y=50, w=200, h=60),
            ],
            [Link(source="a", target="b")],
        )
        surface = _draw(model)
        assert len(surface.paths) == 1
        path = surface.paths[0]
        assert path.start == (200, 50)
        assert path.end == (400, 80)
        assert path.d == "M200 50 L400 80"

    def test_missing_endpoint_is_skipped(self):
        """A link to an unknown node draws nothing and raises nothing."""
        model = GraphModel(
            [Node(id="n1", x=0, y=0)],
            [Link(source="n1", target="n2")],
        )
        surface = _draw(model)
        assert surface.paths == []
        assert surface.skipped_links == 1
        # the link itself stays in the model
        assert len(model.links) == 1

    def test_missing_source_is_skipped(self):
        """Only links with both endpoints present are drawn."""
        model = GraphModel(
            [Node(id="n2", x=0, y=0)],
            [Link(source="n1", target="n2"), Link(source="n2", target="n2")],
        )
        surface = _draw(model)
        assert [(p.source, p.target) for p in surface.paths] == [("n2", "n2")]

    def test_label_rendered_at_midpoint(self):
        """A link label is drawn as text on the connector."""
        model = GraphModel(
            [Node(id="a", x=0, y=0), Node(id="b", x=400, y=0)],
            [Link(source="a", target="b", label="Next Step")],
        )
        markup = _draw(model).to_html()
        assert 'class="link-label"' in markup
        assert "Next Step" in markup


class TestIdempotence:
    """Drawing twice gives the same visible node and link set."""

    def test_draw_twice(self):
        """A second draw rebuilds an equal surface."""
        renderer = Renderer()
        model = GraphModel.placeholder()
        first = renderer.draw(model)
        second = renderer.draw(model)
        assert first is not second
        assert first.elements == second.elements
        assert first.paths == second.paths
        assert first.to_html() == second.to_html()


class TestEscaping:
    """Text is escaped before it reaches the markup."""

    def test_body_script_is_literal_text(self):
        """Markup in a body is shown as text."""
        model = GraphModel([Node(id="n1", x=0, y=0, title="T", body="<script>")])
        markup = _draw(model).to_html()
        assert "&lt;script&gt;" in markup
        assert "<script>" not in markup

    def test_all_special_characters(self):
        """Ampersand, angle brackets and both quotes are escaped."""
        model = GraphModel([Node(id="n1", x=0, y=0, title="a & b \"c\" 'd'", body="")])
        markup = _draw(model).to_html()
        assert "a &amp; b &quot;c&quot; &#x27;d&#x27;" in markup

    def test_body_region_carries_node_id(self):
        """The editable region is tagged with its node id."""
        markup = _draw(GraphModel.placeholder()).to_html()
        assert 'id="node-n1"' in markup
        assert 'contenteditable="true" data-node-id="n1"' in markup


class TestBodyCommit:
    """Test routing of committed body edits on the surface."""

    def test_commit_updates_element_and_notifies(self):
        """A commit updates the element and reaches listeners."""
        surface = _draw(GraphModel.placeholder())
        received = []
        surface.on_body_commit(lambda node_id, text: received.append((node_id, text)))

        assert surface.commit_body("n1", "Task A") is True
        assert surface.element("n1").body == "Task A"
        assert received == [("n1", "Task A")]

    def test_commit_to_unknown_region(self):
        """A commit for an unknown id is ignored."""
        surface = _draw(GraphModel.placeholder())
        received = []
        surface.on_body_commit(lambda node_id, text: received.append(node_id))
        assert surface.commit_body("ghost", "x") is False
        assert received == []
