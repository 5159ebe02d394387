"""Tests for Edge and the NO_VERTEX sentinel."""

import pytest

from dagsort import NO_VERTEX, Edge, EdgeTypeError, EmptyEdgeError, NoVertex, SelfLoopError


class TestNoVertex:
    def test_is_singleton(self) -> None:
        assert NoVertex("NO_VERTEX") is NO_VERTEX
        assert len(NoVertex) == 1

    def test_is_not_none(self) -> None:
        assert NO_VERTEX is not None
        assert NO_VERTEX != None  # noqa: E711

    def test_repr(self) -> None:
        assert repr(NO_VERTEX) == "NO_VERTEX"


class TestEdge:
    def test_fields_and_unpacking(self) -> None:
        edge = Edge("a", "b")
        src, dst = edge
        assert (src, dst) == ("a", "b")
        assert edge.source == "a"
        assert edge.destination == "b"

    def test_is_hashable_and_frozen(self) -> None:
        edge = Edge("a", "b")
        assert {edge, Edge("a", "b")} == {edge}
        with pytest.raises(AttributeError):
            edge.source = "c"  # type: ignore[misc]

    def test_vertex_declaration(self) -> None:
        edge = Edge.vertex("w")
        assert edge == Edge("w", NO_VERTEX)
        assert edge.is_declaration

    def test_regular_edge_is_not_declaration(self) -> None:
        assert not Edge("a", "b").is_declaration
        assert not Edge(NO_VERTEX, NO_VERTEX).is_declaration

    def test_reversed(self) -> None:
        assert Edge("a", "b").reversed() == Edge("b", "a")
        assert Edge.vertex("w").reversed() == Edge(NO_VERTEX, "w")


class TestEdgeCoerce:
    def test_edge_passes_through(self) -> None:
        edge = Edge("a", "b")
        assert Edge.coerce(edge) is edge

    def test_tuple_and_list(self) -> None:
        assert Edge.coerce(("a", "b")) == Edge("a", "b")
        assert Edge.coerce(["a", NO_VERTEX]) == Edge.vertex("a")  # type: ignore[arg-type]

    @pytest.mark.parametrize("item", ["ab", b"ab", 1, None, ("a", "b", "c")])
    def test_rejects_non_pairs(self, item: object) -> None:
        with pytest.raises(EdgeTypeError, match="pair"):
            Edge.coerce(item)  # type: ignore[arg-type]


class TestEdgeValidate:
    def test_valid_edges(self) -> None:
        Edge("a", "b").validate()
        Edge.vertex("a").validate()
        Edge(NO_VERTEX, "a").validate()

    def test_self_loop(self) -> None:
        with pytest.raises(SelfLoopError) as exc_info:
            Edge("a", "a").validate()
        assert exc_info.value.vertex == "a"

    def test_empty_edge(self) -> None:
        with pytest.raises(EmptyEdgeError, match="at least one vertex"):
            Edge(NO_VERTEX, NO_VERTEX).validate()
