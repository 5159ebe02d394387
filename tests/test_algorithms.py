"""Tests for kahn_sort and reverse_order."""

import pytest

from dagsort import NO_VERTEX, CycleError, Graph, kahn_sort, reverse_order


class TestKahnSort:
    """Tests for the kahn_sort algorithm."""

    def test_empty_graph(self) -> None:
        assert kahn_sort(Graph.from_edges([])) == []

    def test_single_vertex(self) -> None:
        assert kahn_sort(Graph.from_edges([("a", NO_VERTEX)])) == ["a"]

    def test_linear_chain(self) -> None:
        graph = Graph.from_edges([("b", "c"), ("a", "b")])
        assert kahn_sort(graph) == ["a", "b", "c"]

    def test_diamond(self) -> None:
        graph = Graph.from_edges([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")])
        result = kahn_sort(graph)
        assert result[0] == "a"
        assert result[-1] == "d"
        assert set(result[1:3]) == {"b", "c"}

    def test_ready_vertices_are_taken_last_in_first_out(self) -> None:
        # a, b and c are all ready at the start; the last one seeded goes first
        graph = Graph.from_edges([("a", NO_VERTEX), ("b", NO_VERTEX), ("c", NO_VERTEX)])
        assert kahn_sort(graph) == ["c", "b", "a"]

    def test_same_graph_gives_same_order(self) -> None:
        edges = [("B", "D"), ("D", "E"), ("A", "B"), ("A", "C"), ("C", "D"), ("F", "C"), ("F", "E")]
        assert kahn_sort(Graph.from_edges(edges)) == kahn_sort(Graph.from_edges(edges))

    def test_parallel_edges_drain_fully(self) -> None:
        # c only becomes ready after both a -> c edges and b -> c are drained
        graph = Graph.from_edges([("a", "c"), ("a", "c"), ("b", "c"), ("a", "b")])
        assert kahn_sort(graph) == ["a", "b", "c"]

    def test_works_with_integers(self) -> None:
        assert kahn_sort(Graph.from_edges([(1, 2), (2, 3)])) == [1, 2, 3]

    def test_works_with_tuples(self) -> None:
        graph = Graph.from_edges([(("a", 1), ("b", 2))])
        assert kahn_sort(graph) == [("a", 1), ("b", 2)]

    def test_does_not_mutate_graph(self) -> None:
        graph = Graph.from_edges([("a", "b"), ("b", "c")])
        kahn_sort(graph)
        assert graph.in_degrees() == {"a": 0, "b": 1, "c": 1}


class TestCycleDetection:
    """Tests for cycle reporting."""

    def test_two_cycle(self) -> None:
        with pytest.raises(CycleError, match="cycle") as exc_info:
            kahn_sort(Graph.from_edges([("a", "b"), ("b", "a")]))
        assert set(exc_info.value.vertices) == {"a", "b"}

    def test_longer_cycle(self) -> None:
        with pytest.raises(CycleError):
            kahn_sort(Graph.from_edges([("a", "b"), ("b", "c"), ("c", "a")]))

    def test_reports_blocked_closure(self) -> None:
        # b <-> c is the cycle; d is only downstream of it; a and x/y are fine
        graph = Graph.from_edges([("a", "b"), ("b", "c"), ("c", "b"), ("c", "d"), ("x", "y")])
        with pytest.raises(CycleError) as exc_info:
            kahn_sort(graph)
        assert exc_info.value.vertices == ("b", "c", "d")

    def test_message_names_vertices(self) -> None:
        with pytest.raises(CycleError, match=r"graph contains cycle in nodes \[a, b\]"):
            kahn_sort(Graph.from_edges([("a", "b"), ("b", "a")]))

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            kahn_sort(Graph.from_edges([("a", "b"), ("b", "a")]))


class TestReverseOrder:
    """Tests for reverse_order."""

    def test_reverses(self) -> None:
        assert reverse_order(["a", "b", "c"]) == ["c", "b", "a"]

    def test_empty(self) -> None:
        assert reverse_order([]) == []

    def test_returns_new_list(self) -> None:
        order = ["a", "b"]
        result = reverse_order(order)
        assert order == ["a", "b"]
        assert result is not order

    def test_accepts_tuples(self) -> None:
        assert reverse_order(("a", "b")) == ["b", "a"]

    def test_reversed_order_sorts_transposed_graph(self) -> None:
        graph = Graph.from_edges([("a", "b"), ("a", "c"), ("c", "b"), ("b", "d")])
        reversed_order = reverse_order(kahn_sort(graph))
        position = {v: i for i, v in enumerate(reversed_order)}
        for src in graph.transpose():
            for dst in graph.transpose().destinations(src):
                assert position[src] < position[dst]
