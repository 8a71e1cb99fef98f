"""
Unit tests for graph construction and queries.
"""

import logging

import pytest

from weightgraph import NO_EDGE, UnknownVertexError, pyweightgraph
from weightgraph.core.graph import WeightGraph


class TestAdd:
    """Test incremental edge construction."""

    def test_add_creates_vertices(self):
        """Both endpoints should exist after a successful add."""
        graph = pyweightgraph()
        assert graph.add("A", "B", 3) is True
        assert graph.get_num_vertices() == 2
        assert graph.get_num_edges() == 1
        assert "A" in graph and "B" in graph

    def test_self_loop_rejected(self):
        """Should return False and create no edge."""
        graph = pyweightgraph()
        assert graph.add("A", "A", 1) is False
        assert graph.get_num_edges() == 0
        assert graph.edge_weight("A", "A") is None

    def test_self_loop_keeps_vertex(self):
        """A vertex created by a rejected add is retained."""
        graph = pyweightgraph()
        graph.add("A", "A", 1)
        assert graph.get_num_vertices() == 1
        assert graph.get_neighbors("A") == []

    def test_duplicate_keeps_first_weight(self):
        """A second add for the same pair should fail without overwriting."""
        graph = pyweightgraph()
        assert graph.add("A", "B", 1) is True
        assert graph.add("A", "B", 2) is False
        assert graph.get_edge_weight("A", "B") == 1
        assert graph.get_num_edges() == 1

    def test_reverse_edge_is_distinct(self):
        """A->B and B->A are different edges."""
        graph = pyweightgraph()
        assert graph.add("A", "B", 1) is True
        assert graph.add("B", "A", 2) is True
        assert graph.get_num_edges() == 2

    def test_rejected_add_logs_warning(self, caplog):
        graph = pyweightgraph()
        graph.add("A", "B", 1)
        with caplog.at_level(logging.WARNING, logger="weightgraph.core.graph"):
            graph.add("A", "B", 5)
        assert "Rejected edge A -> B" in caplog.text

    def test_vertex_count_is_distinct_labels(self):
        """Vertex count should equal the distinct labels across all calls."""
        graph = pyweightgraph()
        calls = [("A", "B", 1), ("B", "C", 1), ("A", "B", 2), ("D", "D", 1), ("C", "A", 1)]
        labels = set()
        for start, end, weight in calls:
            graph.add(start, end, weight)
            labels.update([start, end])
        assert graph.get_num_vertices() == len(labels)

    def test_no_self_loops_after_any_sequence(self, cyclic_graph):
        cyclic_graph.add("B", "B", 1)
        for label in cyclic_graph.get_vertex_labels():
            assert label not in cyclic_graph.get_neighbors(label)


class TestRemoveEdge:
    """Test edge removal."""

    def test_remove_existing(self, triangle_graph):
        assert triangle_graph.remove_edge("A", "C") is True
        assert triangle_graph.edge_weight("A", "C") is None
        assert triangle_graph.get_num_edges() == 2
        assert triangle_graph.get_num_vertices() == 3

    def test_remove_missing(self, triangle_graph):
        """Should return False for a missing edge or unknown start."""
        assert triangle_graph.remove_edge("C", "A") is False
        assert triangle_graph.remove_edge("Z", "A") is False
        assert triangle_graph.get_num_edges() == 3

    def test_readd_with_new_weight(self, triangle_graph):
        triangle_graph.remove_edge("A", "C")
        assert triangle_graph.add("A", "C", 1) is True
        assert triangle_graph.get_edge_weight("A", "C") == 1


class TestEdgeWeight:
    """Test edge weight lookup on the graph."""

    def test_existing(self, triangle_graph):
        assert triangle_graph.get_edge_weight("A", "B") == 1
        assert triangle_graph.edge_weight("B", "C") == 2

    def test_missing_edge_sentinel(self, triangle_graph):
        """Should return NO_EDGE for a missing edge."""
        assert triangle_graph.get_edge_weight("C", "A") == NO_EDGE
        assert NO_EDGE == 2**31 - 1

    def test_missing_start_sentinel(self, triangle_graph):
        """Should not fail when the start vertex does not exist."""
        assert triangle_graph.get_edge_weight("Z", "A") == NO_EDGE
        assert triangle_graph.edge_weight("Z", "A") is None

    def test_zero_weight_is_not_absent(self):
        graph = pyweightgraph()
        graph.add("A", "B", 0)
        assert graph.get_edge_weight("A", "B") == 0
        assert graph.edge_weight("A", "B") == 0


class TestQueries:
    """Test vertex and edge queries."""

    def test_vertex_labels_sorted(self, city_graph):
        assert city_graph.get_vertex_labels() == ["A", "B", "C", "D", "E", "F", "X", "Y"]
        assert len(city_graph) == 8

    def test_get_edges_sorted(self, triangle_graph):
        assert triangle_graph.get_edges() == [("A", "B", 1), ("A", "C", 5), ("B", "C", 2)]

    def test_get_neighbors_unknown(self, triangle_graph):
        with pytest.raises(UnknownVertexError):
            triangle_graph.get_neighbors("Z")

    def test_find_vertex(self, triangle_graph):
        assert triangle_graph.find_vertex("A").label == "A"
        assert triangle_graph.find_vertex("Z") is None

    def test_empty_graph(self):
        graph = pyweightgraph()
        assert graph.get_num_vertices() == 0
        assert graph.get_num_edges() == 0
        assert graph.get_edges() == []

    def test_repr(self, triangle_graph):
        assert repr(triangle_graph) == "pyweightgraph(vertices=3, edges=3)"


class TestWeightGraph:
    """Test the core graph structure directly."""

    def test_unvisit_vertices(self):
        graph = WeightGraph()
        graph.add("A", "B", 1)
        for vertex in graph.vertices.values():
            vertex.visit()
        graph.unvisit_vertices()
        assert not any(v.is_visited() for v in graph.vertices.values())

    def test_get_vertex_unknown(self):
        """Should raise an error that is also a KeyError."""
        graph = WeightGraph()
        with pytest.raises(KeyError):
            graph.get_vertex("A")

    def test_iter_edges_sorted(self):
        """Should yield edges by start label, then end label, not insertion order."""
        graph = WeightGraph()
        graph.add("B", "A", 1)
        graph.add("A", "C", 2)
        graph.add("A", "B", 3)
        assert list(graph.iter_edges()) == [("A", "B", 3), ("A", "C", 2), ("B", "A", 1)]
