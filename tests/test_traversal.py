"""
Unit tests for depth-first and breadth-first traversal.
"""

import pytest

from weightgraph import UnknownVertexError, pyweightgraph


class TestDepthFirst:
    """Test depth-first traversal."""

    def test_order(self, city_graph):
        """Should descend into neighbors in lexicographic order."""
        visited = []
        order = city_graph.depth_first_traversal("A", visited.append)
        assert visited == ["A", "B", "E", "F", "C", "D"]
        assert order == visited

    def test_cycle_terminates(self, cyclic_graph):
        """Should visit each vertex once even with a cycle back to start."""
        visited = []
        cyclic_graph.depth_first_traversal("A", visited.append)
        assert visited == ["A", "B", "C", "D"]

    def test_unreachable_not_visited(self, city_graph):
        visited = []
        city_graph.depth_first_traversal("A", visited.append)
        assert "X" not in visited
        assert "Y" not in visited

    def test_isolated_start(self):
        graph = pyweightgraph()
        graph.add("A", "A", 1)
        assert graph.depth_first_traversal("A") == ["A"]

    def test_unknown_start(self, triangle_graph):
        """Should raise and never call the visitor."""
        calls = []
        with pytest.raises(UnknownVertexError):
            triangle_graph.depth_first_traversal("nonexistent", calls.append)
        assert calls == []

    def test_repeatable(self, city_graph):
        """Repeated traversals should give identical orders."""
        first = city_graph.depth_first_traversal("C")
        second = city_graph.depth_first_traversal("C")
        assert first == second

    def test_deep_chain(self):
        """Should handle chains longer than the interpreter recursion limit."""
        graph = pyweightgraph()
        labels = [f"v{i:05d}" for i in range(5000)]
        for start, end in zip(labels, labels[1:]):
            graph.add(start, end, 1)
        assert graph.depth_first_traversal(labels[0]) == labels


class TestBreadthFirst:
    """Test breadth-first traversal."""

    def test_order(self, city_graph):
        visited = []
        order = city_graph.breadth_first_traversal("A", visited.append)
        assert visited == ["A", "B", "C", "E", "D", "F"]
        assert order == visited

    def test_cycle_terminates(self, cyclic_graph):
        assert cyclic_graph.breadth_first_traversal("B") == ["B", "C", "A", "D"]

    def test_non_decreasing_hops(self, city_graph):
        """Hop distance from start should never decrease along the order."""
        order = city_graph.breadth_first_traversal("X")
        hops = {"X": 0}
        for label in order:
            for neighbor in city_graph.get_neighbors(label):
                hops.setdefault(neighbor, hops[label] + 1)
        distances = [hops[label] for label in order]
        assert distances == sorted(distances)

    def test_unknown_start(self, triangle_graph):
        calls = []
        with pytest.raises(UnknownVertexError):
            triangle_graph.breadth_first_traversal("nonexistent", calls.append)
        assert calls == []


class TestTraversalAgreement:
    """Test properties shared by both traversals."""

    @pytest.mark.parametrize("start", ["A", "C", "D", "X", "F"])
    def test_same_reachable_set(self, city_graph, start):
        """Both traversals should visit exactly the reachable set."""
        dfs = city_graph.depth_first_traversal(start)
        bfs = city_graph.breadth_first_traversal(start)
        assert set(dfs) == set(bfs) == city_graph.find_reachable(start)
        assert len(dfs) == len(set(dfs))

    def test_interleaved_traversals(self, city_graph):
        """A traversal should not be affected by an earlier one."""
        city_graph.breadth_first_traversal("X")
        assert city_graph.depth_first_traversal("A") == ["A", "B", "E", "F", "C", "D"]
