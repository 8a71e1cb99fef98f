"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from weightgraph import pyweightgraph


@pytest.fixture
def triangle_graph() -> pyweightgraph:
    """Return the graph A->B=1, B->C=2, A->C=5."""
    graph = pyweightgraph()
    graph.add("A", "B", 1)
    graph.add("B", "C", 2)
    graph.add("A", "C", 5)
    return graph


@pytest.fixture
def cyclic_graph() -> pyweightgraph:
    """Return a graph with a cycle A->B->C->A and a branch off C."""
    graph = pyweightgraph()
    graph.add("A", "B", 2)
    graph.add("B", "C", 3)
    graph.add("C", "A", 1)
    graph.add("C", "D", 4)
    return graph


@pytest.fixture
def city_graph() -> pyweightgraph:
    """Return a larger graph with an unreachable component."""
    graph = pyweightgraph()
    edges = [
        ("A", "B", 4), ("A", "C", 2), ("B", "E", 3), ("C", "B", 1),
        ("C", "D", 8), ("C", "E", 10), ("D", "E", 2), ("E", "F", 1),
        ("D", "F", 6), ("X", "Y", 1), ("Y", "A", 1),
    ]
    for start, end, weight in edges:
        graph.add(start, end, weight)
    return graph


@pytest.fixture
def edge_list_file(tmp_path):
    """Return the path of an edge-list file describing the triangle graph."""
    path = tmp_path / "triangle.txt"
    path.write_text("3\nA B 1\nB C 2\nA C 5\n", encoding="utf-8")
    return path
