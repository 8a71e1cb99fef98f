"""
Main facade class for weighted directed graphs.

This module provides the pyweightgraph class, which owns the core graph and
delegates traversal, search and analysis to specialized modules.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from ..classes.vertex import pyvertex
from .graph import WeightGraph
from ..analysis.traversal import GraphTraverser, Visitor
from ..analysis.pathfinding import PathFinder
from ..analysis.detection import CycleDetector
from ..analysis.matrix import to_adjacency_matrix
from ..formats.read_edge_list import read_edge_list
from ..formats.export_edge_list import export_edge_list

logger = logging.getLogger(__name__)


class pyweightgraph:
    """
    A directed graph with integer edge weights.

    Vertices are identified by string labels and created the first time an
    edge mentions them. Each vertex has at most one edge to any other vertex
    and never an edge to itself.

    Example:
        >>> graph = pyweightgraph()
        >>> graph.add("A", "B", 1)
        True
        >>> graph.add("B", "C", 2)
        True
        >>> graph.add("A", "C", 5)
        True
        >>> graph.shortest_paths("A")
        ({'B': 1, 'C': 3}, {'B': 'A', 'C': 'B'})
    """

    def __init__(self):
        """Initialize an empty graph and its analysis components."""
        self._graph = WeightGraph()

        self._traverser = GraphTraverser(self._graph)
        self._pathfinder = PathFinder(self._graph)
        self._detector = CycleDetector(self._graph)

    @classmethod
    def from_edge_list(cls, sFilename: str) -> "pyweightgraph":
        """Create a graph from an edge-list file."""
        graph = cls()
        graph.read_file(sFilename)
        return graph

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    def add(self, start: str, end: str, weight: int) -> bool:
        """
        Add a directed edge from start to end, creating missing vertices.

        Returns:
            False if the edge is a self-loop or already exists; the vertices
            are created either way
        """
        return self._graph.add(start, end, weight)

    def remove_edge(self, start: str, end: str) -> bool:
        """Remove the edge from start to end, returning whether it existed."""
        return self._graph.remove_edge(start, end)

    def read_file(self, sFilename: str) -> int:
        """Add every edge listed in an edge-list file, returning how many were added."""
        return read_edge_list(sFilename, self._graph)

    def write_file(self, sFilename: str) -> int:
        """Write all edges to an edge-list file, returning how many were written."""
        return export_edge_list(self._graph, sFilename)

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_num_vertices(self) -> int:
        return self._graph.get_num_vertices()

    def get_num_edges(self) -> int:
        return self._graph.get_num_edges()

    def get_edge_weight(self, start: str, end: str) -> int:
        """Get the edge weight, or NO_EDGE if there is no such edge."""
        return self._graph.get_edge_weight(start, end)

    def edge_weight(self, start: str, end: str) -> Optional[int]:
        """Get the edge weight, or None if there is no such edge."""
        return self._graph.edge_weight(start, end)

    def has_vertex(self, label: str) -> bool:
        return self._graph.has_vertex(label)

    def find_vertex(self, label: str) -> Optional[pyvertex]:
        return self._graph.find_vertex(label)

    def get_vertex_labels(self) -> List[str]:
        return self._graph.get_vertex_labels()

    def get_neighbors(self, label: str) -> List[str]:
        """Get the sorted neighbor labels of a vertex."""
        return list(self._graph.get_vertex(label).neighbors())

    def get_edges(self) -> List[Tuple[str, str, int]]:
        """Get all edges as (start, end, weight), sorted by start then end."""
        return list(self._graph.iter_edges())

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def depth_first_traversal(self, start: str, visitor: Optional[Visitor] = None) -> List[str]:
        """Depth-first traversal from start, calling visitor on each label."""
        return self._traverser.depth_first(start, visitor)

    def breadth_first_traversal(self, start: str, visitor: Optional[Visitor] = None) -> List[str]:
        """Breadth-first traversal from start, calling visitor on each label."""
        return self._traverser.breadth_first(start, visitor)

    # ========================================================================
    # SHORTEST PATHS
    # ========================================================================

    def shortest_paths(self, start: str) -> Tuple[Dict[str, int], Dict[str, str]]:
        """Lowest cost and predecessor of every vertex reachable from start."""
        return self._pathfinder.shortest_paths(start)

    def shortest_path(self, start: str, end: str) -> List[str]:
        return self._pathfinder.shortest_path(start, end)

    def shortest_distance(self, start: str, end: str) -> Optional[int]:
        return self._pathfinder.shortest_distance(start, end)

    def find_all_paths(self, start: str, end: str, max_depth: Optional[int] = None) -> List[List[str]]:
        return self._pathfinder.find_all_paths(start, end, max_depth)

    def find_reachable(self, start: str) -> Set[str]:
        return self._pathfinder.find_reachable(start)

    def find_reaching(self, end: str) -> Set[str]:
        return self._pathfinder.find_reaching(end)

    # ========================================================================
    # STRUCTURAL ANALYSIS
    # ========================================================================

    def find_cycles(self) -> List[List[str]]:
        return self._detector.find_cycles()

    def has_cycle(self) -> bool:
        return self._detector.has_cycle()

    def topological_sort(self) -> List[str]:
        return self._detector.topological_sort()

    def strongly_connected_components(self) -> List[List[str]]:
        return self._detector.strongly_connected_components()

    def to_adjacency_matrix(self, labels: Optional[List[str]] = None,
                            no_edge: float = np.inf) -> Tuple[List[str], np.ndarray]:
        """Dense weight matrix; see weightgraph.analysis.matrix.to_adjacency_matrix."""
        return to_adjacency_matrix(self._graph, labels, no_edge)

    def __len__(self) -> int:
        return self._graph.get_num_vertices()

    def __contains__(self, label: str) -> bool:
        return self._graph.has_vertex(label)

    def __repr__(self) -> str:
        return f"pyweightgraph(vertices={self.get_num_vertices()}, edges={self.get_num_edges()})"
