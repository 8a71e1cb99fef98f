"""
Core graph data structure for weighted directed graphs.

This module provides the fundamental graph structure without traversal or
search algorithms.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ..classes.vertex import pyvertex
from ..classes.exceptions import ConnectError, UnknownVertexError
from ..config import NO_EDGE

logger = logging.getLogger(__name__)


class WeightGraph:
    """
    Core graph data structure for weighted directed graphs.

    This class exclusively owns all vertices, keyed by label. It provides:
    - Incremental edge construction (vertices are created on first reference)
    - Edge removal
    - Vertex and edge lookups and counts
    - Resetting of per-vertex visited state before a traversal or search
    """

    def __init__(self):
        """Initialize an empty graph."""
        self.vertices: Dict[str, pyvertex] = {}
        self.nEdge = 0

        logger.debug("Initializing empty WeightGraph")

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    def add(self, start: str, end: str, weight: int) -> bool:
        """
        Add a directed edge, creating missing vertices first.

        Vertices created here are kept even if the edge itself is rejected,
        so a graph may contain isolated vertices.

        Args:
            start: Label of the source vertex
            end: Label of the target vertex
            weight: Integer edge weight

        Returns:
            True if the edge was added, False for a self-loop or duplicate edge
        """
        start_vertex = self.find_or_create_vertex(start)
        self.find_or_create_vertex(end)

        try:
            start_vertex.connect(end, weight)
        except ConnectError as e:
            logger.warning(f"Rejected edge {start} -> {end} ({weight}): {e}")
            return False

        self.nEdge += 1
        logger.debug(f"Added edge {start} -> {end} ({weight})")
        return True

    def remove_edge(self, start: str, end: str) -> bool:
        """
        Remove the directed edge from start to end.

        Returns:
            True if the edge existed and was removed
        """
        start_vertex = self.vertices.get(start)
        if start_vertex is None:
            return False

        if start_vertex.disconnect(end):
            self.nEdge -= 1
            logger.debug(f"Removed edge {start} -> {end}")
            return True
        return False

    def find_or_create_vertex(self, label: str) -> pyvertex:
        vertex = self.vertices.get(label)
        if vertex is None:
            vertex = pyvertex(label)
            self.vertices[label] = vertex
            logger.debug(f"Created vertex {label}")
        return vertex

    # ========================================================================
    # QUERIES
    # ========================================================================

    def find_vertex(self, label: str) -> Optional[pyvertex]:
        """
        Get a vertex by its label.

        Returns:
            The vertex object, or None if not found
        """
        return self.vertices.get(label)

    def get_vertex(self, label: str) -> pyvertex:
        """
        Get a vertex by its label, failing if it does not exist.

        Raises:
            UnknownVertexError: If no vertex has this label
        """
        vertex = self.vertices.get(label)
        if vertex is None:
            raise UnknownVertexError(label)
        return vertex

    def has_vertex(self, label: str) -> bool:
        return label in self.vertices

    def get_vertex_labels(self) -> List[str]:
        """Get all vertex labels in lexicographic order."""
        return sorted(self.vertices)

    def get_num_vertices(self) -> int:
        return len(self.vertices)

    def get_num_edges(self) -> int:
        return self.nEdge

    def edge_weight(self, start: str, end: str) -> Optional[int]:
        """
        Get the weight of the edge from start to end.

        Returns:
            The weight, or None if start does not exist or has no such edge
        """
        start_vertex = self.vertices.get(start)
        if start_vertex is None:
            return None
        return start_vertex.edge_weight(end)

    def get_edge_weight(self, start: str, end: str) -> int:
        """
        Get the weight of the edge from start to end.

        Returns:
            The weight, or NO_EDGE if start does not exist or has no such edge
        """
        weight = self.edge_weight(start, end)
        if weight is None:
            return NO_EDGE
        return weight

    def iter_edges(self) -> Iterator[Tuple[str, str, int]]:
        """Iterate over (start, end, weight) sorted by start then end label."""
        for label in sorted(self.vertices):
            for edge in self.vertices[label].edges():
                yield label, edge.target, edge.weight

    # ========================================================================
    # TRAVERSAL STATE
    # ========================================================================

    def unvisit_vertices(self):
        """Mark every vertex as not visited."""
        for vertex in self.vertices.values():
            vertex.unvisit()
