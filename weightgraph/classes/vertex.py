"""
Vertex representation for weighted directed graphs.

A vertex owns its outgoing edges, keyed by target label, and a visited flag
used by the traversal and search algorithms.
"""

from typing import Dict, Iterator, Optional

from .edge import pyedge
from .exceptions import DuplicateEdgeError, SelfLoopError


class pyvertex:
    """
    A labelled vertex with an adjacency mapping of outgoing edges.

    Invariants:
    - no edge targets the vertex's own label
    - at most one edge per target label

    Neighbors are always enumerated in lexicographic order of target label.
    """

    def __init__(self, label: str):
        """
        Create an unvisited vertex with no edges.

        Args:
            label: Unique, immutable label of the vertex
        """
        self._label = label
        self._edges: Dict[str, pyedge] = {}
        self._visited = False

    @property
    def label(self) -> str:
        """Label of this vertex."""
        return self._label

    # ========================================================================
    # VISITED STATE
    # ========================================================================

    def visit(self):
        """Mark this vertex as visited."""
        self._visited = True

    def unvisit(self):
        """Mark this vertex as not visited."""
        self._visited = False

    def is_visited(self) -> bool:
        return self._visited

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def connect(self, target: str, weight: int) -> pyedge:
        """
        Add an outgoing edge to the given target.

        Args:
            target: Label of the target vertex
            weight: Integer weight of the edge

        Returns:
            The newly created edge

        Raises:
            SelfLoopError: If target is this vertex's own label
            DuplicateEdgeError: If an edge to target already exists
        """
        if target == self._label:
            raise SelfLoopError(self._label)
        if target in self._edges:
            raise DuplicateEdgeError(self._label, target)

        edge = pyedge(target, weight)
        self._edges[target] = edge
        return edge

    def disconnect(self, target: str) -> bool:
        """
        Remove the edge to the given target.

        Returns:
            True if an edge was removed, False if there was none
        """
        if target in self._edges:
            del self._edges[target]
            return True
        return False

    def get_edge(self, target: str) -> Optional[pyedge]:
        return self._edges.get(target)

    def edge_weight(self, target: str) -> Optional[int]:
        """
        Get the weight of the edge to the given target.

        Returns:
            The edge weight, or None if this vertex has no edge to target
        """
        edge = self._edges.get(target)
        if edge is None:
            return None
        return edge.weight

    def get_number_of_neighbors(self) -> int:
        return len(self._edges)

    def neighbors(self) -> Iterator[str]:
        """
        Iterate over target labels in lexicographic order.

        Every call returns a new iterator that starts from the first neighbor,
        so no state carries over between traversals.
        """
        for target in sorted(self._edges):
            yield target

    def edges(self) -> Iterator[pyedge]:
        """Iterate over outgoing edges in lexicographic order of target."""
        for target in sorted(self._edges):
            yield self._edges[target]

    # ========================================================================
    # COMPARISON
    # ========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self._label == other._label

    def __lt__(self, other) -> bool:
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self._label < other._label

    def __hash__(self) -> int:
        return hash(self._label)

    def __repr__(self) -> str:
        return f"pyvertex({self._label!r}, edges={len(self._edges)})"
