"""
Depth-first and breadth-first traversal of weighted graphs.

Both traversals visit neighbors in lexicographic order and rely solely on
the per-vertex visited flag to terminate on cycles.
"""

import logging
from typing import Callable, Iterator, List, Optional, Tuple
from collections import deque

from ..classes.vertex import pyvertex
from ..core.graph import WeightGraph

logger = logging.getLogger(__name__)

Visitor = Callable[[str], None]


class GraphTraverser:
    """
    Traversal algorithms for weighted graphs.

    Every traversal starts by resetting the visited state of the whole graph,
    so repeated calls on an unmodified graph produce the same order. Two
    traversals on the same graph must not be interleaved.
    """

    def __init__(self, graph: WeightGraph):
        """
        Initialize the traverser.

        Args:
            graph: WeightGraph instance to traverse
        """
        self.graph = graph

    def depth_first(self, start: str, visitor: Optional[Visitor] = None) -> List[str]:
        """
        Depth-first traversal from start.

        Uses an explicit stack of neighbor iterators, which gives the same
        order as the recursive formulation for graphs of any depth.

        Args:
            start: Label of the start vertex
            visitor: Optional callback invoked once per reachable label

        Returns:
            Labels in the order they were visited

        Raises:
            UnknownVertexError: If start is not in the graph
        """
        start_vertex = self.graph.get_vertex(start)
        self.graph.unvisit_vertices()

        order: List[str] = []
        self._visit(start_vertex, visitor, order)
        stack: List[Tuple[pyvertex, Iterator[str]]] = [(start_vertex, start_vertex.neighbors())]

        while stack:
            _, neighbors = stack[-1]
            for label in neighbors:
                neighbor = self.graph.vertices[label]
                if not neighbor.is_visited():
                    self._visit(neighbor, visitor, order)
                    stack.append((neighbor, neighbor.neighbors()))
                    break
            else:
                stack.pop()

        logger.debug(f"Depth-first traversal from {start} visited {len(order)} vertices")
        return order

    def breadth_first(self, start: str, visitor: Optional[Visitor] = None) -> List[str]:
        """
        Breadth-first traversal from start.

        Vertices are visited in non-decreasing hop distance from start.

        Args:
            start: Label of the start vertex
            visitor: Optional callback invoked once per reachable label

        Returns:
            Labels in the order they were visited

        Raises:
            UnknownVertexError: If start is not in the graph
        """
        start_vertex = self.graph.get_vertex(start)
        self.graph.unvisit_vertices()

        order: List[str] = []
        self._visit(start_vertex, visitor, order)
        queue = deque([start_vertex])

        while queue:
            current = queue.popleft()
            for label in current.neighbors():
                neighbor = self.graph.vertices[label]
                if not neighbor.is_visited():
                    self._visit(neighbor, visitor, order)
                    queue.append(neighbor)

        logger.debug(f"Breadth-first traversal from {start} visited {len(order)} vertices")
        return order

    @staticmethod
    def _visit(vertex: pyvertex, visitor: Optional[Visitor], order: List[str]):
        vertex.visit()
        order.append(vertex.label)
        if visitor is not None:
            visitor(vertex.label)
