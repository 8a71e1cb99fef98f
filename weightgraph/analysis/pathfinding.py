"""
Path finding and reachability analysis for weighted graphs.

This module provides single-source shortest paths (Dijkstra), path
reconstruction, simple path enumeration and reachability queries.
"""

import heapq
import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple
from collections import deque

from ..classes.exceptions import NegativeWeightError
from ..core.graph import WeightGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for weighted graphs.

    This class provides methods for:
    - Computing shortest distances and predecessors from a start vertex
    - Reconstructing a shortest path to a single target
    - Finding all simple paths between two vertices
    - Analyzing reachability
    """

    def __init__(self, graph: WeightGraph):
        """
        Initialize the path finder.

        Args:
            graph: WeightGraph instance to analyze
        """
        self.graph = graph

    def shortest_paths(self, start: str) -> Tuple[Dict[str, int], Dict[str, str]]:
        """
        Compute the lowest cost from start to every reachable vertex.

        Dijkstra's algorithm with a binary heap. Instead of decrease-key, a
        vertex is pushed again whenever its distance improves and stale heap
        entries are skipped once the vertex is settled. A vertex is settled
        when it is marked visited.

        On equal candidate distances the predecessor recorded first is kept.

        Args:
            start: Label of the start vertex

        Returns:
            Tuple of (distance, predecessor) dictionaries. distance["F"] = 10
            means the cost to reach "F" is 10; predecessor["F"] = "C" means
            "F" is reached via "C". The start vertex and unreachable vertices
            appear in neither.

        Raises:
            UnknownVertexError: If start is not in the graph
            NegativeWeightError: If a relaxed edge has negative weight
        """
        self.graph.get_vertex(start)
        self.graph.unvisit_vertices()

        distance: Dict[str, int] = {start: 0}
        predecessor: Dict[str, str] = {}
        heap: List[Tuple[int, str]] = [(0, start)]

        while heap:
            current_distance, label = heapq.heappop(heap)
            vertex = self.graph.vertices[label]
            if vertex.is_visited():
                continue
            vertex.visit()

            for edge in vertex.edges():
                if edge.weight < 0:
                    raise NegativeWeightError(label, edge.target, edge.weight)

                candidate = current_distance + edge.weight
                known = distance.get(edge.target)
                if known is None or candidate < known:
                    distance[edge.target] = candidate
                    predecessor[edge.target] = label
                    heapq.heappush(heap, (candidate, edge.target))

        del distance[start]
        logger.debug(f"Shortest paths from {start} reached {len(distance)} vertices")
        return distance, predecessor

    def shortest_path(self, start: str, end: str) -> List[str]:
        """
        Get the lowest-cost path from start to end.

        Args:
            start: Label of the start vertex
            end: Label of the target vertex

        Returns:
            List of labels from start to end inclusive, [start] if start and
            end are the same, or an empty list if end is unreachable
        """
        if start == end:
            self.graph.get_vertex(start)
            return [start]

        _, predecessor = self.shortest_paths(start)
        if end not in predecessor:
            return []

        path = [end]
        while path[-1] != start:
            path.append(predecessor[path[-1]])
        path.reverse()
        return path

    def shortest_distance(self, start: str, end: str) -> Optional[int]:
        """
        Get the lowest cost from start to end.

        Returns:
            The cost, 0 if start and end are the same, or None if unreachable
        """
        if start == end:
            self.graph.get_vertex(start)
            return 0

        distance, _ = self.shortest_paths(start)
        return distance.get(end)

    def find_all_paths(self, start: str, end: str, max_depth: Optional[int] = None) -> List[List[str]]:
        """
        Find all simple paths from start to end using DFS.

        Args:
            start: Label of the start vertex
            end: Label of the target vertex
            max_depth: Maximum number of edges per path, unlimited if None

        Returns:
            List of paths in lexicographic discovery order, where each path
            is a list of labels
        """
        self.graph.get_vertex(start)
        self.graph.get_vertex(end)
        paths: List[List[str]] = []
        if start == end:
            return paths

        path = [start]
        on_path = {start}
        frames: List[Tuple[str, Iterator[str]]] = [(start, self.graph.vertices[start].neighbors())]

        while frames:
            _, neighbors = frames[-1]
            # len(path) is the edge count once a neighbor is appended
            can_extend = max_depth is None or len(path) <= max_depth
            for neighbor in neighbors:
                if not can_extend or neighbor in on_path:
                    continue
                if neighbor == end:
                    paths.append(path + [end])
                    continue
                path.append(neighbor)
                on_path.add(neighbor)
                frames.append((neighbor, self.graph.vertices[neighbor].neighbors()))
                break
            else:
                frames.pop()
                on_path.remove(path.pop())

        return paths

    def find_reachable(self, start: str) -> Set[str]:
        """
        Find all vertices reachable from start, including start itself.

        Args:
            start: Label of the start vertex

        Returns:
            Set of reachable labels
        """
        self.graph.get_vertex(start)
        reachable = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in self.graph.vertices[current].neighbors():
                if neighbor not in reachable:
                    reachable.add(neighbor)
                    queue.append(neighbor)

        return reachable

    def find_reaching(self, end: str) -> Set[str]:
        """
        Find all vertices that can reach end using backward traversal.

        Args:
            end: Label of the target vertex

        Returns:
            Set of labels that can reach end, including end itself
        """
        self.graph.get_vertex(end)

        reverse_adjacency: Dict[str, List[str]] = {label: [] for label in self.graph.vertices}
        for start, target, _ in self.graph.iter_edges():
            reverse_adjacency[target].append(start)

        reaching = {end}
        queue = deque([end])
        while queue:
            current = queue.popleft()
            for upstream in reverse_adjacency[current]:
                if upstream not in reaching:
                    reaching.add(upstream)
                    queue.append(upstream)

        return reaching
