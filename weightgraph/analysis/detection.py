"""
Structural analysis for weighted graphs.

This module provides algorithms for detecting cycles, ordering vertices
topologically and finding strongly connected components. Weights are ignored.

All searches walk pyvertex.neighbors() with an explicit stack of
(label, neighbor iterator) frames, so path length is not bounded by the
interpreter recursion limit.
"""

import heapq
import logging
from typing import Dict, Iterator, List, Set, Tuple

from ..classes.exceptions import CycleError
from ..core.graph import WeightGraph

logger = logging.getLogger(__name__)

Frame = Tuple[str, Iterator[str]]


class CycleDetector:
    """
    Detects structural features of a weighted graph.

    This class provides methods for:
    - Finding cycles
    - Topological sorting
    - Finding strongly connected components

    All results are deterministic: vertices and neighbors are processed in
    lexicographic order.
    """

    def __init__(self, graph: WeightGraph):
        """
        Initialize the cycle detector.

        Args:
            graph: WeightGraph instance to analyze
        """
        self.graph = graph

    def _frame(self, label: str) -> Frame:
        return label, self.graph.vertices[label].neighbors()

    def find_cycles(self) -> List[List[str]]:
        """
        Find cycles in the graph using depth-first search.

        Each back edge found by the search yields one cycle, so this is not an
        enumeration of every elementary cycle.

        Returns:
            List of cycles, each a list of labels whose last entry repeats
            the first
        """
        cycles: List[List[str]] = []
        explored: Set[str] = set()

        for root in self.graph.get_vertex_labels():
            if root in explored:
                continue

            explored.add(root)
            trail = [root]
            on_trail = {root}
            frames = [self._frame(root)]

            while frames:
                _, neighbors = frames[-1]
                for neighbor in neighbors:
                    if neighbor in on_trail:
                        # Back edge closes a cycle on the current trail
                        cycles.append(trail[trail.index(neighbor):] + [neighbor])
                    elif neighbor not in explored:
                        explored.add(neighbor)
                        trail.append(neighbor)
                        on_trail.add(neighbor)
                        frames.append(self._frame(neighbor))
                        break
                else:
                    frames.pop()
                    on_trail.remove(trail.pop())

        logger.debug(f"Found {len(cycles)} cycles")
        return cycles

    def has_cycle(self) -> bool:
        try:
            self.topological_sort()
        except CycleError:
            return True
        return False

    def topological_sort(self) -> List[str]:
        """
        Order vertices so every edge points forward (Kahn's algorithm).

        Among vertices that are ready at the same time, the lexicographically
        smallest label comes first.

        Returns:
            Topologically sorted list of labels

        Raises:
            CycleError: If the graph contains cycles
        """
        incoming: Dict[str, int] = {label: 0 for label in self.graph.vertices}
        for vertex in self.graph.vertices.values():
            for target in vertex.neighbors():
                incoming[target] += 1

        ready = [label for label, count in incoming.items() if count == 0]
        heapq.heapify(ready)
        order: List[str] = []

        while ready:
            label = heapq.heappop(ready)
            order.append(label)
            for target in self.graph.vertices[label].neighbors():
                incoming[target] -= 1
                if incoming[target] == 0:
                    heapq.heappush(ready, target)

        if len(order) != len(incoming):
            blocked = sorted(label for label, count in incoming.items() if count > 0)
            raise CycleError(f"Graph contains cycles through {blocked}; no topological order exists")

        return order

    def strongly_connected_components(self) -> List[List[str]]:
        """
        Find strongly connected components using Tarjan's algorithm.

        A vertex's low link is folded into its parent when its frame is
        popped, which is where the recursive formulation would return.

        Returns:
            List of components, each a sorted list of labels, in the order
            Tarjan's algorithm completes them
        """
        discovery: Dict[str, int] = {}
        low: Dict[str, int] = {}
        pending: List[str] = []
        pending_set: Set[str] = set()
        components: List[List[str]] = []

        def open_frame(label: str) -> Frame:
            discovery[label] = low[label] = len(discovery)
            pending.append(label)
            pending_set.add(label)
            return self._frame(label)

        for root in self.graph.get_vertex_labels():
            if root in discovery:
                continue

            frames = [open_frame(root)]
            while frames:
                label, neighbors = frames[-1]
                for neighbor in neighbors:
                    if neighbor not in discovery:
                        frames.append(open_frame(neighbor))
                        break
                    if neighbor in pending_set:
                        low[label] = min(low[label], discovery[neighbor])
                else:
                    frames.pop()
                    if frames:
                        parent = frames[-1][0]
                        low[parent] = min(low[parent], low[label])

                    if low[label] == discovery[label]:
                        component = []
                        while True:
                            member = pending.pop()
                            pending_set.remove(member)
                            component.append(member)
                            if member == label:
                                break
                        components.append(sorted(component))

        logger.debug(f"Found {len(components)} strongly connected components")
        return components
