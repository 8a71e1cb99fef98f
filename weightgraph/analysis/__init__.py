"""
Graph analysis modules for traversal, path finding and structure detection.
"""

from .traversal import GraphTraverser
from .pathfinding import PathFinder
from .detection import CycleDetector
from .matrix import to_adjacency_matrix

__all__ = ['GraphTraverser', 'PathFinder', 'CycleDetector', 'to_adjacency_matrix']
