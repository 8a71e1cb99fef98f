"""
weightgraph - Weighted Directed Graph Library

A Python library for building weighted directed graphs edge by edge and
running traversals and shortest-path searches over them.

Main Classes:
    pyweightgraph: Main class for graph construction and analysis (facade)
    pyvertex: Vertex representation with its outgoing edges
    pyedge: Edge representation (target label and weight)

Example:
    >>> from weightgraph import pyweightgraph
    >>> graph = pyweightgraph.from_edge_list("graph.txt")
    >>> graph.depth_first_traversal("A", print)
    >>> distance, previous = graph.shortest_paths("A")
"""

__version__ = "0.2.0"

from weightgraph.classes.edge import pyedge
from weightgraph.classes.vertex import pyvertex
from weightgraph.classes.exceptions import (
    GraphError,
    UnknownVertexError,
    ConnectError,
    SelfLoopError,
    DuplicateEdgeError,
    NegativeWeightError,
    CycleError,
    EdgeListFormatError,
)
from weightgraph.config import NO_EDGE, configure_logging
from weightgraph.core.weightgraph import pyweightgraph

__all__ = [
    'pyweightgraph',
    'pyvertex',
    'pyedge',
    'NO_EDGE',
    'configure_logging',
    'GraphError',
    'UnknownVertexError',
    'ConnectError',
    'SelfLoopError',
    'DuplicateEdgeError',
    'NegativeWeightError',
    'CycleError',
    'EdgeListFormatError',
]
