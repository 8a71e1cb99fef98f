"""
Core data classes for weighted graph representation.

This module contains the fundamental data structures used throughout
the weightgraph library.
"""

from .edge import pyedge
from .vertex import pyvertex
from .exceptions import (
    GraphError,
    UnknownVertexError,
    ConnectError,
    SelfLoopError,
    DuplicateEdgeError,
    NegativeWeightError,
    CycleError,
    EdgeListFormatError,
)

__all__ = [
    'pyedge',
    'pyvertex',
    'GraphError',
    'UnknownVertexError',
    'ConnectError',
    'SelfLoopError',
    'DuplicateEdgeError',
    'NegativeWeightError',
    'CycleError',
    'EdgeListFormatError',
]
