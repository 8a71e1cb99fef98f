"""
Core graph data structures and management.

This module contains the fundamental graph representation and the
pyweightgraph facade.
"""

from .graph import WeightGraph
from .weightgraph import pyweightgraph

__all__ = ['WeightGraph', 'pyweightgraph']
