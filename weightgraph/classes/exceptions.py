"""
Exception hierarchy for weightgraph.

All errors are local to a single call and recoverable: none of them leaves a
graph instance in an unusable state.
"""

from typing import Optional


class GraphError(Exception):
    """Base class for all weightgraph errors."""


class UnknownVertexError(GraphError, KeyError):
    """Raised when an operation is given a label that is not in the graph."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"Vertex '{self.label}' does not exist in the graph"


class ConnectError(GraphError, ValueError):
    """Raised when an edge cannot be added to a vertex."""

    def __init__(self, source: str, target: str, message: str):
        self.source = source
        self.target = target
        super().__init__(message)


class SelfLoopError(ConnectError):
    """Raised when a vertex is asked to connect to itself."""

    def __init__(self, label: str):
        super().__init__(label, label, f"Vertex '{label}' cannot connect to itself")


class DuplicateEdgeError(ConnectError):
    """Raised when an edge to the same target already exists."""

    def __init__(self, source: str, target: str):
        super().__init__(source, target, f"Edge '{source}' -> '{target}' already exists")


class NegativeWeightError(GraphError, ValueError):
    """Raised when shortest-path search relaxes an edge with negative weight."""

    def __init__(self, source: str, target: str, weight: int):
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Edge '{source}' -> '{target}' has negative weight {weight}; "
            "shortest paths require non-negative weights"
        )


class CycleError(GraphError, ValueError):
    """Raised when an ordering is requested on a graph that contains cycles."""


class EdgeListFormatError(GraphError, ValueError):
    """Raised when an edge-list file cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
