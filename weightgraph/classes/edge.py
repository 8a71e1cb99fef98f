"""
Edge representation for weighted directed graphs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class pyedge:
    """
    A directed, weighted connection to a target vertex.

    The source vertex is implied by the vertex that owns the edge. Edges are
    immutable: to change a weight, remove the edge and add it again.

    Attributes:
        target: Label of the vertex this edge points to
        weight: Integer weight of the edge
    """

    target: str
    weight: int

    def __str__(self) -> str:
        return f"-> {self.target} ({self.weight})"
