"""
Adjacency matrix export for weighted graphs.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.graph import WeightGraph

logger = logging.getLogger(__name__)


def to_adjacency_matrix(graph: WeightGraph,
                        labels: Optional[Sequence[str]] = None,
                        no_edge: float = np.inf) -> Tuple[List[str], np.ndarray]:
    """
    Build a dense weight matrix of the graph.

    Args:
        graph: WeightGraph to export
        labels: Row/column order, defaults to all labels in lexicographic order
        no_edge: Value used where there is no edge

    Returns:
        Tuple of (labels, matrix) where matrix[i, j] is the weight of the edge
        labels[i] -> labels[j]

    Raises:
        UnknownVertexError: If labels contains a label not in the graph
    """
    if labels is None:
        labels = graph.get_vertex_labels()
    else:
        labels = list(labels)
        for label in labels:
            graph.get_vertex(label)

    position = {label: i for i, label in enumerate(labels)}
    matrix = np.full((len(labels), len(labels)), no_edge, dtype=np.float64)

    for label in labels:
        for edge in graph.vertices[label].edges():
            j = position.get(edge.target)
            if j is not None:
                matrix[position[label], j] = edge.weight

    logger.debug(f"Built {matrix.shape[0]}x{matrix.shape[1]} adjacency matrix")
    return labels, matrix
