"""
Write weighted directed graphs to edge-list text files.
"""

import logging
from typing import Any

from ..classes.exceptions import EdgeListFormatError
from ..config import EDGE_LIST_ENCODING

logger = logging.getLogger(__name__)


def check_label(sLabel: str) -> None:
    """
    Ensure a label survives a write/read round trip.

    Raises:
        EdgeListFormatError: If the label is empty or contains whitespace
    """
    if not sLabel or any(c.isspace() for c in sLabel):
        raise EdgeListFormatError(f"label {sLabel!r} cannot be written: labels must be non-empty without whitespace")


def export_edge_list(graph: Any, sFilename: str) -> int:
    """
    Write all edges of a graph in edge-list format.

    Edges are written sorted by start label, then end label. Isolated
    vertices cannot be represented and are not written. Labels are checked
    before the file is opened, so a failed export leaves no partial file.

    Args:
        graph: Graph with an iter_edges() method
        sFilename: Output path

    Returns:
        Number of edges written

    Raises:
        EdgeListFormatError: If a label is empty or contains whitespace
    """
    aEdge = list(graph.iter_edges())
    for sStart, sEnd, _ in aEdge:
        check_label(sStart)
        check_label(sEnd)

    nEdge = len(aEdge)
    with open(sFilename, "w", encoding=EDGE_LIST_ENCODING) as f:
        f.write(f"{nEdge}\n")
        for sStart, sEnd, dWeight in aEdge:
            f.write(f"{sStart} {sEnd} {dWeight}\n")

    logger.info(f"Wrote {nEdge} edges to {sFilename}")
    return nEdge
