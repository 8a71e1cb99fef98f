"""
Read weighted directed graphs from edge-list text files.

The first line holds the number of edges N. It is followed by N records of
the form ``<start> <end> <weight>``, separated by whitespace. Blank lines are
ignored.
"""

import logging
from typing import Any, List, Tuple

from ..classes.exceptions import EdgeListFormatError
from ..config import EDGE_LIST_ENCODING, EDGE_LIST_FIELDS

logger = logging.getLogger(__name__)


def parse_edge_list(aLine: List[str]) -> Tuple[int, List[Tuple[int, str, str, int]]]:
    """
    Parse the lines of an edge-list file.

    Args:
        aLine: Lines of the file

    Returns:
        Tuple of (declared edge count, records), where each record is
        (line_number, start, end, weight)

    Raises:
        EdgeListFormatError: If the count or a record is malformed
    """
    nEdge = None
    aRecord = []

    for iLine, sLine in enumerate(aLine, start=1):
        aToken = sLine.split()
        if not aToken:
            continue

        if nEdge is None:
            if len(aToken) != 1:
                raise EdgeListFormatError(f"expected an edge count, got '{sLine.strip()}'", iLine)
            try:
                nEdge = int(aToken[0])
            except ValueError:
                raise EdgeListFormatError(f"edge count '{aToken[0]}' is not an integer", iLine) from None
            if nEdge < 0:
                raise EdgeListFormatError(f"edge count {nEdge} is negative", iLine)
            continue

        if len(aToken) != EDGE_LIST_FIELDS:
            raise EdgeListFormatError(
                f"expected {EDGE_LIST_FIELDS} fields (start end weight), got {len(aToken)}", iLine)
        sStart, sEnd, sWeight = aToken
        try:
            dWeight = int(sWeight)
        except ValueError:
            raise EdgeListFormatError(f"weight '{sWeight}' is not an integer", iLine) from None
        aRecord.append((iLine, sStart, sEnd, dWeight))

    if nEdge is None:
        raise EdgeListFormatError("missing edge count")

    return nEdge, aRecord


def read_edge_list(sFilename: str, graph: Any) -> int:
    """
    Load edges from a file into a graph, one add call per record.

    Args:
        sFilename: Path of the edge-list file
        graph: Graph with an add(start, end, weight) method

    Returns:
        Number of edges actually added

    Raises:
        FileNotFoundError: If the file does not exist
        EdgeListFormatError: If the file is malformed
    """
    with open(sFilename, encoding=EDGE_LIST_ENCODING) as f:
        aLine = f.readlines()

    nEdge, aRecord = parse_edge_list(aLine)

    if len(aRecord) < nEdge:
        logger.warning(f"{sFilename}: declared {nEdge} edges but found {len(aRecord)}")
    elif len(aRecord) > nEdge:
        logger.warning(f"{sFilename}: ignoring {len(aRecord) - nEdge} records beyond declared count {nEdge}")
        aRecord = aRecord[:nEdge]

    nAdded = 0
    for iLine, sStart, sEnd, dWeight in aRecord:
        if graph.add(sStart, sEnd, dWeight):
            nAdded += 1
        else:
            logger.warning(f"{sFilename}: line {iLine}: edge {sStart} -> {sEnd} was rejected")

    logger.info(f"Read {nAdded} edges from {sFilename}")
    return nAdded
