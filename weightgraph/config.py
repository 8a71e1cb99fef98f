"""
Configuration constants for weightgraph.

Sentinels, file format settings and logging defaults are defined here.
The log level can be overridden with the WEIGHTGRAPH_LOG_LEVEL environment
variable.
"""

import logging
import os
from typing import Optional, Union

# =============================================================================
# Graph Configuration
# =============================================================================

# Legacy "no edge" weight returned by get_edge_weight (32-bit INT_MAX)
NO_EDGE = 2**31 - 1

# =============================================================================
# Edge List Format Configuration
# =============================================================================

EDGE_LIST_ENCODING = "utf-8"

# Number of whitespace-separated fields per edge record: start end weight
EDGE_LIST_FIELDS = 3

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("WEIGHTGRAPH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Configure root logging for scripts using weightgraph.

    The library itself never installs handlers; call this from an entry point.

    Args:
        level: Log level name or number, defaults to LOG_LEVEL
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
