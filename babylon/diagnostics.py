"""
Diagnostics for Babylon presets
Reports parameters the decoder did not recognize
"""

import logging
from typing import Iterable

from .params import RawParam

logger = logging.getLogger(__name__)


def report_unrecognized(source: str, params: Iterable[RawParam]) -> int:
    """
    Log a warning for every parameter left over after decoding.

    Leftovers usually mean the file was saved by a newer Babylon that added
    parameters. They never affect the decoded preset. Returns the number
    of parameters reported.
    """
    count = 0
    for param in params:
        logger.warning("Unrecognized parameter while reading %s, parameter %s is %r",
                       source, param.id, param.value)
        count += 1
    return count
