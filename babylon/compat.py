"""
Compatibility with older Babylon file layouts

Older presets store the delay tone filter as a plain slider position under
DelayLP. Newer ones store it under DelayFilter as a combined mode and
frequency (see DelayFilterMode). Which layout a file uses is decided once
per decode.
"""

import logging
from enum import Enum
from typing import Tuple

from .effect import DelayFilterMode
from .extract import extract_number
from .params import ParameterBag

logger = logging.getLogger(__name__)

LEGACY_DELAY_FILTER_ID = 'DelayLP'
DELAY_FILTER_ID = 'DelayFilter'


class DelayFilterLayout(Enum):
    LEGACY = 'legacy'
    MODERN = 'modern'

    @classmethod
    def detect(cls, bag: ParameterBag) -> 'DelayFilterLayout':
        if bag.contains(DELAY_FILTER_ID):
            return cls.MODERN
        return cls.LEGACY


def read_delay_filter(bag: ParameterBag, layout: DelayFilterLayout,
                      default_position: float = 0.0) -> Tuple[float, DelayFilterMode]:
    """
    Slider position and filter mode of the delay.

    Positions that are not one of the slider's stops resolve to
    DelayFilterMode.OFF; the raw position is still returned.
    """
    logger.debug("%s: delay filter layout is %s", bag.source, layout.value)
    if layout is DelayFilterLayout.MODERN:
        position = extract_number(bag, DELAY_FILTER_ID, default_position)
        # A file may carry both; the modern id wins
        bag.remove(LEGACY_DELAY_FILTER_ID)
    else:
        position = extract_number(bag, LEGACY_DELAY_FILTER_ID, default_position)
    return position, DelayFilterMode.from_position(position, DelayFilterMode.OFF)
