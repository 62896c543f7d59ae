"""
Typed extraction of raw preset parameters

Babylon writes every value as text holding a float, including booleans,
counts and enum selectors. These helpers take one parameter out of the bag
and coerce it. A missing parameter and one whose text doesn't parse are
treated the same way: the caller's default is returned. None of them raise.

Text is parsed with float(), so surrounding whitespace is tolerated
(' 12 ' reads as 12.0) while Babylon itself never writes any.
"""

import math
from typing import Optional

from .params import ParameterBag
from .units import Ratio, Time

# Booleans are stored as 0.0 / 1.0 and may carry float round-off
BOOL_TOLERANCE = 0.0000001


def _parse_float(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    if '_' in text:
        # Digit group separators are Python syntax, not a stored float
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def _take_float(bag: ParameterBag, param_id: str) -> Optional[float]:
    param = bag.remove(param_id)
    if param is None:
        return None
    return _parse_float(param.value)


def extract_number(bag: ParameterBag, param_id: str, default: float) -> float:
    value = _take_float(bag, param_id)
    return float(default) if value is None else value


def extract_int(bag: ParameterBag, param_id: str, default: int) -> int:
    """Integer stored as a float, truncated toward zero"""
    value = _take_float(bag, param_id)
    if value is None or math.isinf(value):
        return default
    return int(value)


def extract_uint(bag: ParameterBag, param_id: str, default: int) -> int:
    """Unsigned integer stored as a float. Negative values saturate to 0."""
    value = extract_int(bag, param_id, default)
    return max(value, 0)


def extract_bool(bag: ParameterBag, param_id: str, default: bool) -> bool:
    value = _take_float(bag, param_id)
    if value is None:
        return default
    return abs(value - 1.0) < BOOL_TOLERANCE


def extract_milliseconds(bag: ParameterBag, param_id: str, default: float) -> Time:
    return Time.from_milliseconds(extract_number(bag, param_id, default))


def extract_percent(bag: ParameterBag, param_id: str, default: float) -> Ratio:
    return Ratio.from_percent(extract_number(bag, param_id, default))
