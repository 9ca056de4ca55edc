import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^[+-]?\d+")

def parse_float(value: Any) -> float:
    """Read the leading number of a form value, NaN when there is none."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, str):
        return math.nan
    match = _FLOAT_PREFIX.match(value.strip())
    if match is None:
        return math.nan
    return float(match.group())

def parse_int(value: Any) -> int | float:
    """Read the leading integer of a form value, NaN when there is none.

    Unparsable input yields NaN, which strict integer fields reject.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else math.nan
    if not isinstance(value, str):
        return math.nan
    match = _INT_PREFIX.match(value.strip())
    if match is None:
        return math.nan
    return int(match.group())

def to_str(value: Any) -> str | None:
    """String form of an identifier read from a spreadsheet cell.

    Integral floats drop their trailing ``.0`` and missing cells stay missing.
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
