# (c) Nelen & Schuurmans

import logging
import re
from typing import Any

__all__ = ["to_int", "coerce_status"]

logger = logging.getLogger(__name__)

NUMERIC_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)


def to_int(value: Any) -> int:
    """Cast any value to an integer without ever failing.

    Booleans become 0 or 1, numbers are truncated towards zero and strings are
    parsed up to the end of their leading numeric part ("12abc" gives 12).
    Empty containers give 0, non-empty ones 1. Anything else gives 0.
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return int(value)
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("ascii", errors="replace")
    if isinstance(value, str):
        match = NUMERIC_PREFIX.match(value)
        if match is None:
            logger.debug(f"non-numeric string {value!r} cast to 0")
            return 0
        number = match.group(1)
        if number.lstrip("+-").isdigit():
            try:
                return int(number)
            except ValueError:
                # more digits than int() accepts from a string
                pass
        value = float(number)
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return 1 if value else 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        # NaN, infinities and objects without __int__
        logger.debug(f"cannot cast {value!r} to an integer, using 0")
        return 0


def coerce_status(value: Any) -> int:
    """Normalize a status code to its absolute integer value."""
    return abs(to_int(value))
