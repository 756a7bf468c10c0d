"""Parsing of threshold parameters from heuristic configuration."""
import logging
import math
import re
from typing import List
from typing import Optional

logger = logging.getLogger(__name__)

_DELIMITERS = re.compile(r"[,\s]+")


def get_param(raw_limits: Optional[str], threshold_levels: int) -> Optional[List[float]]:
    """
    Parse a delimited string of numbers such as "0.6, 0.5, 0.4, 0.3".

    Returns None when the string is empty, does not hold exactly
    threshold_levels values, or holds a value that is not a number.
    """
    if raw_limits is None or not str(raw_limits).strip():
        return None

    thresholds = [t for t in _DELIMITERS.split(str(raw_limits).strip()) if t]
    if len(thresholds) != threshold_levels:
        logger.error(
            f"Could not find {threshold_levels} threshold levels in {raw_limits!r}"
        )
        return None

    parsed_limits = []
    for threshold in thresholds:
        try:
            limit = float(threshold)
        except ValueError:
            logger.error(f"Could not evaluate {threshold!r} in {raw_limits!r}")
            return None
        if not math.isfinite(limit):
            logger.error(f"Threshold {threshold!r} in {raw_limits!r} is not finite")
            return None
        parsed_limits.append(limit)
    return parsed_limits
