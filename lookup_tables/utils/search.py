"""
Bracket Search

Locates the pair of adjacent coordinates surrounding a query value. Tables
remember the last bracket they found and pass it back in as a hint, so
spatially coherent lookups usually finish on the first probe.
"""

import math
from typing import Sequence


def bracket(values: Sequence[float], x: float, hint: int = 0) -> int:
    """Find the bracket index for x

    Args:
        values: Strictly increasing coordinates (at least 2)
        x: Query coordinate
        hint: Index to probe first, usually the previous result

    Returns:
        Index i with values[i] <= x < values[i+1]. Queries at or below
        values[0] map to 0 and queries at or above values[-2] map to
        len(values) - 2, so every x has a valid bracket.
    """
    last = len(values) - 2

    if math.isnan(x) or x <= values[0]:
        return 0
    if x >= values[last]:
        return last

    # values[low] <= x < values[high]
    low = 0
    high = last
    mid = min(max(hint, low), high - 1)

    while x < values[mid] or x >= values[mid + 1]:
        if x < values[mid]:
            high = mid
        else:
            low = mid
        mid = (low + high) // 2

    return mid
