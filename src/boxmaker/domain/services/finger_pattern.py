"""Finger pattern generation.

A finger pattern splits an edge into an odd number of equal segments that
alternate tab, gap, tab, ..., tab. Mating edges share one pattern and
differ only in phase, which is applied later by the edge builder.
"""

from __future__ import annotations

import logging
import math

from ..value_objects import FingerPattern, FingerSegment

logger = logging.getLogger(__name__)

MIN_SEGMENTS = 3
MIN_FINGER_WIDTH = 0.1


def generate_finger_pattern(
    length: float, min_finger: float, max_finger: float
) -> FingerPattern:
    """Split an edge into alternating tab/gap segments.

    The segment count starts at ``round(length / target)`` where target is
    the midpoint of the finger range, is forced odd and at least 3, and is
    then stepped by two until the segment width falls inside the range.
    Very short edges stop at three segments even if that leaves the width
    above ``max_finger`` or below ``min_finger``.

    Args:
        length: Edge length in mm. Negative lengths are treated as 0.
        min_finger: Smallest acceptable segment width.
        max_finger: Largest acceptable segment width. An inverted range is
            widened so that ``max_finger >= min_finger``.

    Returns:
        FingerPattern whose last segment ends exactly at ``length``.
    """
    edge = max(length, 0.0)
    low = max(min_finger, MIN_FINGER_WIDTH)
    high = max(max_finger, low)

    target = (low + high) / 2
    # half-up rounding; round() would send 2.5 to 2
    n = math.floor(edge / target + 0.5)
    if n < MIN_SEGMENTS:
        n = MIN_SEGMENTS
    if n % 2 == 0:
        n += 1

    width = edge / n
    if width < low:
        while n > MIN_SEGMENTS and width < low:
            n -= 2
            width = edge / n
    elif width > high:
        while width > high:
            n += 2
            width = edge / n

    width = edge / n
    segments = [
        FingerSegment(start=i * width, end=(i + 1) * width, is_tab=i % 2 == 0)
        for i in range(n)
    ]
    last = segments[-1]
    segments[-1] = FingerSegment(start=last.start, end=edge, is_tab=last.is_tab)

    logger.debug(
        "Finger pattern for %.3f mm: %d segments of %.3f mm", edge, n, width
    )
    return FingerPattern(length=edge, finger_width=width, segments=tuple(segments))


def calculate_finger_count(length: float, min_finger: float, max_finger: float) -> int:
    """Choose a tab count for an edge split into ``2 * tabs`` equal cells.

    The effective finger width is ``length / (2 * tabs)``. The smallest
    count that keeps the width at or below ``max_finger`` is preferred,
    capped by the largest count that keeps it at or above ``min_finger``.

    Returns:
        Tab count, always at least 1.
    """
    safe_length = max(length, 1.0)
    safe_min = max(min_finger, 0.5)
    safe_max = max(max_finger, safe_min)

    max_tabs = math.floor(safe_length / (2 * safe_min))
    min_tabs = max(1, math.ceil(safe_length / (2 * safe_max)))

    if max_tabs <= 0:
        return 1
    return max(1, min(min_tabs, max_tabs))
