"""Edge vertex generation from finger patterns."""

from __future__ import annotations

from ..value_objects import EdgeDirection, FingerPattern, Point2D


def build_edge_vertices(
    pattern: FingerPattern,
    thickness: float,
    direction: EdgeDirection,
    invert_tabs: bool,
    outward_sign: int,
    start: Point2D,
) -> tuple[Point2D, ...]:
    """Trace one edge of a panel along a finger pattern.

    The edge runs in the positive direction of its axis from ``start``.
    A segment whose effective tab state (``is_tab`` XOR ``invert_tabs``) is
    set becomes a rectangular step of depth ``thickness`` towards
    ``outward_sign``; other segments advance straight along the axis.

    Two edges built from the same pattern with opposite ``invert_tabs``
    are complementary: one has material wherever the other has a gap.

    Args:
        pattern: Segmentation of the edge.
        thickness: Depth of each tab.
        direction: Axis the edge runs along.
        invert_tabs: Flip the tab/gap phase of the pattern.
        outward_sign: +1 or -1, the side of the axis tabs protrude to.
        start: First point of the edge.

    Returns:
        Points from ``start`` to the end of the edge, inclusive.
    """
    sign = -1 if outward_sign == -1 else 1
    depth = sign * thickness
    points = [start]
    last_x, last_y = start.x, start.y

    for seg in pattern.segments:
        is_tab = seg.is_tab != invert_tabs
        if direction is EdgeDirection.HORIZONTAL:
            next_x = start.x + seg.end
            if is_tab:
                points.append(Point2D(last_x, last_y + depth))
                points.append(Point2D(next_x, last_y + depth))
            points.append(Point2D(next_x, last_y))
            last_x = next_x
        else:
            next_y = start.y + seg.end
            if is_tab:
                points.append(Point2D(last_x + depth, last_y))
                points.append(Point2D(last_x + depth, next_y))
            points.append(Point2D(last_x, next_y))
            last_y = next_y

    return tuple(points)


def effective_tab_states(pattern: FingerPattern, invert_tabs: bool) -> tuple[bool, ...]:
    """Tab state of every segment after applying the phase flag."""
    return tuple(seg.is_tab != invert_tabs for seg in pattern.segments)
