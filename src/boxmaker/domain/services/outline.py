"""Outline simplification and path string emission.

Panel outlines are built in a y-up frame with the origin at the panel's
bottom-left corner. Path strings are emitted in the y-down frame of
vector graphics with three decimals and only absolute M/L/H/V/Z commands.
"""

from __future__ import annotations

import math
from typing import Sequence

from ..value_objects import Point2D

EPSILON = 1e-6


def format_number(value: float) -> str:
    """Format a coordinate with three decimals, never as ``-0.000``."""
    text = f"{value:.3f}"
    if text == "-0.000":
        return "0.000"
    return text


def _collinear(a: Point2D, b: Point2D, c: Point2D) -> bool:
    same_x = abs(a.x - b.x) < EPSILON and abs(b.x - c.x) < EPSILON
    same_y = abs(a.y - b.y) < EPSILON and abs(b.y - c.y) < EPSILON
    return same_x or same_y


def simplify_vertices(vertices: Sequence[Point2D]) -> tuple[Point2D, ...]:
    """Remove duplicates, back-tracks and axis-aligned collinear points.

    Works on an open polyline: the first and last points are never
    compared with each other.
    """
    out: list[Point2D] = []
    for point in vertices:
        if out and out[-1].is_close(point):
            continue
        out.append(point)
        while len(out) >= 3:
            a, b, c = out[-3], out[-2], out[-1]
            if a.is_close(c):
                # a -> b -> a collapses to a
                del out[-2:]
                continue
            if _collinear(a, b, c):
                del out[-2]
                continue
            break
    return tuple(out)


def simplify_closed_vertices(vertices: Sequence[Point2D]) -> tuple[Point2D, ...]:
    """Simplify a closed polygon, including the wrap-around neighbours.

    Repeats until no point can be removed: a closing duplicate of the
    first point, a duplicate of its successor, a point whose neighbours
    coincide, or a point collinear with both neighbours along an axis.
    """
    pts = list(simplify_vertices(vertices))

    changed = True
    while changed and len(pts) >= 3:
        changed = False
        if pts[0].is_close(pts[-1]):
            pts.pop()
            changed = True
            continue

        count = len(pts)
        for i in range(count):
            prev = pts[(i - 1) % count]
            curr = pts[i]
            nxt = pts[(i + 1) % count]
            if curr.is_close(nxt) or prev.is_close(nxt) or _collinear(prev, curr, nxt):
                del pts[i]
                changed = True
                break

    return tuple(pts)


def pop_if_closed(vertices: Sequence[Point2D]) -> tuple[Point2D, ...]:
    """Drop the last point when it repeats the first."""
    if len(vertices) >= 2 and vertices[0].is_close(vertices[-1]):
        return tuple(vertices[:-1])
    return tuple(vertices)


def is_simplified(vertices: Sequence[Point2D]) -> bool:
    """Check that a closed outline has no duplicates or collinear runs."""
    count = len(vertices)
    if count < 3:
        return False
    for i in range(count):
        prev = vertices[(i - 1) % count]
        curr = vertices[i]
        nxt = vertices[(i + 1) % count]
        if curr.is_close(nxt) or prev.is_close(nxt) or _collinear(prev, curr, nxt):
            return False
    return True


def polyline_to_path(points: Sequence[Point2D], closed: bool) -> str:
    """Emit a polyline as a path string without changing its frame.

    Axis-aligned moves use ``H``/``V``; anything else uses ``L``. Moves
    that round to the current point are dropped.
    """
    if not points:
        return ""

    formatted = [(format_number(p.x), format_number(p.y)) for p in points]
    first_x, first_y = formatted[0]
    parts = [f"M {first_x} {first_y}"]
    last_x, last_y = first_x, first_y
    for x, y in formatted[1:]:
        if x == last_x and y == last_y:
            continue
        if y == last_y:
            parts.append(f"H {x}")
        elif x == last_x:
            parts.append(f"V {y}")
        else:
            parts.append(f"L {x} {y}")
        last_x, last_y = x, y
    if closed:
        parts.append("Z")
    return " ".join(parts)


def vertices_to_outline_path(vertices: Sequence[Point2D], face_height: float) -> str:
    """Emit a closed y-up outline as a y-down path string."""
    flipped = [Point2D(p.x, face_height - p.y) for p in vertices]
    return polyline_to_path(flipped, closed=True)


def rect_path(x: float, y: float, width: float, height: float) -> str:
    """Closed rectangle in the y-down frame; sizes below 0.1 are raised to 0.1."""
    x1 = x + max(width, 0.1)
    y1 = y + max(height, 0.1)
    return (
        f"M {format_number(x)} {format_number(y)} H {format_number(x1)} "
        f"V {format_number(y1)} H {format_number(x)} Z"
    )


def open_slot_top_path(x: float, width: float, depth: float) -> str:
    """Three-sided slot cut down from the top edge (y = 0)."""
    x1 = x + max(width, 0.1)
    y1 = max(depth, 0.1)
    return (
        f"M {format_number(x)} 0.000 V {format_number(y1)} "
        f"H {format_number(x1)} V 0.000"
    )


def open_slot_bottom_path(x: float, y_top: float, width: float, depth: float) -> str:
    """Three-sided slot cut up from the bottom edge, reaching ``y_top``."""
    x1 = x + max(width, 0.1)
    y1 = y_top + max(depth, 0.1)
    return (
        f"M {format_number(x)} {format_number(y1)} V {format_number(y_top)} "
        f"H {format_number(x1)} V {format_number(y1)}"
    )


def signed_area(vertices: Sequence[Point2D]) -> float:
    """Shoelace area, positive for counter-clockwise winding."""
    count = len(vertices)
    total = 0.0
    for i in range(count):
        a = vertices[i]
        b = vertices[(i + 1) % count]
        total += a.x * b.y - b.x * a.y
    return total / 2


def polygon_area(vertices: Sequence[Point2D]) -> float:
    """Unsigned shoelace area of a closed polygon."""
    if len(vertices) < 3:
        return 0.0
    return abs(signed_area(vertices))


def polyline_length(points: Sequence[Point2D], closed: bool = False) -> float:
    """Total length of a polyline, optionally including the closing edge."""
    total = 0.0
    for a, b in zip(points, points[1:]):
        total += math.hypot(b.x - a.x, b.y - a.y)
    if closed and len(points) >= 2:
        total += math.hypot(points[0].x - points[-1].x, points[0].y - points[-1].y)
    return total


def bounding_box(points: Sequence[Point2D]) -> tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)`` of a point set."""
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return min(xs), min(ys), max(xs), max(ys)
