"""Panel outline assembly.

Builds closed panel outlines from up to four edges walked counter-clockwise
(bottom, right, top reversed, left reversed), and derives the auxiliary
panels: plain rectangles, vertical finger strips, renamed clones and the
drawer front with its thumb notch.

All outlines are simplified before they leave this module, so they have no
consecutive duplicates and no axis-aligned collinear runs.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Sequence

from ..value_objects import (
    EdgeDirection,
    EdgeJoint,
    FaceName,
    FacePath,
    FingerPattern,
    GeneratedFace,
    PathOperation,
    Point2D,
)
from .edge_builder import build_edge_vertices
from .finger_pattern import generate_finger_pattern
from .outline import (
    bounding_box,
    pop_if_closed,
    simplify_closed_vertices,
    vertices_to_outline_path,
)

logger = logging.getLogger(__name__)

# Thumb-notch tuning. Empirical values kept for output compatibility.
NOTCH_RADIUS_FACTOR = 0.18
NOTCH_MIN_RADIUS = 4.0
NOTCH_MAX_RADIUS = 18.0
NOTCH_MIN_CHORD = 1.5
NOTCH_MIN_EDGE = 10.0
NOTCH_EDGE_MARGIN = 1.0
NOTCH_ARC_STEPS = 18
NOTCH_EDGE_TOLERANCE = 1e-3


@dataclass(frozen=True)
class PanelEdges:
    """Joint treatment of the four edges of a rectangular panel."""

    bottom: EdgeJoint = EdgeJoint.PLAIN
    right: EdgeJoint = EdgeJoint.PLAIN
    top: EdgeJoint = EdgeJoint.PLAIN
    left: EdgeJoint = EdgeJoint.PLAIN


@dataclass(frozen=True)
class OutwardSigns:
    """Side each edge's tabs protrude towards (+1 or -1 along its normal axis)."""

    bottom: int = -1
    right: int = 1
    top: int = 1
    left: int = -1


@dataclass(frozen=True)
class RectOutline:
    """Assembled outline plus its bounding size."""

    vertices: tuple[Point2D, ...]
    face_width: float
    face_height: float


@dataclass(frozen=True)
class ThumbNotchSpec:
    """Sizing rules for the finger-pull notch of a drawer front."""

    radius_factor: float = NOTCH_RADIUS_FACTOR
    min_radius: float = NOTCH_MIN_RADIUS
    max_radius: float = NOTCH_MAX_RADIUS
    min_chord: float = NOTCH_MIN_CHORD
    min_edge: float = NOTCH_MIN_EDGE
    edge_margin: float = NOTCH_EDGE_MARGIN
    arc_steps: int = NOTCH_ARC_STEPS


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``; NaN maps to ``low``."""
    if math.isnan(value):
        return low
    if value < low:
        return low
    if value > high:
        return high
    return value


def _append_points(target: list[Point2D], points: Sequence[Point2D]) -> None:
    for point in points:
        if not target or not target[-1].is_close(point):
            target.append(point)


def _first_is_tab(joint: EdgeJoint, pattern: FingerPattern) -> bool:
    if not joint.uses_fingers or not pattern.segments:
        return False
    return pattern.segments[0].is_tab != joint.inverted


def _edge_points(
    joint: EdgeJoint,
    pattern: FingerPattern,
    thickness: float,
    direction: EdgeDirection,
    sign: int,
    start: Point2D,
    end: Point2D,
) -> tuple[Point2D, ...]:
    if not joint.uses_fingers:
        return (start, end)
    return build_edge_vertices(
        pattern=pattern,
        thickness=thickness,
        direction=direction,
        invert_tabs=joint.inverted,
        outward_sign=sign,
        start=start,
    )


def _fill_corners(
    points: tuple[Point2D, ...],
    edge_y: float,
    outer_y: float,
    x0: float,
    x1: float,
    outer_left_x: float,
    outer_right_x: float,
    left_tab: bool,
    right_tab: bool,
) -> tuple[Point2D, ...]:
    """Replace the corner steps of a horizontal edge with corner-spanning runs.

    When the horizontal edge and the adjoining vertical edge both start
    with a tab, the corner square is owned by this edge, so its first and
    last steps are widened out to the vertical edges' outer line.
    """
    if left_tab:
        points = (
            Point2D(x0, edge_y),
            Point2D(outer_left_x, edge_y),
            Point2D(outer_left_x, outer_y),
            Point2D(x0, outer_y),
        ) + points[2:]

    if right_tab and len(points) >= 2:
        prev, last = points[-2], points[-1]
        if prev.is_close(Point2D(x1, outer_y)) and last.is_close(Point2D(x1, edge_y)):
            points = points[:-1] + (
                Point2D(outer_right_x, outer_y),
                Point2D(outer_right_x, edge_y),
                last,
            )
    return points


def build_rect_outline(
    width: float,
    height: float,
    thickness: float,
    horizontal_pattern: FingerPattern,
    vertical_pattern: FingerPattern,
    edges: PanelEdges,
    outward: OutwardSigns = OutwardSigns(),
    suppress_corner_notches: bool = False,
) -> RectOutline:
    """Assemble a rectangular panel outline from four edges.

    ``width`` and ``height`` are the panel body between the joints; each
    edge that carries fingers adds ``thickness`` to the bounding size.
    Horizontal edges use ``horizontal_pattern``, vertical edges
    ``vertical_pattern``.

    The bottom edge always absorbs corner squares shared with tabbed side
    edges. With ``suppress_corner_notches`` the top edge does the same,
    which removes the small redundant notch two tab edges would otherwise
    cut at the top corners.

    Returns:
        RectOutline with a closed, simplified outline in the y-up frame.
    """
    t = thickness
    x0 = t if edges.left.uses_fingers else 0.0
    y0 = t if edges.bottom.uses_fingers else 0.0
    x1 = x0 + width
    y1 = y0 + height

    bottom_tab = _first_is_tab(edges.bottom, horizontal_pattern)
    top_tab = _first_is_tab(edges.top, horizontal_pattern)
    left_tab = _first_is_tab(edges.left, vertical_pattern)
    right_tab = _first_is_tab(edges.right, vertical_pattern)

    outer_bottom_y = y0 + outward.bottom * t
    outer_top_y = y1 + outward.top * t
    outer_left_x = x0 + outward.left * t
    outer_right_x = x1 + outward.right * t

    face_width = width + (t if edges.left.uses_fingers else 0.0) + (
        t if edges.right.uses_fingers else 0.0
    )
    face_height = height + (t if edges.bottom.uses_fingers else 0.0) + (
        t if edges.top.uses_fingers else 0.0
    )

    verts: list[Point2D] = []

    bottom = _edge_points(
        edges.bottom,
        horizontal_pattern,
        t,
        EdgeDirection.HORIZONTAL,
        outward.bottom,
        Point2D(x0, y0),
        Point2D(x1, y0),
    )
    if bottom_tab:
        bottom = _fill_corners(
            bottom, y0, outer_bottom_y, x0, x1, outer_left_x, outer_right_x,
            left_tab, right_tab,
        )
    _append_points(verts, bottom)

    right = _edge_points(
        edges.right,
        vertical_pattern,
        t,
        EdgeDirection.VERTICAL,
        outward.right,
        Point2D(x1, y0),
        Point2D(x1, y1),
    )
    _append_points(verts, right[1:])

    top = _edge_points(
        edges.top,
        horizontal_pattern,
        t,
        EdgeDirection.HORIZONTAL,
        outward.top,
        Point2D(x0, y1),
        Point2D(x1, y1),
    )
    if suppress_corner_notches and top_tab:
        top = _fill_corners(
            top, y1, outer_top_y, x0, x1, outer_left_x, outer_right_x,
            left_tab, right_tab,
        )
    _append_points(verts, top[::-1][1:])

    left = _edge_points(
        edges.left,
        vertical_pattern,
        t,
        EdgeDirection.VERTICAL,
        outward.left,
        Point2D(x0, y0),
        Point2D(x0, y1),
    )
    _append_points(verts, left[::-1][1:])

    vertices = pop_if_closed(simplify_closed_vertices(verts))
    return RectOutline(vertices=vertices, face_width=face_width, face_height=face_height)


def create_face_from_vertices(
    name: FaceName,
    face_id: str,
    vertices: Sequence[Point2D],
    face_width: float,
    face_height: float,
) -> GeneratedFace:
    """Wrap an outline into a panel whose only path is the outline cut."""
    outline_path = vertices_to_outline_path(vertices, face_height)
    return GeneratedFace(
        id=face_id,
        name=name,
        width=face_width,
        height=face_height,
        vertices=tuple(vertices),
        outline_path=outline_path,
        paths=(FacePath(d=outline_path, op=PathOperation.CUT),),
    )


def create_rect_face(name: FaceName, face_id: str, width: float, height: float) -> GeneratedFace:
    """Plain rectangular panel; sizes below 0.1 mm are raised to 0.1 mm."""
    safe_width = max(width, 0.1)
    safe_height = max(height, 0.1)
    vertices = (
        Point2D(0.0, safe_height),
        Point2D(safe_width, safe_height),
        Point2D(safe_width, 0.0),
        Point2D(0.0, 0.0),
    )
    return create_face_from_vertices(name, face_id, vertices, safe_width, safe_height)


def create_rect_panel(
    name: FaceName,
    face_id: str,
    outline: RectOutline,
) -> GeneratedFace:
    """Panel from an assembled rectangular outline."""
    return create_face_from_vertices(
        name, face_id, outline.vertices, outline.face_width, outline.face_height
    )


def clone_face(source: GeneratedFace, name: FaceName, face_id: str) -> GeneratedFace:
    """Copy a panel's geometry under a new role and id."""
    return replace(source, id=face_id, name=name)


def add_extra_paths(face: GeneratedFace, extra: Sequence[FacePath]) -> GeneratedFace:
    """Return a copy of ``face`` with ``extra`` appended to its paths."""
    if not extra:
        return face
    return replace(face, paths=face.paths + tuple(extra))


def create_vertical_finger_face(
    name: FaceName,
    face_id: str,
    width: float,
    height: float,
    thickness: float,
    tabs: int,
    invert_left: bool,
    invert_right: bool,
) -> GeneratedFace:
    """Wall strip with finger joints on its two vertical edges only.

    The vertical edges are divided into ``2 * tabs - 1`` equal segments
    (at least three), so each edge carries ``tabs`` tabs when not inverted.
    Top and bottom are straight.
    """
    safe_width = max(width, 0.1)
    safe_height = max(height, 0.1)
    t = thickness
    n = max(1, math.floor(tabs))
    cell = safe_height / (2 * n)
    pattern = generate_finger_pattern(safe_height, cell, cell)

    verts: list[Point2D] = [Point2D(t, 0.0), Point2D(t + safe_width, 0.0)]
    right = build_edge_vertices(
        pattern=pattern,
        thickness=t,
        direction=EdgeDirection.VERTICAL,
        invert_tabs=invert_right,
        outward_sign=1,
        start=Point2D(t + safe_width, 0.0),
    )
    _append_points(verts, right[1:])
    _append_points(verts, (Point2D(t, safe_height),))
    left = build_edge_vertices(
        pattern=pattern,
        thickness=t,
        direction=EdgeDirection.VERTICAL,
        invert_tabs=invert_left,
        outward_sign=-1,
        start=Point2D(t, 0.0),
    )
    _append_points(verts, left[::-1][1:])

    vertices = pop_if_closed(simplify_closed_vertices(verts))
    return create_face_from_vertices(name, face_id, vertices, safe_width + 2 * t, safe_height)


def carve_thumb_notch(
    face: GeneratedFace, spec: ThumbNotchSpec = ThumbNotchSpec()
) -> GeneratedFace:
    """Cut a semicircular finger pull into the panel's top edge.

    Finds the longest straight run on the topmost line of the outline and
    splices a concave arc into it, centred on the run. The arc follows the
    run's traversal direction, so it always bows into the material. The
    panel is returned unchanged when the run or the resulting chord is too
    short.
    """
    verts = face.vertices
    if len(verts) < 3:
        return face

    min_x, min_y, max_x, max_y = bounding_box(verts)
    edge_y = max_y
    panel_w = max(max_x - min_x, 1.0)
    panel_h = max(max_y - min_y, 1.0)

    best_index = -1
    best_length = 0.0
    count = len(verts)
    for i in range(count):
        a = verts[i]
        b = verts[(i + 1) % count]
        if abs(a.y - edge_y) > NOTCH_EDGE_TOLERANCE or abs(b.y - edge_y) > NOTCH_EDGE_TOLERANCE:
            continue
        length = abs(b.x - a.x)
        if length > best_length:
            best_length = length
            best_index = i

    if best_index < 0 or best_length <= spec.min_edge:
        logger.debug("No straight run long enough for a thumb notch on %s", face.id)
        return face

    seg_start = verts[best_index]
    seg_end = verts[(best_index + 1) % count]
    forward = seg_start.x <= seg_end.x
    seg_min = min(seg_start.x, seg_end.x)
    seg_max = max(seg_start.x, seg_end.x)

    centre = (seg_start.x + seg_end.x) / 2
    radius = clamp(
        min(panel_h * spec.radius_factor, panel_w * spec.radius_factor),
        spec.min_radius,
        spec.max_radius,
    )
    x1 = clamp(centre - radius, seg_min + spec.edge_margin, seg_max - spec.edge_margin)
    x2 = clamp(centre + radius, seg_min + spec.edge_margin, seg_max - spec.edge_margin)
    if x2 - x1 <= spec.min_chord:
        logger.debug("Thumb notch chord too small on %s", face.id)
        return face

    r = (x2 - x1) / 2
    arc_centre = (x1 + x2) / 2
    arc = [
        Point2D(
            arc_centre - math.cos(math.pi * i / spec.arc_steps) * r,
            edge_y - math.sin(math.pi * i / spec.arc_steps) * r,
        )
        for i in range(spec.arc_steps + 1)
    ]
    if not forward:
        arc.reverse()
    entry_x, exit_x = (x1, x2) if forward else (x2, x1)

    notched: list[Point2D] = []
    for i, point in enumerate(verts):
        notched.append(point)
        if i == best_index:
            notched.append(Point2D(entry_x, edge_y))
            notched.extend(arc)
            notched.append(Point2D(exit_x, edge_y))

    vertices = pop_if_closed(simplify_closed_vertices(notched))
    outline_path = vertices_to_outline_path(vertices, face.height)
    paths = (FacePath(d=outline_path, op=PathOperation.CUT),) + face.paths[1:]
    return replace(face, vertices=vertices, outline_path=outline_path, paths=paths)
