"""Box composition services.

Turns a BoxSettings record into the full set of named panels for one box
style. Dimensions are derived once, finger patterns are generated per
axis, and every panel is assembled with edge roles chosen so that each
shared seam interlocks.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..value_objects import (
    BoxDimensions,
    BoxGenerationResult,
    BoxSettings,
    BoxType,
    DimensionReference,
    EdgeJoint,
    FaceName,
    FacePath,
    FingerPattern,
    GeneratedFace,
    LidType,
    PathOperation,
)
from .finger_pattern import calculate_finger_count, generate_finger_pattern
from .outline import open_slot_bottom_path, open_slot_top_path, rect_path
from .panel_assembler import (
    PanelEdges,
    add_extra_paths,
    build_rect_outline,
    clamp,
    clone_face,
    create_rect_face,
    create_rect_panel,
    create_vertical_finger_face,
)

__all__ = [
    "ALIGNMENT_EPSILON",
    "BoxComposer",
    "build_divider_faces",
    "check_panel_alignment",
    "compute_box_dimensions",
    "generate_box_geometry",
    "generate_open_front_geometry",
]

logger = logging.getLogger(__name__)

ALIGNMENT_EPSILON = 0.01
MIN_THICKNESS = 0.1
MIN_DIMENSION = 1.0

TAB = EdgeJoint.TAB
SLOT = EdgeJoint.SLOT
PLAIN = EdgeJoint.PLAIN


def compute_box_dimensions(settings: BoxSettings) -> BoxDimensions:
    """Derive the inner and outer envelope from requested dimensions.

    Width and depth always differ by two thicknesses. Height differs by
    two thicknesses when the box has a lid and by one when it is open,
    since a lidless box has a single capping panel.
    """
    t = max(settings.material_thickness, MIN_THICKNESS)
    height_pad = t if settings.lid_type is LidType.NONE else 2 * t
    width = max(settings.width, MIN_DIMENSION)
    height = max(settings.height, MIN_DIMENSION)
    depth = max(settings.depth, MIN_DIMENSION)

    if settings.dimension_reference is DimensionReference.OUTSIDE:
        return BoxDimensions(
            inner_width=max(width - 2 * t, MIN_THICKNESS),
            inner_height=max(height - height_pad, MIN_THICKNESS),
            inner_depth=max(depth - 2 * t, MIN_THICKNESS),
            outer_width=width,
            outer_height=height,
            outer_depth=depth,
        )

    return BoxDimensions(
        inner_width=width,
        inner_height=height,
        inner_depth=depth,
        outer_width=width + 2 * t,
        outer_height=height + height_pad,
        outer_depth=depth + 2 * t,
    )


def check_panel_alignment(faces: Sequence[GeneratedFace]) -> list[str]:
    """Compare panels that must align physically.

    The bottom's width must match the front and back widths, and its
    height (the box depth) must match the left and right widths. Panels
    that are absent are skipped.
    """
    by_id = {face.id: face for face in faces}
    bottom = by_id.get("bottom")
    if bottom is None:
        return []

    warnings: list[str] = []
    for wall in ("front", "back"):
        face = by_id.get(wall)
        if face is not None and abs(bottom.width - face.width) > ALIGNMENT_EPSILON:
            warnings.append(f"Bottom/{wall} width mismatch → finger joints may not align.")
    for wall in ("left", "right"):
        face = by_id.get(wall)
        if face is not None and abs(bottom.height - face.width) > ALIGNMENT_EPSILON:
            warnings.append(f"Bottom/{wall} depth mismatch → finger joints may not align.")
    return warnings


def _slot_x(position: float, slot_width: float, length: float) -> float:
    return clamp(position - slot_width / 2, 0.0, length - slot_width)


def build_divider_faces(
    inner_width: float,
    inner_depth: float,
    inner_height: float,
    thickness: float,
    count_x: float,
    count_z: float,
    clearance: float,
) -> list[GeneratedFace]:
    """Build full-height divider strips for a compartment grid.

    A ``count_x`` by ``count_z`` grid needs ``count_x - 1`` strips running
    front to back (divider-x) and ``count_z - 1`` strips running side to
    side (divider-z). Crossing strips meet through half-height slots: the
    divider-x strips are slotted from the top at every depth boundary and
    the divider-z strips from the bottom at every width boundary.

    Returns:
        Divider panels; empty for a 1x1 grid.
    """
    n_x = max(1, math.floor(count_x))
    n_z = max(1, math.floor(count_z))
    slot_width = max(thickness + clearance, 0.1)
    height = max(inner_height, 0.1)
    slot_depth = max(height / 2, 0.1)

    faces: list[GeneratedFace] = []

    length = max(inner_depth, 0.1)
    for index in range(1, n_x):
        slots = [
            FacePath(
                d=open_slot_top_path(
                    _slot_x(i * length / n_z, slot_width, length), slot_width, slot_depth
                ),
                op=PathOperation.CUT,
            )
            for i in range(1, n_z)
        ]
        strip = create_rect_face(FaceName.DIVIDER_X, f"divider-x-{index}", length, height)
        faces.append(add_extra_paths(strip, slots))

    length = max(inner_width, 0.1)
    for index in range(1, n_z):
        slots = [
            FacePath(
                d=open_slot_bottom_path(
                    _slot_x(i * length / n_x, slot_width, length),
                    height - slot_depth,
                    slot_width,
                    slot_depth,
                ),
                op=PathOperation.CUT,
            )
            for i in range(1, n_x)
        ]
        strip = create_rect_face(FaceName.DIVIDER_Z, f"divider-z-{index}", length, height)
        faces.append(add_extra_paths(strip, slots))

    logger.debug("Built %d divider strips for a %dx%d grid", len(faces), n_x, n_z)
    return faces


class BoxComposer:
    """Composes the panels of one box from a settings snapshot.

    Dimensions are derived once in ``__init__`` and never mutated, so
    repeated calls return identical geometry.
    """

    def __init__(self, settings: BoxSettings) -> None:
        self.settings = settings
        self.thickness = max(settings.material_thickness, MIN_THICKNESS)
        self.dimensions = compute_box_dimensions(settings)
        self.finger_min = max(settings.finger_min, 0.1)
        self.finger_max = max(settings.finger_max, self.finger_min)

    def _pattern(self, length: float) -> FingerPattern:
        return generate_finger_pattern(length, self.finger_min, self.finger_max)

    def generate(self) -> BoxGenerationResult:
        """Build the panels for the configured box style."""
        match self.settings.box_type:
            case BoxType.FINGER_ALL_EDGES:
                faces = self._finger_all_edges()
            case BoxType.FINGER_VERTICAL_EDGES:
                faces = self._finger_vertical_edges()
            case _:
                raise ValueError(f"Unknown box type: {self.settings.box_type}")

        faces.extend(self._divider_faces())
        faces.extend(self._lid_faces())
        warnings = check_panel_alignment(faces)
        logger.debug(
            "Composed %d panels for %s box (lid=%s)",
            len(faces),
            self.settings.box_type.value,
            self.settings.lid_type.value,
        )
        return BoxGenerationResult(
            faces=tuple(faces), dimensions=self.dimensions, warnings=tuple(warnings)
        )

    def generate_open_front(self) -> BoxGenerationResult:
        """Build an open-front shell: back, left, right, bottom and top.

        Corner-notch suppression is enabled on every panel. The top panel
        caps the shell, so no lid pieces are added.
        """
        dims = self.dimensions
        t = self.thickness
        w_pattern = self._pattern(dims.inner_width)
        d_pattern = self._pattern(dims.inner_depth)
        h_pattern = self._pattern(dims.inner_height)

        back = create_rect_panel(
            FaceName.BACK,
            "back",
            build_rect_outline(
                dims.inner_width, dims.inner_height, t, w_pattern, h_pattern,
                PanelEdges(bottom=TAB, right=TAB, top=TAB, left=TAB),
                suppress_corner_notches=True,
            ),
        )
        left = create_rect_panel(
            FaceName.LEFT,
            "left",
            build_rect_outline(
                dims.inner_depth, dims.inner_height, t, d_pattern, h_pattern,
                PanelEdges(bottom=TAB, right=PLAIN, top=TAB, left=SLOT),
                suppress_corner_notches=True,
            ),
        )
        right = clone_face(left, FaceName.RIGHT, "right")
        bottom = create_rect_panel(
            FaceName.BOTTOM,
            "bottom",
            build_rect_outline(
                dims.inner_width, dims.inner_depth, t, w_pattern, d_pattern,
                PanelEdges(bottom=SLOT, right=SLOT, top=PLAIN, left=SLOT),
                suppress_corner_notches=True,
            ),
        )
        top = create_rect_panel(
            FaceName.TOP,
            "top",
            build_rect_outline(
                dims.inner_width, dims.inner_depth, t, w_pattern, d_pattern,
                PanelEdges(bottom=PLAIN, right=SLOT, top=SLOT, left=SLOT),
                suppress_corner_notches=True,
            ),
        )

        faces = [back, left, right, bottom, top]
        warnings = check_panel_alignment(faces)
        logger.debug("Composed open-front shell with %d panels", len(faces))
        return BoxGenerationResult(faces=tuple(faces), dimensions=dims, warnings=tuple(warnings))

    def _finger_all_edges(self) -> list[GeneratedFace]:
        dims = self.dimensions
        t = self.thickness
        w_pattern = self._pattern(dims.inner_width)
        d_pattern = self._pattern(dims.inner_depth)
        h_pattern = self._pattern(dims.inner_height)

        front = create_rect_panel(
            FaceName.FRONT,
            "front",
            build_rect_outline(
                dims.inner_width, dims.inner_height, t, w_pattern, h_pattern,
                PanelEdges(bottom=TAB, right=TAB, top=PLAIN, left=TAB),
            ),
        )
        back = clone_face(front, FaceName.BACK, "back")

        left = create_rect_panel(
            FaceName.LEFT,
            "left",
            build_rect_outline(
                dims.inner_depth, dims.inner_height, t, d_pattern, h_pattern,
                PanelEdges(bottom=TAB, right=SLOT, top=PLAIN, left=SLOT),
            ),
        )
        left = add_extra_paths(left, self._groove_paths(left, dims.inner_depth))
        right = clone_face(left, FaceName.RIGHT, "right")

        bottom = create_rect_panel(
            FaceName.BOTTOM,
            "bottom",
            build_rect_outline(
                dims.inner_width, dims.inner_depth, t, w_pattern, d_pattern,
                PanelEdges(bottom=SLOT, right=SLOT, top=SLOT, left=SLOT),
            ),
        )
        return [front, back, left, right, bottom]

    def _finger_vertical_edges(self) -> list[GeneratedFace]:
        dims = self.dimensions
        t = self.thickness
        settings = self.settings

        manual = settings.manual_finger_count
        if not settings.auto_finger_count and manual is not None and manual > 0:
            tabs = math.floor(manual)
        else:
            tabs = calculate_finger_count(dims.outer_height, self.finger_min, self.finger_max)
        tabs = max(1, tabs)
        logger.debug("Vertical-edge box uses %d tabs per seam", tabs)

        front = create_vertical_finger_face(
            FaceName.FRONT, "front", dims.inner_width, dims.outer_height, t, tabs,
            invert_left=False, invert_right=False,
        )
        back = clone_face(front, FaceName.BACK, "back")
        left = create_vertical_finger_face(
            FaceName.LEFT, "left", dims.inner_depth, dims.outer_height, t, tabs,
            invert_left=True, invert_right=True,
        )
        left = add_extra_paths(left, self._groove_paths(left, dims.inner_depth))
        right = clone_face(left, FaceName.RIGHT, "right")
        bottom = create_rect_face(FaceName.BOTTOM, "bottom", dims.outer_width, dims.outer_depth)
        return [front, back, left, right, bottom]

    def _groove_paths(self, face: GeneratedFace, span: float) -> list[FacePath]:
        """Score line for a sliding lid, measured down from the panel top."""
        if self.settings.lid_type is not LidType.SLIDING_LID:
            return []
        depth = self.settings.groove_depth
        offset = max(self.settings.groove_offset, 0.0)
        if depth <= 0 or offset >= face.height:
            return []
        height = min(depth, face.height - offset)
        return [FacePath(d=rect_path(self.thickness, offset, span, height), op=PathOperation.SCORE)]

    def _lid_faces(self) -> list[GeneratedFace]:
        dims = self.dimensions
        settings = self.settings
        match settings.lid_type:
            case LidType.NONE:
                return []
            case LidType.FLAT_LID:
                return [create_rect_face(FaceName.LID, "lid", dims.outer_width, dims.outer_depth)]
            case LidType.SLIDING_LID:
                return [create_rect_face(FaceName.LID, "lid", dims.inner_width, dims.inner_depth)]
            case LidType.FLAT_LID_WITH_LIP:
                faces = [create_rect_face(FaceName.LID, "lid", dims.outer_width, dims.outer_depth)]
                lip_height = settings.lip_height
                if lip_height <= 0:
                    return faces
                inset = max(settings.lip_inset, 0.0)
                lip_width = max(dims.inner_width - 2 * inset, 1.0)
                lip_depth = max(dims.inner_depth - 2 * inset, 1.0)
                side_length = max(lip_depth - 2 * self.thickness, 1.0)
                for side, length in (
                    ("front", lip_width),
                    ("back", lip_width),
                    ("left", side_length),
                    ("right", side_length),
                ):
                    faces.append(
                        create_rect_face(FaceName.LID_LIP, f"lid-lip-{side}", length, lip_height)
                    )
                return faces
            case _:
                raise ValueError(f"Unknown lid type: {settings.lid_type}")

    def _divider_faces(self) -> list[GeneratedFace]:
        settings = self.settings
        if not settings.dividers_enabled:
            return []
        dims = self.dimensions
        return build_divider_faces(
            dims.inner_width,
            dims.inner_depth,
            dims.inner_height,
            self.thickness,
            settings.divider_count_x,
            settings.divider_count_z,
            settings.divider_clearance,
        )


def generate_box_geometry(settings: BoxSettings) -> BoxGenerationResult:
    """Generate all panels of a box."""
    return BoxComposer(settings).generate()


def generate_open_front_geometry(settings: BoxSettings) -> BoxGenerationResult:
    """Generate the panels of an open-front shell."""
    return BoxComposer(settings).generate_open_front()
