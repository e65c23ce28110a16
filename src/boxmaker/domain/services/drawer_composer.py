"""Sliding drawer composition.

A sliding drawer is two boxes: an open-front shell built to the requested
outside size, and a lidless drawer sized to the shell's cavity minus the
running clearance. The drawer front carries a thumb notch.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..value_objects import (
    BoxSettings,
    BoxType,
    DimensionReference,
    DrawerDimensions,
    DrawerGenerationResult,
    DrawerSettings,
    FaceName,
    GeneratedFace,
    LidType,
)
from .box_composer import (
    build_divider_faces,
    generate_box_geometry,
    generate_open_front_geometry,
)
from .panel_assembler import ThumbNotchSpec, carve_thumb_notch, clamp

__all__ = [
    "compute_drawer_dimensions",
    "drawer_warnings",
    "generate_sliding_drawer",
]

logger = logging.getLogger(__name__)

MIN_OUTER = 10.0
MAX_OUTER = 5000.0
MIN_THICKNESS = 1.0
MAX_THICKNESS = 50.0
MAX_CLEARANCE = 50.0

_DRAWER_NAMES = {
    FaceName.FRONT: FaceName.DRAWER_FRONT,
    FaceName.BACK: FaceName.DRAWER_BACK,
    FaceName.LEFT: FaceName.DRAWER_LEFT,
    FaceName.RIGHT: FaceName.DRAWER_RIGHT,
    FaceName.BOTTOM: FaceName.DRAWER_BOTTOM,
}


def compute_drawer_dimensions(settings: DrawerSettings) -> DrawerDimensions:
    """Derive shell, drawer and opening sizes.

    Outer sizes are clamped to 10..5000 mm, thickness to 1..50 mm,
    clearance to 0..50 mm and the bottom offset to half the cavity
    height. The drawer loses two clearances on its width and one on its
    depth and height; the bottom offset raises it off the shell floor.
    """
    width = clamp(settings.width, MIN_OUTER, MAX_OUTER)
    depth = clamp(settings.depth, MIN_OUTER, MAX_OUTER)
    height = clamp(settings.height, MIN_OUTER, MAX_OUTER)
    t = clamp(settings.material_thickness, MIN_THICKNESS, MAX_THICKNESS)
    clearance = clamp(settings.clearance, 0.0, MAX_CLEARANCE)

    inner_height = max(1.0, height - 2 * t)
    bottom_offset = clamp(settings.bottom_offset, 0.0, inner_height / 2)
    inner_width = width - 2 * t
    inner_depth = depth - 2 * t

    drawer_width = inner_width - 2 * clearance
    drawer_depth = inner_depth - clearance
    drawer_height = inner_height - clearance - bottom_offset

    return DrawerDimensions(
        outer_width=width,
        outer_depth=depth,
        outer_height=height,
        inner_width=inner_width,
        inner_depth=inner_depth,
        inner_height=inner_height,
        drawer_width=drawer_width,
        drawer_depth=drawer_depth,
        drawer_height=drawer_height,
        opening_width=drawer_width + 2 * clearance,
        opening_height=drawer_height + clearance,
        thickness=t,
        clearance=clearance,
        bottom_offset=bottom_offset,
    )


def drawer_warnings(settings: DrawerSettings, dims: DrawerDimensions) -> list[str]:
    """Advisories for drawers that are valid geometry but unlikely to work."""
    warnings: list[str] = []
    if dims.clearance < max(settings.kerf, 0.0):
        warnings.append("Drawer clearance is less than kerf. Drawer may bind.")
    if dims.drawer_width <= 0 or dims.drawer_depth <= 0 or dims.drawer_height <= 0:
        warnings.append("Drawer dimensions are invalid. Check clearances and offsets.")
    return warnings


def _as_drawer_face(face: GeneratedFace) -> GeneratedFace:
    name = _DRAWER_NAMES.get(face.name, face.name)
    return replace(face, name=name, id=f"drawer-{face.id}")


def generate_sliding_drawer(
    settings: DrawerSettings, notch: ThumbNotchSpec = ThumbNotchSpec()
) -> DrawerGenerationResult:
    """Generate an open-front shell and the drawer that slides into it.

    Both boxes use a fixed finger width (``finger_width`` for min and max).
    The shell is an outside-referenced box with a capping top; the drawer
    is an outside-referenced lidless box. Shell panel ids are prefixed
    ``shell-`` and drawer panel ids ``drawer-`` so both sets can share a
    layout.

    Args:
        settings: Drawer parameters.
        notch: Thumb-notch sizing for the drawer front.

    Returns:
        DrawerGenerationResult with shell panels, drawer panels, derived
        dimensions and accumulated warnings.
    """
    dims = compute_drawer_dimensions(settings)
    t = dims.thickness
    finger = max(settings.finger_width, 0.1)
    warnings = drawer_warnings(settings, dims)

    shell = generate_open_front_geometry(
        BoxSettings(
            width=dims.outer_width,
            height=dims.outer_height,
            depth=dims.outer_depth,
            dimension_reference=DimensionReference.OUTSIDE,
            material_thickness=t,
            kerf=settings.kerf,
            box_type=BoxType.FINGER_ALL_EDGES,
            finger_min=finger,
            finger_max=finger,
            lid_type=LidType.FLAT_LID,
        )
    )
    shell_faces = tuple(replace(face, id=f"shell-{face.id}") for face in shell.faces)

    drawer = generate_box_geometry(
        BoxSettings(
            width=max(dims.drawer_width, 1.0),
            height=max(dims.drawer_height, 1.0),
            depth=max(dims.drawer_depth, 1.0),
            dimension_reference=DimensionReference.OUTSIDE,
            material_thickness=t,
            kerf=settings.kerf,
            box_type=BoxType.FINGER_ALL_EDGES,
            finger_min=finger,
            finger_max=finger,
            lid_type=LidType.NONE,
        )
    )
    drawer_faces = [_as_drawer_face(face) for face in drawer.faces]
    drawer_faces = [
        carve_thumb_notch(face, notch) if face.name is FaceName.DRAWER_FRONT else face
        for face in drawer_faces
    ]

    if settings.dividers_enabled:
        dividers = build_divider_faces(
            dims.drawer_width - 2 * t,
            dims.drawer_depth - 2 * t,
            dims.drawer_height - t,
            t,
            settings.divider_count_x,
            settings.divider_count_z,
            settings.divider_clearance,
        )
        drawer_faces.extend(replace(face, id=f"drawer-{face.id}") for face in dividers)

    warnings.extend(shell.warnings)
    warnings.extend(drawer.warnings)
    logger.debug(
        "Sliding drawer: %d shell panels, %d drawer panels, %d warnings",
        len(shell_faces),
        len(drawer_faces),
        len(warnings),
    )
    return DrawerGenerationResult(
        shell_faces=shell_faces,
        drawer_faces=tuple(drawer_faces),
        dimensions=dims,
        warnings=tuple(warnings),
    )
