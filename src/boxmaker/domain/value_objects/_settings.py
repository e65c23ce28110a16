"""Box and drawer settings value objects.

Settings are plain immutable records. They carry whatever the caller
supplied; the composers clamp every numeric field to a safe range before
use, so out-of-range values degrade to minimal geometry instead of
failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BoxType(str, Enum):
    """Joint layout of a generated box.

    Attributes:
        FINGER_ALL_EDGES: Finger joints on every seam, including the bottom.
        FINGER_VERTICAL_EDGES: Finger joints on vertical seams only; the
            bottom is a plain rectangle.
    """

    FINGER_ALL_EDGES = "finger_all_edges"
    FINGER_VERTICAL_EDGES = "finger_vertical_edges"


class LidType(str, Enum):
    """Lid style of a generated box."""

    NONE = "none"
    FLAT_LID = "flat_lid"
    FLAT_LID_WITH_LIP = "flat_lid_with_lip"
    SLIDING_LID = "sliding_lid"


class DimensionReference(str, Enum):
    """Which envelope the requested width/height/depth describe.

    Attributes:
        INSIDE: Dimensions describe the usable cavity.
        OUTSIDE: Dimensions describe the overall envelope.
    """

    INSIDE = "inside"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class BoxSettings:
    """Complete parameter set for one box.

    All lengths are millimetres.

    Attributes:
        width: Requested width (X axis).
        height: Requested height (Y axis).
        depth: Requested depth (Z axis).
        dimension_reference: Whether the size is inside or outside.
        material_thickness: Sheet thickness, also the finger depth.
        kerf: Width of material removed by the beam.
        apply_kerf_compensation: Whether downstream tooling should offset
            outlines by half the kerf.
        box_type: Joint layout.
        finger_min: Smallest acceptable finger width.
        finger_max: Largest acceptable finger width.
        auto_finger_count: Derive the vertical-edge tab count automatically.
        manual_finger_count: Tab count used when auto counting is off.
        lid_type: Lid style.
        groove_depth: Height of the sliding-lid groove.
        groove_offset: Distance from the panel top to the groove.
        lip_inset: Inset of the lid lip from the inner walls.
        lip_height: Height of the lid lip strips.
        dividers_enabled: Whether compartment dividers are generated.
        divider_count_x: Compartments along the width.
        divider_count_z: Compartments along the depth.
        divider_clearance: Extra slot width beyond the material thickness.
    """

    width: float = 100.0
    height: float = 60.0
    depth: float = 80.0
    dimension_reference: DimensionReference = DimensionReference.INSIDE
    material_thickness: float = 3.0
    kerf: float = 0.1
    apply_kerf_compensation: bool = False
    box_type: BoxType = BoxType.FINGER_ALL_EDGES
    finger_min: float = 5.0
    finger_max: float = 15.0
    auto_finger_count: bool = True
    manual_finger_count: int | None = None
    lid_type: LidType = LidType.NONE
    groove_depth: float = 2.0
    groove_offset: float = 3.0
    lip_inset: float = 2.0
    lip_height: float = 8.0
    dividers_enabled: bool = False
    divider_count_x: int = 1
    divider_count_z: int = 1
    divider_clearance: float = 0.2


@dataclass(frozen=True)
class DrawerSettings:
    """Parameters for a sliding drawer inside an open-front shell.

    Width, depth and height are the shell's outside dimensions.
    """

    width: float = 120.0
    depth: float = 80.0
    height: float = 60.0
    material_thickness: float = 3.0
    kerf: float = 0.15
    clearance: float = 1.0
    bottom_offset: float = 0.0
    finger_width: float = 10.0
    dividers_enabled: bool = False
    divider_count_x: int = 1
    divider_count_z: int = 1
    divider_clearance: float = 0.2
