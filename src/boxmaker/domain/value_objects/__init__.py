"""Value objects for the box domain.

This module provides immutable data types used throughout the box
generator. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Planar geometry and finger joints
from ._geometry import (
    EdgeDirection,
    EdgeJoint,
    FacePath,
    FingerPattern,
    FingerSegment,
    PathOperation,
    Point2D,
)

# Settings
from ._settings import (
    BoxSettings,
    BoxType,
    DimensionReference,
    DrawerSettings,
    LidType,
)

# Generated panels and dimensions
from ._faces import (
    BoxDimensions,
    BoxGenerationResult,
    DrawerDimensions,
    DrawerGenerationResult,
    FaceName,
    GeneratedFace,
)

__all__ = [
    "BoxDimensions",
    "BoxGenerationResult",
    "BoxSettings",
    "BoxType",
    "DimensionReference",
    "DrawerDimensions",
    "DrawerGenerationResult",
    "DrawerSettings",
    "EdgeDirection",
    "EdgeJoint",
    "FaceName",
    "FacePath",
    "FingerPattern",
    "FingerSegment",
    "GeneratedFace",
    "LidType",
    "PathOperation",
    "Point2D",
]
