"""Domain layer - box geometry engine."""

from .exceptions import PathSyntaxError, UnsupportedPathCommand
from .services import (
    generate_box_geometry,
    generate_open_front_geometry,
    generate_sliding_drawer,
)
from .value_objects import (
    BoxDimensions,
    BoxGenerationResult,
    BoxSettings,
    BoxType,
    DimensionReference,
    DrawerDimensions,
    DrawerGenerationResult,
    DrawerSettings,
    FaceName,
    FacePath,
    GeneratedFace,
    LidType,
    PathOperation,
    Point2D,
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
    "FaceName",
    "FacePath",
    "GeneratedFace",
    "LidType",
    "PathOperation",
    "PathSyntaxError",
    "Point2D",
    "UnsupportedPathCommand",
    "generate_box_geometry",
    "generate_open_front_geometry",
    "generate_sliding_drawer",
]
