"""Merging externally produced artwork onto a panel.

Artwork arrives as a path string (for example traced from a raster image)
and is placed in the panel's y-down path frame without touching its
outline. The panel's joints and size are never recomputed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from ..value_objects import FacePath, GeneratedFace, PathOperation, Point2D
from .outline import bounding_box
from .path_parser import DEFAULT_FLATTEN_STEP, parse_path, subpaths_to_path, transform_subpaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportedArtwork:
    """Artwork to merge onto a panel.

    Attributes:
        path: Path string in its own coordinate space.
        x: Panel x (y-down frame) the artwork's centre is moved to.
        y: Panel y (y-down frame) the artwork's centre is moved to.
        scale: Uniform scale applied about the artwork centre.
        rotation: Clockwise rotation in degrees about the artwork centre.
        op: Operation the merged path is tagged with.
    """

    path: str
    x: float
    y: float
    scale: float = 1.0
    rotation: float = 0.0
    op: PathOperation = PathOperation.ENGRAVE


def merge_imported_artwork(
    face: GeneratedFace,
    artwork: ImportedArtwork,
    step: float = DEFAULT_FLATTEN_STEP,
) -> GeneratedFace:
    """Place artwork on a panel as an extra path.

    Curves are flattened with ``step``. Artwork with no drawable points
    leaves the panel unchanged.

    Raises:
        UnsupportedPathCommand: If the artwork uses an unsupported command.
        PathSyntaxError: If the artwork path is malformed.
    """
    subpaths = parse_path(artwork.path, step)
    points = [p for sub in subpaths for p in sub.points]
    if not points:
        logger.debug("Artwork for %s has no points; nothing merged", face.id)
        return face

    min_x, min_y, max_x, max_y = bounding_box(points)
    cx = (min_x + max_x) / 2
    cy = (min_y + max_y) / 2
    angle = math.radians(artwork.rotation)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    scale = artwork.scale

    def place(p: Point2D) -> Point2D:
        dx = (p.x - cx) * scale
        dy = (p.y - cy) * scale
        return Point2D(
            artwork.x + dx * cos_a - dy * sin_a,
            artwork.y + dx * sin_a + dy * cos_a,
        )

    d = subpaths_to_path(transform_subpaths(subpaths, place))
    logger.debug(
        "Merged %d artwork subpaths onto %s as %s", len(subpaths), face.id, artwork.op.value
    )
    return replace(face, paths=face.paths + (FacePath(d=d, op=artwork.op),))
